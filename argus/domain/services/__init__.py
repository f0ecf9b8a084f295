"""Domain services - pure functions over domain models."""

from argus.domain.services.workflow_transitions import (
    MANDATE_WORKFLOW,
    MandateTransition,
    can_transition,
    get_valid_next_states,
    requires_investigator,
)

__all__: list[str] = [
    "MANDATE_WORKFLOW",
    "MandateTransition",
    "can_transition",
    "get_valid_next_states",
    "requires_investigator",
]
