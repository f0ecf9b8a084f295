"""Application DTOs returned by use-case services."""

from argus.application.dtos.workflow import (
    GENERIC_FAILURE_MESSAGE,
    MandateDraftDTO,
    WorkflowActionResult,
    WorkflowOutcome,
)

__all__: list[str] = [
    "GENERIC_FAILURE_MESSAGE",
    "MandateDraftDTO",
    "WorkflowActionResult",
    "WorkflowOutcome",
]
