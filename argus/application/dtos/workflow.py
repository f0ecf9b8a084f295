"""Workflow action DTOs.

Application-layer DTOs returned by the workflow services. The API layer
converts these to Pydantic response models.

Architecture Note:
An action has three possible outcomes. SUCCEEDED and REJECTED are
ordinary results (a rejection carries the user-facing reason of the
first failing rule). FAILED means an infrastructure fault: the caller
gets a generic message and the diagnostic detail stays in the logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from argus.domain.models.candidature import Candidature
from argus.domain.models.mandate import (
    AssignmentType,
    Mandate,
    MandateLocation,
    MandatePriority,
)
from argus.domain.models.rating import MandateRating

GENERIC_FAILURE_MESSAGE = "Une erreur est survenue. Veuillez réessayer."


class WorkflowOutcome(str, Enum):
    """Outcome of a workflow action.

    Values:
        SUCCEEDED: Mutation committed.
        REJECTED: A business rule refused the action; nothing was written.
        FAILED: Infrastructure failure; nothing was notified.
    """

    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class WorkflowActionResult:
    """Result of a workflow action.

    Attributes:
        outcome: What happened.
        error: User-facing message when not SUCCEEDED.
        mandate: Mandate state after the action, when relevant.
        candidature: Candidature state after the action, when relevant.
        rating: Rating created by the action, when relevant.
        redirect_url: Where the UI should navigate next, when relevant.
    """

    outcome: WorkflowOutcome
    error: str | None = None
    mandate: Mandate | None = None
    candidature: Candidature | None = None
    rating: MandateRating | None = None
    redirect_url: str | None = None

    @property
    def success(self) -> bool:
        """True when the action committed."""
        return self.outcome == WorkflowOutcome.SUCCEEDED

    @classmethod
    def succeeded(
        cls,
        *,
        mandate: Mandate | None = None,
        candidature: Candidature | None = None,
        rating: MandateRating | None = None,
        redirect_url: str | None = None,
    ) -> WorkflowActionResult:
        return cls(
            outcome=WorkflowOutcome.SUCCEEDED,
            mandate=mandate,
            candidature=candidature,
            rating=rating,
            redirect_url=redirect_url,
        )

    @classmethod
    def rejected(cls, reason: str) -> WorkflowActionResult:
        return cls(outcome=WorkflowOutcome.REJECTED, error=reason)

    @classmethod
    def failed(cls, message: str = GENERIC_FAILURE_MESSAGE) -> WorkflowActionResult:
        return cls(outcome=WorkflowOutcome.FAILED, error=message)


@dataclass(frozen=True)
class MandateDraftDTO:
    """Input for mandate creation.

    Attributes:
        agency_id: The posting agency.
        title: Short title.
        mandate_type: Kind of investigation.
        description: Full description.
        location: Where the work takes place.
        date_required: When the work is required.
        duration: Free-text expected duration.
        priority: Urgency level.
        assignment_type: DIRECT or PUBLIC.
        assigned_to: Chosen investigator (DIRECT only).
        budget: Optional budget.
    """

    agency_id: UUID
    title: str
    mandate_type: str
    description: str
    location: MandateLocation
    date_required: datetime
    duration: str
    priority: MandatePriority = MandatePriority.NORMAL
    assignment_type: AssignmentType = AssignmentType.PUBLIC
    assigned_to: UUID | None = None
    budget: str | None = None
