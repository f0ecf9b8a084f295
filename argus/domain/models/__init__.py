"""Domain models for Argus.

Contains value objects and aggregates that represent core business
concepts. These models are immutable and contain no infrastructure
dependencies.
"""

from argus.domain.models.candidature import Candidature, CandidatureStatus
from argus.domain.models.investigator import (
    AvailabilityStatus,
    InvestigatorAvailability,
    InvestigatorProfile,
)
from argus.domain.models.mandate import (
    AssignmentType,
    Mandate,
    MandateLocation,
    MandatePriority,
    MandateStatus,
)
from argus.domain.models.notification import Notification, NotificationType
from argus.domain.models.rating import MandateRating
from argus.domain.models.validation import ValidationResult

__all__: list[str] = [
    "AssignmentType",
    "AvailabilityStatus",
    "Candidature",
    "CandidatureStatus",
    "InvestigatorAvailability",
    "InvestigatorProfile",
    "Mandate",
    "MandateLocation",
    "MandatePriority",
    "MandateRating",
    "MandateStatus",
    "Notification",
    "NotificationType",
    "ValidationResult",
]
