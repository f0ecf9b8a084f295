"""Candidature domain models.

A candidature (mandate_interests table) is an investigator's expression
of interest in an open public mandate. It is created INTERESTED and
resolved once to ACCEPTED or REJECTED.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID


class CandidatureStatus(str, Enum):
    """Status states for a candidature.

    State Transition Matrix:
    - INTERESTED -> ACCEPTED, REJECTED
    - ACCEPTED -> (resolved)
    - REJECTED -> (resolved)
    """

    INTERESTED = "interested"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    def is_resolved(self) -> bool:
        """Check if the candidature has been decided.

        Returns:
            True if ACCEPTED or REJECTED, False otherwise.
        """
        return self != CandidatureStatus.INTERESTED


@dataclass(frozen=True, eq=True)
class Candidature:
    """An investigator's application to a mandate.

    Attributes:
        id: Unique identifier.
        mandate_id: The mandate applied to.
        investigator_id: The applying investigator.
        status: Current status.
        created_at: When the investigator applied (UTC).
        updated_at: Last status change (UTC, nullable).
    """

    id: UUID
    mandate_id: UUID
    investigator_id: UUID
    created_at: datetime
    status: CandidatureStatus = field(default=CandidatureStatus.INTERESTED)
    updated_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (UTC)")

    def with_status(self, new_status: CandidatureStatus, now: datetime) -> Candidature:
        """Create a copy with an updated status."""
        return replace(self, status=new_status, updated_at=now)
