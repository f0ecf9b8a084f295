"""Mandate domain models.

This module defines the domain models for mandates (investigative work
orders posted by an agency):
- MandateStatus: Lifecycle states (see workflow_transitions for legal moves)
- MandatePriority, AssignmentType: Descriptive enumerations
- MandateLocation: Where the work takes place
- Mandate: Main mandate aggregate

Invariants:
- assigned_to is set whenever status is IN_PROGRESS or COMPLETED
- assigned_to is None whenever status is OPEN
- Mandates are never deleted; CANCELLED is a terminal status
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID


class MandateStatus(str, Enum):
    """Status states for a mandate.

    A mandate is born OPEN (public candidature) or IN_PROGRESS (direct
    assignment). COMPLETED and CANCELLED end the normal flow; the
    transition table still allows recovery moves out of COMPLETED and
    EXPIRED.
    """

    OPEN = "open"
    """Waiting for candidatures or an assignment."""

    IN_PROGRESS = "in-progress"
    """An investigator is working on the mandate."""

    COMPLETED = "completed"
    """Work delivered and accepted by the agency."""

    CANCELLED = "cancelled"
    """Cancelled by the agency."""

    EXPIRED = "expired"
    """Required date passed without an assignment."""

    def is_terminal(self) -> bool:
        """Check if this status ends the normal flow.

        Returns:
            True if COMPLETED or CANCELLED, False otherwise.
        """
        return self in (MandateStatus.COMPLETED, MandateStatus.CANCELLED)

    def accepts_assignment(self) -> bool:
        """Check if an investigator may be assigned in this status.

        Returns:
            False for COMPLETED, CANCELLED and EXPIRED.
        """
        return self not in (
            MandateStatus.COMPLETED,
            MandateStatus.CANCELLED,
            MandateStatus.EXPIRED,
        )


class MandatePriority(str, Enum):
    """Urgency level chosen by the agency."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class AssignmentType(str, Enum):
    """How the investigator is chosen.

    PUBLIC mandates collect candidatures; DIRECT mandates are assigned
    to a chosen investigator at creation time.
    """

    DIRECT = "direct"
    PUBLIC = "public"


# Statuses that require an assigned investigator
ASSIGNED_STATUSES: frozenset[MandateStatus] = frozenset(
    {MandateStatus.IN_PROGRESS, MandateStatus.COMPLETED}
)


@dataclass(frozen=True)
class MandateLocation:
    """Location of the mandate.

    Attributes:
        city: City name.
        region: Quebec administrative region.
        postal_code: Canadian postal code (A1A 1A1).
        latitude: Geocoded latitude (0.0 when unknown).
        longitude: Geocoded longitude (0.0 when unknown).
    """

    city: str
    region: str
    postal_code: str
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True, eq=True)
class Mandate:
    """A unit of investigative work posted by an agency.

    Attributes:
        id: Unique identifier.
        agency_id: Owning agency.
        title: Short title shown to investigators.
        mandate_type: Kind of investigation (surveillance, filature, ...).
        description: Full description of the work.
        location: Where the work takes place.
        date_required: When the work is required (UTC, nullable).
        duration: Free-text expected duration.
        priority: Urgency level.
        assignment_type: DIRECT or PUBLIC.
        status: Current lifecycle status.
        assigned_to: Assigned investigator (nullable).
        budget: Optional budget as entered by the agency.
        created_at: Creation timestamp (UTC).
        updated_at: Last update timestamp (UTC).
        completed_at: When the mandate was completed (UTC, nullable).
    """

    id: UUID
    agency_id: UUID
    title: str
    mandate_type: str
    description: str
    location: MandateLocation
    date_required: datetime | None
    duration: str
    created_at: datetime
    priority: MandatePriority = field(default=MandatePriority.NORMAL)
    assignment_type: AssignmentType = field(default=AssignmentType.PUBLIC)
    status: MandateStatus = field(default=MandateStatus.OPEN)
    assigned_to: UUID | None = field(default=None)
    budget: str | None = field(default=None)
    updated_at: datetime | None = field(default=None)
    completed_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate mandate invariants.

        Raises:
            ValueError: If any invariant is violated.
        """
        if self.status in ASSIGNED_STATUSES and self.assigned_to is None:
            raise ValueError(
                f"assigned_to required for status {self.status.value}"
            )

        if self.status == MandateStatus.OPEN and self.assigned_to is not None:
            raise ValueError("assigned_to must be None for status open")

        for name in ("created_at", "updated_at", "completed_at", "date_required"):
            value = getattr(self, name)
            if value is not None and value.tzinfo is None:
                raise ValueError(f"{name} must be timezone-aware (UTC)")

    @property
    def has_assigned_investigator(self) -> bool:
        """True when an investigator is assigned."""
        return self.assigned_to is not None

    def with_assignment(self, investigator_id: UUID, now: datetime) -> Mandate:
        """Create a copy assigned to an investigator and IN_PROGRESS.

        Args:
            investigator_id: The investigator to assign.
            now: Update timestamp.

        Returns:
            New Mandate with assigned_to and status set.
        """
        return replace(
            self,
            assigned_to=investigator_id,
            status=MandateStatus.IN_PROGRESS,
            updated_at=now,
        )

    def without_assignment(self, now: datetime) -> Mandate:
        """Create a copy with the assignment cleared and status OPEN."""
        return replace(
            self,
            assigned_to=None,
            status=MandateStatus.OPEN,
            updated_at=now,
        )

    def with_status(self, new_status: MandateStatus, now: datetime) -> Mandate:
        """Create a copy with an updated status.

        completed_at is set when moving to COMPLETED and cleared when
        leaving it.

        Args:
            new_status: Target status.
            now: Update timestamp.

        Returns:
            New Mandate with the updated status.
        """
        completed_at = self.completed_at
        if new_status == MandateStatus.COMPLETED:
            completed_at = now
        elif self.status == MandateStatus.COMPLETED:
            completed_at = None

        return replace(
            self,
            status=new_status,
            updated_at=now,
            completed_at=completed_at,
        )
