"""Investigator domain models.

Only the facts the workflow engine needs are modelled here: identity,
declared availability status and the set of unavailable calendar dates.
Profile editing lives outside this core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class AvailabilityStatus(str, Enum):
    """Availability declared by the investigator."""

    AVAILABLE = "available"
    BUSY = "busy"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class InvestigatorProfile:
    """Investigator profile as seen by the workflow engine.

    Attributes:
        id: Profile identifier (same as the auth user id).
        name: Display name.
        availability_status: Declared availability (None when never set).
        license_number: BSP license number, when provided.
        region: Home region, when provided.
    """

    id: UUID
    name: str
    availability_status: AvailabilityStatus | None = None
    license_number: str | None = None
    region: str | None = None

    @property
    def is_unavailable(self) -> bool:
        """True when the investigator declared themself unavailable."""
        return self.availability_status == AvailabilityStatus.UNAVAILABLE


@dataclass(frozen=True)
class InvestigatorAvailability:
    """Derived availability facts used for assignment validation.

    Attributes:
        investigator_id: The investigator.
        availability_status: Declared availability status.
        unavailable_dates: Calendar dates the investigator blocked.
    """

    investigator_id: UUID
    availability_status: AvailabilityStatus | None
    unavailable_dates: frozenset[date] = field(default_factory=frozenset)

    def is_unavailable_on(self, moment: date | datetime) -> bool:
        """Check if the investigator blocked the calendar date of a moment.

        Comparison is by calendar date only; the time of day is ignored.

        Args:
            moment: A date or datetime.

        Returns:
            True if that calendar date is blocked.
        """
        day = moment.date() if isinstance(moment, datetime) else moment
        return day in self.unavailable_dates
