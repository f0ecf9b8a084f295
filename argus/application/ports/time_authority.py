"""Time Authority Protocol - interface for consistent timestamp provisioning.

Services that need the current time inject a TimeAuthorityProtocol
implementation instead of calling datetime.now() directly, so date
rules (minimum lead time, "in the future") are testable with a frozen
clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority.

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time as a timezone-aware UTC datetime."""
        ...


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
