"""Investigator repository protocol.

Read-only contract for the investigator facts the workflow engine needs:
the profile (existence, availability status) and blocked calendar dates.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import date
    from uuid import UUID

    from argus.domain.models.investigator import InvestigatorProfile


class InvestigatorRepositoryProtocol(Protocol):
    """Protocol for investigator lookups."""

    @abstractmethod
    async def get_profile(self, investigator_id: UUID) -> InvestigatorProfile | None:
        """Retrieve an investigator profile.

        Returns:
            The profile if found, None otherwise.

        Raises:
            PersistenceError: If the lookup fails.
        """
        ...

    @abstractmethod
    async def get_unavailable_dates(
        self,
        investigator_id: UUID,
        on_or_after: date | None = None,
    ) -> frozenset[date]:
        """Retrieve the calendar dates an investigator blocked.

        Args:
            investigator_id: The investigator UUID.
            on_or_after: Only return dates on or after this day.

        Raises:
            PersistenceError: If the query fails.
        """
        ...
