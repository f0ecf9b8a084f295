"""Agency repository protocol.

The workflow engine only needs to resolve who receives agency-side
notifications: the owner user of an agency.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID


class AgencyRepositoryProtocol(Protocol):
    """Protocol for agency lookups."""

    @abstractmethod
    async def get_owner_id(self, agency_id: UUID) -> UUID | None:
        """Get the user id owning an agency.

        Returns:
            The owner's user UUID, or None if the agency does not exist.

        Raises:
            PersistenceError: If the lookup fails.
        """
        ...
