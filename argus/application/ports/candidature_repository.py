"""Candidature repository protocol.

Persistence contract for candidatures (the mandate_interests table).
Status changes are conditional updates: a candidature is only moved out
of the status the caller observed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime
    from uuid import UUID

    from argus.domain.models.candidature import Candidature, CandidatureStatus


class CandidatureRepositoryProtocol(Protocol):
    """Protocol for candidature persistence."""

    @abstractmethod
    async def get_by_id(self, candidature_id: UUID) -> Candidature | None:
        """Retrieve a candidature by ID.

        Raises:
            PersistenceError: If the lookup fails.
        """
        ...

    @abstractmethod
    async def save(self, candidature: Candidature) -> Candidature:
        """Insert a new candidature.

        Raises:
            PersistenceError: If the insert fails.
        """
        ...

    @abstractmethod
    async def find_by_mandate_and_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> Candidature | None:
        """Find the candidature of an investigator for a mandate, if any.

        Raises:
            PersistenceError: If the query fails.
        """
        ...

    @abstractmethod
    async def list_by_mandate(
        self,
        mandate_id: UUID,
        status: CandidatureStatus | None = None,
    ) -> list[Candidature]:
        """List the candidatures of a mandate, oldest first.

        Raises:
            PersistenceError: If the query fails.
        """
        ...

    @abstractmethod
    async def update_status(
        self,
        candidature_id: UUID,
        expected_status: CandidatureStatus,
        new_status: CandidatureStatus,
        now: datetime,
    ) -> Candidature | None:
        """Atomically change the status if it still equals expected_status.

        Returns:
            The updated Candidature, or None if the condition did not hold.

        Raises:
            PersistenceError: If the update fails.
        """
        ...

    @abstractmethod
    async def reject_pending_for_mandate(
        self,
        mandate_id: UUID,
        exclude_candidature_id: UUID,
        now: datetime,
    ) -> list[Candidature]:
        """Reject every INTERESTED candidature of a mandate except one.

        Returns:
            The candidatures that were rejected.

        Raises:
            PersistenceError: If the update fails.
        """
        ...
