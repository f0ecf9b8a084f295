"""Mandate repository protocol.

This module defines the persistence contract for mandates. Follows
hexagonal architecture with port/adapter pattern.

Concurrency contract:
The assignment check in MandateValidationService and the write that
follows are not atomic. Implementations MUST make assign_investigator,
clear_assignment and update_status conditional updates (compare-and-set)
so two concurrent accepts cannot both assign the same mandate.

Error contract:
Read/write faults raise PersistenceError. A conditional update whose
condition does not hold is NOT an error: it returns None.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime
    from uuid import UUID

    from argus.domain.models.mandate import Mandate, MandateStatus


class MandateRepositoryProtocol(Protocol):
    """Protocol for mandate persistence."""

    @abstractmethod
    async def get_by_id(self, mandate_id: UUID) -> Mandate | None:
        """Retrieve a mandate by ID.

        Args:
            mandate_id: The mandate UUID.

        Returns:
            The Mandate if found, None otherwise.

        Raises:
            PersistenceError: If the lookup fails.
        """
        ...

    @abstractmethod
    async def save(self, mandate: Mandate) -> Mandate:
        """Insert a new mandate.

        Args:
            mandate: The mandate to create.

        Returns:
            The stored mandate.

        Raises:
            PersistenceError: If the insert fails.
        """
        ...

    @abstractmethod
    async def assign_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        """Atomically assign an unassigned mandate and move it IN_PROGRESS.

        Equivalent to:
            UPDATE mandates SET assigned_to = :investigator_id,
                status = 'in-progress', updated_at = :now
            WHERE id = :mandate_id AND assigned_to IS NULL
                AND status = :expected_status

        Args:
            mandate_id: The mandate to assign.
            investigator_id: The investigator to assign.
            expected_status: Status observed before the update.
            now: Update timestamp.

        Returns:
            The updated Mandate, or None if the condition did not hold
            (another request assigned or changed the mandate first).

        Raises:
            PersistenceError: If the update fails.
        """
        ...

    @abstractmethod
    async def clear_assignment(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        """Atomically clear the assignment and move the mandate back to OPEN.

        Equivalent to:
            UPDATE mandates SET assigned_to = NULL, status = 'open'
            WHERE id = :mandate_id AND assigned_to = :investigator_id
              AND status = :expected_status

        Returns:
            The updated Mandate, or None if the mandate is no longer
            assigned to that investigator or its status changed.

        Raises:
            PersistenceError: If the update fails.
        """
        ...

    @abstractmethod
    async def update_status(
        self,
        mandate_id: UUID,
        expected_status: MandateStatus,
        new_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        """Atomically change the status if it still equals expected_status.

        completed_at is set when moving to COMPLETED and cleared when
        leaving it.

        Returns:
            The updated Mandate, or None if the status changed meanwhile.

        Raises:
            PersistenceError: If the update fails.
        """
        ...

    @abstractmethod
    async def count_by_investigator_and_status(
        self,
        investigator_id: UUID,
        status: MandateStatus,
    ) -> int:
        """Count mandates assigned to an investigator in a given status.

        Raises:
            PersistenceError: If the count query fails.
        """
        ...

    @abstractmethod
    async def list_by_agency(
        self,
        agency_id: UUID,
        status: MandateStatus | None = None,
    ) -> list[Mandate]:
        """List an agency's mandates, newest first.

        Args:
            agency_id: The agency UUID.
            status: Optional status filter.

        Raises:
            PersistenceError: If the query fails.
        """
        ...
