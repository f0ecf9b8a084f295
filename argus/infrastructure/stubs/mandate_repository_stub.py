"""Mandate repository stub implementation.

In-memory implementation of MandateRepositoryProtocol for development
and testing. Conditional updates run under an asyncio.Lock so they
behave like single-statement UPDATE ... WHERE in a database.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from uuid import UUID

from argus.application.ports.mandate_repository import MandateRepositoryProtocol
from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError
from argus.domain.models.mandate import Mandate, MandateStatus
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class MandateRepositoryStub(FailureInjectionMixin, MandateRepositoryProtocol):
    """In-memory mandate storage.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._mandates: dict[UUID, Mandate] = {}
        self._lock = asyncio.Lock()
        self._init_failures("mandates")

    def add_mandate(self, mandate: Mandate) -> None:
        """Seed a mandate directly (test helper)."""
        self._mandates[mandate.id] = mandate

    def get(self, mandate_id: UUID) -> Mandate | None:
        """Read a mandate synchronously (test helper)."""
        return self._mandates.get(mandate_id)

    def clear(self) -> None:
        """Clear all stored data and injected failures."""
        self._mandates.clear()
        self.reset_failures()

    def count(self) -> int:
        return len(self._mandates)

    async def get_by_id(self, mandate_id: UUID) -> Mandate | None:
        self._check_failure("get_by_id")
        return self._mandates.get(mandate_id)

    async def save(self, mandate: Mandate) -> Mandate:
        self._check_failure("save")
        if mandate.id in self._mandates:
            raise DuplicateRecordError(
                "save", f"duplicate key {mandate.id}", table=self._table
            )
        self._mandates[mandate.id] = mandate
        return mandate

    async def assign_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        async with self._lock:
            self._check_failure("assign_investigator")
            mandate = self._mandates.get(mandate_id)
            if (
                mandate is None
                or mandate.assigned_to is not None
                or mandate.status != expected_status
            ):
                return None
            updated = mandate.with_assignment(investigator_id, now)
            self._mandates[mandate_id] = updated
            return updated

    async def clear_assignment(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        async with self._lock:
            self._check_failure("clear_assignment")
            mandate = self._mandates.get(mandate_id)
            if (
                mandate is None
                or mandate.assigned_to != investigator_id
                or mandate.status != expected_status
            ):
                return None
            updated = mandate.without_assignment(now)
            self._mandates[mandate_id] = updated
            return updated

    async def update_status(
        self,
        mandate_id: UUID,
        expected_status: MandateStatus,
        new_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        async with self._lock:
            self._check_failure("update_status")
            mandate = self._mandates.get(mandate_id)
            if mandate is None or mandate.status != expected_status:
                return None
            try:
                updated = mandate.with_status(new_status, now)
            except ValueError as e:
                # Mirrors a CHECK constraint violation in the database
                raise PersistenceError("update_status", str(e), table=self._table) from e
            self._mandates[mandate_id] = updated
            return updated

    async def count_by_investigator_and_status(
        self,
        investigator_id: UUID,
        status: MandateStatus,
    ) -> int:
        self._check_failure("count_by_investigator_and_status")
        return sum(
            1
            for m in self._mandates.values()
            if m.assigned_to == investigator_id and m.status == status
        )

    async def list_by_agency(
        self,
        agency_id: UUID,
        status: MandateStatus | None = None,
    ) -> list[Mandate]:
        self._check_failure("list_by_agency")
        mandates = [
            m
            for m in self._mandates.values()
            if m.agency_id == agency_id and (status is None or m.status == status)
        ]
        return sorted(mandates, key=lambda m: m.created_at, reverse=True)
