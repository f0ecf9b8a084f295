"""Candidature repository stub implementation.

In-memory implementation of CandidatureRepositoryProtocol. Like the
mandate_interests table it keeps one candidature per
(mandate, investigator) pair.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from uuid import UUID

from argus.application.ports.candidature_repository import (
    CandidatureRepositoryProtocol,
)
from argus.domain.errors.persistence import DuplicateRecordError
from argus.domain.models.candidature import Candidature, CandidatureStatus
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class CandidatureRepositoryStub(FailureInjectionMixin, CandidatureRepositoryProtocol):
    """In-memory candidature storage.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._candidatures: dict[UUID, Candidature] = {}
        self._lock = asyncio.Lock()
        self._init_failures("mandate_interests")

    def add_candidature(self, candidature: Candidature) -> None:
        """Seed a candidature directly (test helper)."""
        self._candidatures[candidature.id] = candidature

    def get(self, candidature_id: UUID) -> Candidature | None:
        """Read a candidature synchronously (test helper)."""
        return self._candidatures.get(candidature_id)

    def clear(self) -> None:
        self._candidatures.clear()
        self.reset_failures()

    def count(self) -> int:
        return len(self._candidatures)

    async def get_by_id(self, candidature_id: UUID) -> Candidature | None:
        self._check_failure("get_by_id")
        return self._candidatures.get(candidature_id)

    async def save(self, candidature: Candidature) -> Candidature:
        async with self._lock:
            self._check_failure("save")
            for existing in self._candidatures.values():
                if (
                    existing.mandate_id == candidature.mandate_id
                    and existing.investigator_id == candidature.investigator_id
                ):
                    raise DuplicateRecordError(
                        "save",
                        "duplicate key (mandate_id, investigator_id)",
                        table=self._table,
                    )
            self._candidatures[candidature.id] = candidature
            return candidature

    async def find_by_mandate_and_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> Candidature | None:
        self._check_failure("find_by_mandate_and_investigator")
        for candidature in self._candidatures.values():
            if (
                candidature.mandate_id == mandate_id
                and candidature.investigator_id == investigator_id
            ):
                return candidature
        return None

    async def list_by_mandate(
        self,
        mandate_id: UUID,
        status: CandidatureStatus | None = None,
    ) -> list[Candidature]:
        self._check_failure("list_by_mandate")
        candidatures = [
            c
            for c in self._candidatures.values()
            if c.mandate_id == mandate_id and (status is None or c.status == status)
        ]
        return sorted(candidatures, key=lambda c: c.created_at)

    async def update_status(
        self,
        candidature_id: UUID,
        expected_status: CandidatureStatus,
        new_status: CandidatureStatus,
        now: datetime,
    ) -> Candidature | None:
        async with self._lock:
            self._check_failure("update_status")
            candidature = self._candidatures.get(candidature_id)
            if candidature is None or candidature.status != expected_status:
                return None
            updated = candidature.with_status(new_status, now)
            self._candidatures[candidature_id] = updated
            return updated

    async def reject_pending_for_mandate(
        self,
        mandate_id: UUID,
        exclude_candidature_id: UUID,
        now: datetime,
    ) -> list[Candidature]:
        async with self._lock:
            self._check_failure("reject_pending_for_mandate")
            rejected: list[Candidature] = []
            for candidature in sorted(
                self._candidatures.values(), key=lambda c: c.created_at
            ):
                if (
                    candidature.mandate_id == mandate_id
                    and candidature.id != exclude_candidature_id
                    and candidature.status == CandidatureStatus.INTERESTED
                ):
                    updated = candidature.with_status(CandidatureStatus.REJECTED, now)
                    self._candidatures[candidature.id] = updated
                    rejected.append(updated)
            return rejected
