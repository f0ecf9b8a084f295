"""Supabase implementation of CandidatureRepositoryProtocol (`mandate_interests`)."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from argus.application.ports.candidature_repository import (
    CandidatureRepositoryProtocol,
)
from argus.domain.models.candidature import Candidature, CandidatureStatus
from argus.infrastructure.adapters.persistence.base import (
    SupabaseRepository,
    parse_timestamp,
    to_iso,
)


class SupabaseCandidatureRepository(SupabaseRepository, CandidatureRepositoryProtocol):
    """Candidatures stored in the `mandate_interests` table."""

    table_name = "mandate_interests"

    def _row_to_candidature(self, row: dict[str, Any]) -> Candidature:
        return Candidature(
            id=UUID(row["id"]),
            mandate_id=UUID(row["mandate_id"]),
            investigator_id=UUID(row["investigator_id"]),
            created_at=parse_timestamp(row["created_at"]),  # type: ignore[arg-type]
            status=CandidatureStatus(row["status"]),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    def _first_or_none(self, rows: list[dict[str, Any]]) -> Candidature | None:
        return self._row_to_candidature(rows[0]) if rows else None

    async def get_by_id(self, candidature_id: UUID) -> Candidature | None:
        rows = await self._fetch_rows(
            "get_by_id", self._query().select("*").eq("id", str(candidature_id))
        )
        return self._first_or_none(rows)

    async def save(self, candidature: Candidature) -> Candidature:
        rows = await self._fetch_rows(
            "save",
            self._query().insert(
                {
                    "id": str(candidature.id),
                    "mandate_id": str(candidature.mandate_id),
                    "investigator_id": str(candidature.investigator_id),
                    "status": candidature.status.value,
                    "created_at": to_iso(candidature.created_at),
                    "updated_at": to_iso(candidature.updated_at),
                }
            ),
        )
        return self._first_or_none(rows) or candidature

    async def find_by_mandate_and_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> Candidature | None:
        rows = await self._fetch_rows(
            "find_by_mandate_and_investigator",
            self._query()
            .select("*")
            .eq("mandate_id", str(mandate_id))
            .eq("investigator_id", str(investigator_id))
            .limit(1),
        )
        return self._first_or_none(rows)

    async def list_by_mandate(
        self,
        mandate_id: UUID,
        status: CandidatureStatus | None = None,
    ) -> list[Candidature]:
        query = self._query().select("*").eq("mandate_id", str(mandate_id))
        if status is not None:
            query = query.eq("status", status.value)
        rows = await self._fetch_rows("list_by_mandate", query.order("created_at"))
        return [self._row_to_candidature(row) for row in rows]

    async def update_status(
        self,
        candidature_id: UUID,
        expected_status: CandidatureStatus,
        new_status: CandidatureStatus,
        now: datetime,
    ) -> Candidature | None:
        rows = await self._fetch_rows(
            "update_status",
            self._query()
            .update({"status": new_status.value, "updated_at": now.isoformat()})
            .eq("id", str(candidature_id))
            .eq("status", expected_status.value),
        )
        return self._first_or_none(rows)

    async def reject_pending_for_mandate(
        self,
        mandate_id: UUID,
        exclude_candidature_id: UUID,
        now: datetime,
    ) -> list[Candidature]:
        rows = await self._fetch_rows(
            "reject_pending_for_mandate",
            self._query()
            .update(
                {
                    "status": CandidatureStatus.REJECTED.value,
                    "updated_at": now.isoformat(),
                }
            )
            .eq("mandate_id", str(mandate_id))
            .neq("id", str(exclude_candidature_id))
            .eq("status", CandidatureStatus.INTERESTED.value),
        )
        return [self._row_to_candidature(row) for row in rows]
