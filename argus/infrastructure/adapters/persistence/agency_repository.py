"""Supabase implementation of AgencyRepositoryProtocol."""

from __future__ import annotations

from uuid import UUID

from argus.application.ports.agency_repository import AgencyRepositoryProtocol
from argus.infrastructure.adapters.persistence.base import SupabaseRepository


class SupabaseAgencyRepository(SupabaseRepository, AgencyRepositoryProtocol):
    """Agency owner lookups on the `agencies` table."""

    table_name = "agencies"

    async def get_owner_id(self, agency_id: UUID) -> UUID | None:
        rows = await self._fetch_rows(
            "get_owner_id",
            self._query().select("owner_id").eq("id", str(agency_id)),
        )
        if not rows or not rows[0].get("owner_id"):
            return None
        return UUID(rows[0]["owner_id"])
