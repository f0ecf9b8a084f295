"""Supabase implementation of InvestigatorRepositoryProtocol.

Profiles live in `profiles`; blocked days in `unavailable_dates`
(profile_id, date).
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from argus.application.ports.investigator_repository import (
    InvestigatorRepositoryProtocol,
)
from argus.domain.models.investigator import AvailabilityStatus, InvestigatorProfile
from argus.infrastructure.adapters.persistence.base import (
    SupabaseRepository,
    parse_date,
)

UNAVAILABLE_DATES_TABLE = "unavailable_dates"


class SupabaseInvestigatorRepository(
    SupabaseRepository, InvestigatorRepositoryProtocol
):
    """Read-only access to investigator profiles and unavailable dates."""

    table_name = "profiles"

    async def get_profile(self, investigator_id: UUID) -> InvestigatorProfile | None:
        rows = await self._fetch_rows(
            "get_profile",
            self._query()
            .select("id, name, availability_status, license_number, region")
            .eq("id", str(investigator_id)),
        )
        if not rows:
            return None
        row = rows[0]
        status = row.get("availability_status")
        return InvestigatorProfile(
            id=UUID(row["id"]),
            name=row.get("name") or "",
            availability_status=AvailabilityStatus(status) if status else None,
            license_number=row.get("license_number"),
            region=row.get("region"),
        )

    async def get_unavailable_dates(
        self,
        investigator_id: UUID,
        on_or_after: date | None = None,
    ) -> frozenset[date]:
        query = (
            self._client.table(UNAVAILABLE_DATES_TABLE)
            .select("date")
            .eq("profile_id", str(investigator_id))
        )
        if on_or_after is not None:
            query = query.gte("date", on_or_after.isoformat())
        rows = await self._fetch_rows("get_unavailable_dates", query)
        return frozenset(parse_date(row["date"]) for row in rows if row.get("date"))
