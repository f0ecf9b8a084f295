"""Supabase implementation of MandateRepositoryProtocol.

Conditional updates are single PATCH requests whose filters carry the
condition (for example assigned_to IS NULL AND status = 'open'); an
empty result set means the condition did not hold.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from argus.application.ports.mandate_repository import MandateRepositoryProtocol
from argus.domain.models.mandate import (
    AssignmentType,
    Mandate,
    MandateLocation,
    MandatePriority,
    MandateStatus,
)
from argus.infrastructure.adapters.persistence.base import (
    SupabaseRepository,
    parse_timestamp,
    to_iso,
)


class SupabaseMandateRepository(SupabaseRepository, MandateRepositoryProtocol):
    """Mandates stored in the `mandates` table."""

    table_name = "mandates"

    def _row_to_mandate(self, row: dict[str, Any]) -> Mandate:
        assigned_to = row.get("assigned_to")
        return Mandate(
            id=UUID(row["id"]),
            agency_id=UUID(row["agency_id"]),
            title=row["title"],
            mandate_type=row["type"],
            description=row.get("description") or "",
            location=MandateLocation(
                city=row.get("city") or "",
                region=row.get("region") or "",
                postal_code=row.get("postal_code") or "",
                latitude=float(row.get("latitude") or 0.0),
                longitude=float(row.get("longitude") or 0.0),
            ),
            date_required=parse_timestamp(row.get("date_required")),
            duration=row.get("duration") or "",
            created_at=parse_timestamp(row["created_at"]),  # type: ignore[arg-type]
            priority=MandatePriority(row.get("priority") or MandatePriority.NORMAL.value),
            assignment_type=AssignmentType(
                row.get("assignment_type") or AssignmentType.PUBLIC.value
            ),
            status=MandateStatus(row["status"]),
            assigned_to=UUID(assigned_to) if assigned_to else None,
            budget=row.get("budget"),
            updated_at=parse_timestamp(row.get("updated_at")),
            completed_at=parse_timestamp(row.get("completed_at")),
        )

    def _mandate_to_row(self, mandate: Mandate) -> dict[str, Any]:
        return {
            "id": str(mandate.id),
            "agency_id": str(mandate.agency_id),
            "title": mandate.title,
            "type": mandate.mandate_type,
            "description": mandate.description,
            "city": mandate.location.city,
            "region": mandate.location.region,
            "postal_code": mandate.location.postal_code,
            "latitude": mandate.location.latitude,
            "longitude": mandate.location.longitude,
            "date_required": to_iso(mandate.date_required),
            "duration": mandate.duration,
            "priority": mandate.priority.value,
            "assignment_type": mandate.assignment_type.value,
            "status": mandate.status.value,
            "assigned_to": str(mandate.assigned_to) if mandate.assigned_to else None,
            "budget": mandate.budget,
            "created_at": to_iso(mandate.created_at),
            "updated_at": to_iso(mandate.updated_at),
            "completed_at": to_iso(mandate.completed_at),
        }

    def _first_or_none(self, rows: list[dict[str, Any]]) -> Mandate | None:
        return self._row_to_mandate(rows[0]) if rows else None

    async def get_by_id(self, mandate_id: UUID) -> Mandate | None:
        rows = await self._fetch_rows(
            "get_by_id", self._query().select("*").eq("id", str(mandate_id))
        )
        return self._first_or_none(rows)

    async def save(self, mandate: Mandate) -> Mandate:
        rows = await self._fetch_rows(
            "save", self._query().insert(self._mandate_to_row(mandate))
        )
        return self._first_or_none(rows) or mandate

    async def assign_investigator(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        log = self._log_operation(
            "assign_investigator",
            mandate_id=str(mandate_id),
            investigator_id=str(investigator_id),
        )
        rows = await self._fetch_rows(
            "assign_investigator",
            self._query()
            .update(
                {
                    "assigned_to": str(investigator_id),
                    "status": MandateStatus.IN_PROGRESS.value,
                    "updated_at": now.isoformat(),
                }
            )
            .eq("id", str(mandate_id))
            .is_("assigned_to", "null")
            .eq("status", expected_status.value),
        )
        if not rows:
            log.info("conditional_update_missed")
        return self._first_or_none(rows)

    async def clear_assignment(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
        expected_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        rows = await self._fetch_rows(
            "clear_assignment",
            self._query()
            .update(
                {
                    "assigned_to": None,
                    "status": MandateStatus.OPEN.value,
                    "updated_at": now.isoformat(),
                }
            )
            .eq("id", str(mandate_id))
            .eq("assigned_to", str(investigator_id))
            .eq("status", expected_status.value),
        )
        return self._first_or_none(rows)

    async def update_status(
        self,
        mandate_id: UUID,
        expected_status: MandateStatus,
        new_status: MandateStatus,
        now: datetime,
    ) -> Mandate | None:
        changes: dict[str, Any] = {
            "status": new_status.value,
            "updated_at": now.isoformat(),
        }
        if new_status == MandateStatus.COMPLETED:
            changes["completed_at"] = now.isoformat()
        elif expected_status == MandateStatus.COMPLETED:
            changes["completed_at"] = None

        rows = await self._fetch_rows(
            "update_status",
            self._query()
            .update(changes)
            .eq("id", str(mandate_id))
            .eq("status", expected_status.value),
        )
        return self._first_or_none(rows)

    async def count_by_investigator_and_status(
        self,
        investigator_id: UUID,
        status: MandateStatus,
    ) -> int:
        result = await self._execute(
            "count_by_investigator_and_status",
            self._query()
            .select("id", count="exact")
            .eq("assigned_to", str(investigator_id))
            .eq("status", status.value),
        )
        return result.count or 0

    async def list_by_agency(
        self,
        agency_id: UUID,
        status: MandateStatus | None = None,
    ) -> list[Mandate]:
        query = self._query().select("*").eq("agency_id", str(agency_id))
        if status is not None:
            query = query.eq("status", status.value)
        rows = await self._fetch_rows(
            "list_by_agency", query.order("created_at", desc=True)
        )
        return [self._row_to_mandate(row) for row in rows]
