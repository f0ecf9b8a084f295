"""Supabase implementation of RatingRepositoryProtocol."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from argus.application.ports.rating_repository import RatingRepositoryProtocol
from argus.domain.models.rating import MandateRating
from argus.infrastructure.adapters.persistence.base import (
    SupabaseRepository,
    parse_timestamp,
    to_iso,
)


class SupabaseRatingRepository(SupabaseRepository, RatingRepositoryProtocol):
    """Ratings stored in the `mandate_ratings` table."""

    table_name = "mandate_ratings"

    def _row_to_rating(self, row: dict[str, Any]) -> MandateRating:
        return MandateRating(
            id=UUID(row["id"]),
            mandate_id=UUID(row["mandate_id"]),
            investigator_id=UUID(row["investigator_id"]),
            agency_id=UUID(row["agency_id"]),
            rating=int(row["rating"]),
            created_at=parse_timestamp(row["created_at"]),  # type: ignore[arg-type]
            comment=row.get("comment"),
            on_time=row.get("on_time"),
        )

    async def get_by_mandate(self, mandate_id: UUID) -> MandateRating | None:
        rows = await self._fetch_rows(
            "get_by_mandate",
            self._query().select("*").eq("mandate_id", str(mandate_id)).limit(1),
        )
        return self._row_to_rating(rows[0]) if rows else None

    async def save(self, rating: MandateRating) -> MandateRating:
        rows = await self._fetch_rows(
            "save",
            self._query().insert(
                {
                    "id": str(rating.id),
                    "mandate_id": str(rating.mandate_id),
                    "investigator_id": str(rating.investigator_id),
                    "agency_id": str(rating.agency_id),
                    "rating": rating.rating,
                    "comment": rating.comment,
                    "on_time": rating.on_time,
                    "created_at": to_iso(rating.created_at),
                }
            ),
        )
        return self._row_to_rating(rows[0]) if rows else rating
