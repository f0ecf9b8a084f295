"""Mandate rating domain model.

An agency rates the investigator once a mandate is completed. At most
one rating exists per mandate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

MIN_RATING: int = 1
MAX_RATING: int = 5


@dataclass(frozen=True, eq=True)
class MandateRating:
    """Rating left by an agency for a completed mandate.

    Attributes:
        id: Unique identifier.
        mandate_id: The rated mandate.
        investigator_id: The investigator who did the work.
        agency_id: The rating agency.
        rating: Score from 1 to 5.
        created_at: When the rating was left (UTC).
        comment: Optional free-text comment.
        on_time: Whether the work was delivered on time.
    """

    id: UUID
    mandate_id: UUID
    investigator_id: UUID
    agency_id: UUID
    rating: int
    created_at: datetime
    comment: str | None = field(default=None)
    on_time: bool | None = field(default=None)

    def __post_init__(self) -> None:
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"rating must be {MIN_RATING}-{MAX_RATING}, got {self.rating}"
            )
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (UTC)")
