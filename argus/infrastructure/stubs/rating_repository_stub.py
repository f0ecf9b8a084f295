"""Mandate rating repository stub implementation."""

from __future__ import annotations

from uuid import UUID

from argus.application.ports.rating_repository import RatingRepositoryProtocol
from argus.domain.errors.persistence import DuplicateRecordError
from argus.domain.models.rating import MandateRating
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class RatingRepositoryStub(FailureInjectionMixin, RatingRepositoryProtocol):
    """In-memory ratings, unique per mandate.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._ratings: dict[UUID, MandateRating] = {}
        self._init_failures("mandate_ratings")

    def clear(self) -> None:
        self._ratings.clear()
        self.reset_failures()

    def count(self) -> int:
        return len(self._ratings)

    async def get_by_mandate(self, mandate_id: UUID) -> MandateRating | None:
        self._check_failure("get_by_mandate")
        return self._ratings.get(mandate_id)

    async def save(self, rating: MandateRating) -> MandateRating:
        self._check_failure("save")
        if rating.mandate_id in self._ratings:
            raise DuplicateRecordError(
                "save", f"duplicate key mandate_id={rating.mandate_id}", table=self._table
            )
        self._ratings[rating.mandate_id] = rating
        return rating
