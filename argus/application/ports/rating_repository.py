"""Mandate rating repository protocol."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from argus.domain.models.rating import MandateRating


class RatingRepositoryProtocol(Protocol):
    """Protocol for mandate rating persistence.

    At most one rating exists per mandate; implementations backed by a
    database should also carry a unique constraint on mandate_id.
    """

    @abstractmethod
    async def get_by_mandate(self, mandate_id: UUID) -> MandateRating | None:
        """Retrieve the rating of a mandate, if any.

        Raises:
            PersistenceError: If the lookup fails.
        """
        ...

    @abstractmethod
    async def save(self, rating: MandateRating) -> MandateRating:
        """Insert a rating.

        Raises:
            PersistenceError: If the insert fails.
        """
        ...
