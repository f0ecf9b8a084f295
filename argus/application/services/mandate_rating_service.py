"""Mandate rating service.

An agency rates the investigator of one of its completed mandates, once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import structlog

from argus.application.dtos.workflow import WorkflowActionResult
from argus.application.services.base import LoggingMixin
from argus.application.services.mandate_validation_service import MANDATE_NOT_FOUND
from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError
from argus.domain.models.mandate import MandateStatus
from argus.domain.models.rating import MAX_RATING, MIN_RATING, MandateRating

if TYPE_CHECKING:
    from argus.application.ports.mandate_repository import MandateRepositoryProtocol
    from argus.application.ports.rating_repository import RatingRepositoryProtocol
    from argus.application.ports.time_authority import TimeAuthorityProtocol


RATING_OUT_OF_RANGE = f"La note doit être entre {MIN_RATING} et {MAX_RATING}"
MANDATE_NOT_OWNED = "Ce mandat n'appartient pas à votre agence"
MANDATE_NOT_COMPLETED = "Seuls les mandats complétés peuvent être évalués"
MANDATE_ALREADY_RATED = "Ce mandat a déjà été évalué"


class MandateRatingService(LoggingMixin):
    """Creates the single rating of a completed mandate."""

    def __init__(
        self,
        mandate_repository: MandateRepositoryProtocol,
        rating_repository: RatingRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._mandates = mandate_repository
        self._ratings = rating_repository
        self._time = time_authority
        self._init_logger(component="rating")

    async def rate_mandate(
        self,
        mandate_id: UUID,
        agency_id: UUID,
        rating: int,
        comment: str | None = None,
        on_time: bool | None = None,
    ) -> WorkflowActionResult:
        """Rate the investigator of a completed mandate.

        Rules, in order: rating within 1-5, mandate exists, belongs to
        the agency, is COMPLETED, and has no rating yet.

        Args:
            mandate_id: The mandate to rate.
            agency_id: The rating agency.
            rating: Score from 1 to 5.
            comment: Optional comment.
            on_time: Whether the work was delivered on time.

        Returns:
            WorkflowActionResult carrying the created rating.
        """
        log = self._log_operation(
            "rate_mandate", mandate_id=str(mandate_id), agency_id=str(agency_id)
        )

        if not MIN_RATING <= rating <= MAX_RATING:
            return self._rejected(log, RATING_OUT_OF_RANGE)

        try:
            mandate = await self._mandates.get_by_id(mandate_id)
            if mandate is None:
                return self._rejected(log, MANDATE_NOT_FOUND)
            if mandate.agency_id != agency_id:
                return self._rejected(log, MANDATE_NOT_OWNED)
            if mandate.status != MandateStatus.COMPLETED or mandate.assigned_to is None:
                return self._rejected(log, MANDATE_NOT_COMPLETED)
            if await self._ratings.get_by_mandate(mandate_id) is not None:
                return self._rejected(log, MANDATE_ALREADY_RATED)

            created = await self._ratings.save(
                MandateRating(
                    id=uuid4(),
                    mandate_id=mandate_id,
                    investigator_id=mandate.assigned_to,
                    agency_id=agency_id,
                    rating=rating,
                    created_at=self._time.now(),
                    comment=comment,
                    on_time=on_time,
                )
            )
        except DuplicateRecordError:
            return self._rejected(log, MANDATE_ALREADY_RATED)
        except PersistenceError:
            log.exception("mandate_rating_failed")
            return WorkflowActionResult.failed()

        log.info("mandate_rated", rating=rating)
        return WorkflowActionResult.succeeded(mandate=mandate, rating=created)

    def _rejected(
        self, log: structlog.BoundLogger, reason: str
    ) -> WorkflowActionResult:
        log.info("workflow_action_rejected", reason=reason)
        return WorkflowActionResult.rejected(reason)
