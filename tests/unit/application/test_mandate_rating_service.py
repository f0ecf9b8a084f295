"""Unit tests for MandateRatingService."""

from uuid import UUID, uuid4

import pytest

from argus.application.dtos.workflow import WorkflowOutcome
from argus.application.services.mandate_rating_service import (
    MANDATE_ALREADY_RATED,
    MANDATE_NOT_COMPLETED,
    MANDATE_NOT_OWNED,
    RATING_OUT_OF_RANGE,
)
from argus.application.services.mandate_validation_service import MANDATE_NOT_FOUND
from argus.bootstrap.workflow import WorkflowRepositories, WorkflowServices
from argus.domain.models.mandate import MandateStatus
from tests.helpers import make_mandate


@pytest.fixture
def investigator_id() -> UUID:
    return uuid4()


@pytest.fixture
def completed_mandate(
    repositories: WorkflowRepositories, agency_id: UUID, investigator_id: UUID
):
    mandate = make_mandate(
        agency_id=agency_id, status=MandateStatus.COMPLETED, assigned_to=investigator_id
    )
    repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]
    return mandate


class TestRateMandate:
    async def test_rating_recorded_for_investigator(
        self,
        services: WorkflowServices,
        completed_mandate,
        agency_id: UUID,
        investigator_id: UUID,
    ) -> None:
        result = await services.ratings.rate_mandate(
            completed_mandate.id, agency_id, 5, comment="Excellent travail", on_time=True
        )

        assert result.success
        assert result.rating.investigator_id == investigator_id
        assert result.rating.rating == 5
        assert result.rating.on_time is True

    @pytest.mark.parametrize("score", [0, 6, -1])
    async def test_out_of_range(
        self, services: WorkflowServices, completed_mandate, agency_id: UUID, score: int
    ) -> None:
        result = await services.ratings.rate_mandate(completed_mandate.id, agency_id, score)
        assert result.error == RATING_OUT_OF_RANGE

    async def test_unknown_mandate(self, services: WorkflowServices, agency_id: UUID) -> None:
        result = await services.ratings.rate_mandate(uuid4(), agency_id, 4)
        assert result.error == MANDATE_NOT_FOUND

    async def test_other_agency(self, services: WorkflowServices, completed_mandate) -> None:
        result = await services.ratings.rate_mandate(completed_mandate.id, uuid4(), 4)
        assert result.error == MANDATE_NOT_OWNED

    async def test_not_completed(
        self,
        services: WorkflowServices,
        repositories: WorkflowRepositories,
        agency_id: UUID,
    ) -> None:
        mandate = make_mandate(
            agency_id=agency_id, status=MandateStatus.IN_PROGRESS, assigned_to=uuid4()
        )
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]

        result = await services.ratings.rate_mandate(mandate.id, agency_id, 4)

        assert result.error == MANDATE_NOT_COMPLETED

    async def test_only_one_rating_per_mandate(
        self, services: WorkflowServices, completed_mandate, agency_id: UUID
    ) -> None:
        await services.ratings.rate_mandate(completed_mandate.id, agency_id, 4)

        result = await services.ratings.rate_mandate(completed_mandate.id, agency_id, 2)

        assert result.error == MANDATE_ALREADY_RATED

    async def test_concurrent_rating_rejected_at_save(
        self,
        services: WorkflowServices,
        repositories: WorkflowRepositories,
        completed_mandate,
        agency_id: UUID,
    ) -> None:
        await services.ratings.rate_mandate(completed_mandate.id, agency_id, 4)

        # The second writer read before the first rating was committed
        async def not_yet_rated(mandate_id: UUID):
            return None

        repositories.ratings.get_by_mandate = not_yet_rated  # type: ignore[method-assign]

        result = await services.ratings.rate_mandate(completed_mandate.id, agency_id, 2)

        assert result.outcome == WorkflowOutcome.REJECTED
        assert result.error == MANDATE_ALREADY_RATED
        assert repositories.ratings.count() == 1  # type: ignore[attr-defined]

    async def test_save_failure(
        self,
        services: WorkflowServices,
        repositories: WorkflowRepositories,
        completed_mandate,
        agency_id: UUID,
    ) -> None:
        repositories.ratings.set_should_fail("save")  # type: ignore[attr-defined]

        result = await services.ratings.rate_mandate(completed_mandate.id, agency_id, 4)

        assert result.outcome == WorkflowOutcome.FAILED
