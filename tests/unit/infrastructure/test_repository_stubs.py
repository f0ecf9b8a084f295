"""Unit tests for the in-memory repository stubs."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError
from argus.domain.models.candidature import CandidatureStatus
from argus.domain.models.mandate import MandateStatus
from argus.infrastructure.stubs import (
    ALL_OPERATIONS,
    CandidatureRepositoryStub,
    InvestigatorRepositoryStub,
    MandateRepositoryStub,
)
from tests.helpers import make_candidature, make_mandate

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


class TestFailureInjection:
    async def test_single_operation(self) -> None:
        stub = MandateRepositoryStub()
        stub.set_should_fail("get_by_id", message="timeout")

        with pytest.raises(PersistenceError, match="timeout"):
            await stub.get_by_id(uuid4())
        assert await stub.list_by_agency(uuid4()) == []

    async def test_all_operations(self) -> None:
        stub = MandateRepositoryStub()
        stub.set_should_fail(ALL_OPERATIONS)

        with pytest.raises(PersistenceError):
            await stub.count_by_investigator_and_status(uuid4(), MandateStatus.OPEN)

    async def test_reset(self) -> None:
        stub = MandateRepositoryStub()
        stub.set_should_fail("get_by_id")
        stub.set_should_fail("get_by_id", False)

        assert await stub.get_by_id(uuid4()) is None


class TestMandateRepositoryStub:
    async def test_assign_only_when_unassigned(self) -> None:
        stub = MandateRepositoryStub()
        mandate = make_mandate()
        stub.add_mandate(mandate)
        first, second = uuid4(), uuid4()

        assigned = await stub.assign_investigator(mandate.id, first, MandateStatus.OPEN, NOW)
        missed = await stub.assign_investigator(mandate.id, second, MandateStatus.OPEN, NOW)

        assert assigned is not None
        assert missed is None
        assert stub.get(mandate.id).assigned_to == first

    async def test_assign_checks_expected_status(self) -> None:
        stub = MandateRepositoryStub()
        mandate = make_mandate(status=MandateStatus.CANCELLED)
        stub.add_mandate(mandate)

        assert (
            await stub.assign_investigator(mandate.id, uuid4(), MandateStatus.OPEN, NOW)
            is None
        )

    async def test_clear_assignment_requires_same_investigator(self) -> None:
        stub = MandateRepositoryStub()
        holder = uuid4()
        mandate = make_mandate(status=MandateStatus.IN_PROGRESS, assigned_to=holder)
        stub.add_mandate(mandate)

        assert (
            await stub.clear_assignment(
                mandate.id, uuid4(), MandateStatus.IN_PROGRESS, NOW
            )
            is None
        )
        reopened = await stub.clear_assignment(
            mandate.id, holder, MandateStatus.IN_PROGRESS, NOW
        )
        assert reopened.status == MandateStatus.OPEN

    async def test_clear_assignment_checks_expected_status(self) -> None:
        stub = MandateRepositoryStub()
        holder = uuid4()
        mandate = make_mandate(status=MandateStatus.CANCELLED, assigned_to=holder)
        stub.add_mandate(mandate)

        missed = await stub.clear_assignment(
            mandate.id, holder, MandateStatus.IN_PROGRESS, NOW
        )

        assert missed is None
        assert stub.get(mandate.id).status == MandateStatus.CANCELLED

    async def test_update_status_invariant_violation_is_persistence_error(self) -> None:
        stub = MandateRepositoryStub()
        mandate = make_mandate()
        stub.add_mandate(mandate)

        with pytest.raises(PersistenceError):
            await stub.update_status(
                mandate.id, MandateStatus.OPEN, MandateStatus.IN_PROGRESS, NOW
            )
        assert stub.get(mandate.id).status == MandateStatus.OPEN

    async def test_duplicate_save_rejected(self) -> None:
        stub = MandateRepositoryStub()
        mandate = make_mandate()
        await stub.save(mandate)

        with pytest.raises(DuplicateRecordError, match="duplicate"):
            await stub.save(mandate)

    async def test_count_and_list(self) -> None:
        stub = MandateRepositoryStub()
        agency_id, investigator_id = uuid4(), uuid4()
        stub.add_mandate(make_mandate(agency_id=agency_id))
        stub.add_mandate(
            make_mandate(
                agency_id=agency_id,
                status=MandateStatus.IN_PROGRESS,
                assigned_to=investigator_id,
            )
        )

        assert (
            await stub.count_by_investigator_and_status(
                investigator_id, MandateStatus.IN_PROGRESS
            )
            == 1
        )
        assert len(await stub.list_by_agency(agency_id)) == 2
        assert len(await stub.list_by_agency(agency_id, MandateStatus.OPEN)) == 1


class TestCandidatureRepositoryStub:
    async def test_one_candidature_per_pair(self) -> None:
        stub = CandidatureRepositoryStub()
        mandate_id, investigator_id = uuid4(), uuid4()
        await stub.save(make_candidature(mandate_id, investigator_id))

        with pytest.raises(DuplicateRecordError):
            await stub.save(make_candidature(mandate_id, investigator_id))

    async def test_update_status_is_conditional(self) -> None:
        stub = CandidatureRepositoryStub()
        candidature = make_candidature(uuid4(), uuid4())
        stub.add_candidature(candidature)

        accepted = await stub.update_status(
            candidature.id, CandidatureStatus.INTERESTED, CandidatureStatus.ACCEPTED, NOW
        )
        again = await stub.update_status(
            candidature.id, CandidatureStatus.INTERESTED, CandidatureStatus.REJECTED, NOW
        )

        assert accepted.status == CandidatureStatus.ACCEPTED
        assert again is None

    async def test_reject_pending_for_mandate(self) -> None:
        stub = CandidatureRepositoryStub()
        mandate_id = uuid4()
        kept = make_candidature(mandate_id, uuid4())
        pending = make_candidature(mandate_id, uuid4())
        resolved = make_candidature(mandate_id, uuid4(), status=CandidatureStatus.REJECTED)
        elsewhere = make_candidature(uuid4(), uuid4())
        for candidature in (kept, pending, resolved, elsewhere):
            stub.add_candidature(candidature)

        rejected = await stub.reject_pending_for_mandate(mandate_id, kept.id, NOW)

        assert [c.id for c in rejected] == [pending.id]
        assert stub.get(kept.id).status == CandidatureStatus.INTERESTED
        assert stub.get(elsewhere.id).status == CandidatureStatus.INTERESTED

    async def test_list_by_mandate_filters_status(self) -> None:
        stub = CandidatureRepositoryStub()
        mandate_id = uuid4()
        stub.add_candidature(make_candidature(mandate_id, uuid4()))
        stub.add_candidature(
            make_candidature(mandate_id, uuid4(), status=CandidatureStatus.REJECTED)
        )

        pending = await stub.list_by_mandate(mandate_id, CandidatureStatus.INTERESTED)

        assert len(pending) == 1


class TestInvestigatorRepositoryStub:
    async def test_unavailable_dates_from_day(self) -> None:
        stub = InvestigatorRepositoryStub()
        investigator_id = uuid4()
        stub.add_unavailable_date(investigator_id, date(2026, 3, 1))
        stub.add_unavailable_date(investigator_id, date(2026, 3, 10))

        days = await stub.get_unavailable_dates(investigator_id, on_or_after=date(2026, 3, 5))

        assert days == frozenset({date(2026, 3, 10)})
