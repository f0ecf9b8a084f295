"""Unit tests for the mandate workflow transition table."""

import itertools

import pytest

from argus.domain.models.mandate import MandateStatus
from argus.domain.services.workflow_transitions import (
    MANDATE_WORKFLOW,
    can_transition,
    find_transition,
    get_valid_next_states,
    requires_investigator,
)

OPEN = MandateStatus.OPEN
IN_PROGRESS = MandateStatus.IN_PROGRESS
COMPLETED = MandateStatus.COMPLETED
CANCELLED = MandateStatus.CANCELLED
EXPIRED = MandateStatus.EXPIRED

LEGAL_PAIRS = {
    (OPEN, IN_PROGRESS),
    (OPEN, CANCELLED),
    (OPEN, EXPIRED),
    (IN_PROGRESS, COMPLETED),
    (IN_PROGRESS, OPEN),
    (IN_PROGRESS, CANCELLED),
    (COMPLETED, IN_PROGRESS),
    (COMPLETED, OPEN),
    (EXPIRED, OPEN),
}


class TestTransitionTable:
    """Tests for the declared table rows."""

    def test_table_declares_exactly_the_legal_pairs(self) -> None:
        declared = {(t.from_status, t.to_status) for t in MANDATE_WORKFLOW}
        assert declared == LEGAL_PAIRS

    def test_rows_are_unique(self) -> None:
        pairs = [(t.from_status, t.to_status) for t in MANDATE_WORKFLOW]
        assert len(pairs) == len(set(pairs))

    def test_table_is_immutable(self) -> None:
        assert isinstance(MANDATE_WORKFLOW, tuple)
        with pytest.raises(AttributeError):
            MANDATE_WORKFLOW[0].allowed = False  # type: ignore[misc]

    def test_find_transition_returns_row(self) -> None:
        row = find_transition(OPEN, IN_PROGRESS)
        assert row is not None
        assert row.requires_investigator is True

    def test_find_transition_undeclared_pair(self) -> None:
        assert find_transition(CANCELLED, OPEN) is None


class TestCanTransition:
    """Tests for can_transition."""

    @pytest.mark.parametrize(
        ("from_status", "to_status"),
        list(itertools.product(MandateStatus, MandateStatus)),
    )
    def test_every_pair_matches_table(
        self, from_status: MandateStatus, to_status: MandateStatus
    ) -> None:
        expected = (from_status, to_status) in LEGAL_PAIRS
        assert can_transition(from_status, to_status) is expected

    @pytest.mark.parametrize("status", list(MandateStatus))
    def test_self_transition_is_illegal(self, status: MandateStatus) -> None:
        assert can_transition(status, status) is False

    @pytest.mark.parametrize("status", list(MandateStatus))
    def test_nothing_leaves_cancelled(self, status: MandateStatus) -> None:
        assert can_transition(CANCELLED, status) is False


class TestRequiresInvestigator:
    """Tests for requires_investigator."""

    def test_open_to_in_progress(self) -> None:
        assert requires_investigator(OPEN, IN_PROGRESS) is True

    def test_in_progress_to_completed(self) -> None:
        assert requires_investigator(IN_PROGRESS, COMPLETED) is True

    def test_cancel_does_not_require_investigator(self) -> None:
        assert requires_investigator(OPEN, CANCELLED) is False

    def test_undeclared_pair_is_false(self) -> None:
        assert requires_investigator(CANCELLED, IN_PROGRESS) is False


class TestGetValidNextStates:
    """Tests for get_valid_next_states."""

    def test_from_open(self) -> None:
        assert get_valid_next_states(OPEN) == frozenset({IN_PROGRESS, CANCELLED, EXPIRED})

    def test_from_in_progress(self) -> None:
        assert get_valid_next_states(IN_PROGRESS) == frozenset(
            {COMPLETED, OPEN, CANCELLED}
        )

    def test_from_completed(self) -> None:
        assert get_valid_next_states(COMPLETED) == frozenset({IN_PROGRESS, OPEN})

    def test_from_expired(self) -> None:
        assert get_valid_next_states(EXPIRED) == frozenset({OPEN})

    def test_cancelled_is_terminal(self) -> None:
        assert get_valid_next_states(CANCELLED) == frozenset()

    @pytest.mark.parametrize("status", list(MandateStatus))
    def test_agrees_with_can_transition(self, status: MandateStatus) -> None:
        for target in get_valid_next_states(status):
            assert can_transition(status, target)
