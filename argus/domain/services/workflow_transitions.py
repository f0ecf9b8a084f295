"""Mandate workflow transition table.

Legal mandate status transitions are declared as data: an immutable,
ordered sequence of MandateTransition records. Legality and the
"requires an assigned investigator" precondition live side by side and
are queried by lookup, never by scattered conditionals.

Pairs absent from the table are illegal, including self-transitions.
"""

from __future__ import annotations

from dataclasses import dataclass

from argus.domain.models.mandate import MandateStatus


@dataclass(frozen=True)
class MandateTransition:
    """One row of the transition table.

    Attributes:
        from_status: Status the mandate is in.
        to_status: Status the mandate moves to.
        allowed: Whether the move is legal.
        requires_investigator: Whether an assigned investigator must be present.
    """

    from_status: MandateStatus
    to_status: MandateStatus
    allowed: bool = True
    requires_investigator: bool = False


MANDATE_WORKFLOW: tuple[MandateTransition, ...] = (
    # From open
    MandateTransition(
        MandateStatus.OPEN, MandateStatus.IN_PROGRESS, requires_investigator=True
    ),
    MandateTransition(MandateStatus.OPEN, MandateStatus.CANCELLED),
    MandateTransition(MandateStatus.OPEN, MandateStatus.EXPIRED),
    # From in-progress
    MandateTransition(
        MandateStatus.IN_PROGRESS, MandateStatus.COMPLETED, requires_investigator=True
    ),
    MandateTransition(MandateStatus.IN_PROGRESS, MandateStatus.OPEN),
    MandateTransition(MandateStatus.IN_PROGRESS, MandateStatus.CANCELLED),
    # From completed (corrections)
    MandateTransition(MandateStatus.COMPLETED, MandateStatus.IN_PROGRESS),
    MandateTransition(MandateStatus.COMPLETED, MandateStatus.OPEN),
    # From expired
    MandateTransition(MandateStatus.EXPIRED, MandateStatus.OPEN),
)

_TRANSITIONS_BY_PAIR: dict[tuple[MandateStatus, MandateStatus], MandateTransition] = {
    (t.from_status, t.to_status): t for t in MANDATE_WORKFLOW
}


def find_transition(
    from_status: MandateStatus, to_status: MandateStatus
) -> MandateTransition | None:
    """Look up the table row for a pair.

    Args:
        from_status: Current status.
        to_status: Target status.

    Returns:
        The matching MandateTransition, or None if the pair is undeclared.
    """
    return _TRANSITIONS_BY_PAIR.get((from_status, to_status))


def can_transition(from_status: MandateStatus, to_status: MandateStatus) -> bool:
    """Check if the table permits moving from one status to another.

    Args:
        from_status: Current status.
        to_status: Target status.

    Returns:
        True iff the pair is declared with allowed=True.
    """
    transition = find_transition(from_status, to_status)
    return transition is not None and transition.allowed


def requires_investigator(
    from_status: MandateStatus, to_status: MandateStatus
) -> bool:
    """Check if the transition requires an assigned investigator.

    Returns:
        The row's precondition flag; False when the pair is undeclared.
    """
    transition = find_transition(from_status, to_status)
    return transition.requires_investigator if transition is not None else False


def get_valid_next_states(from_status: MandateStatus) -> frozenset[MandateStatus]:
    """List every status reachable from a status in one legal move.

    Args:
        from_status: Current status.

    Returns:
        Frozen set of reachable target statuses (empty for CANCELLED).
    """
    return frozenset(
        t.to_status for t in MANDATE_WORKFLOW if t.from_status == from_status and t.allowed
    )
