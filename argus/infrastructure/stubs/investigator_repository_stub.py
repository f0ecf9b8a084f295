"""Investigator repository stub implementation."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from argus.application.ports.investigator_repository import (
    InvestigatorRepositoryProtocol,
)
from argus.domain.models.investigator import InvestigatorProfile
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class InvestigatorRepositoryStub(FailureInjectionMixin, InvestigatorRepositoryProtocol):
    """In-memory investigator profiles and unavailable dates.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._profiles: dict[UUID, InvestigatorProfile] = {}
        self._unavailable_dates: dict[UUID, set[date]] = {}
        self._init_failures("profiles")

    def add_profile(self, profile: InvestigatorProfile) -> None:
        """Seed a profile (test helper)."""
        self._profiles[profile.id] = profile

    def add_unavailable_date(self, investigator_id: UUID, day: date) -> None:
        """Block a calendar date for an investigator (test helper)."""
        self._unavailable_dates.setdefault(investigator_id, set()).add(day)

    def clear(self) -> None:
        self._profiles.clear()
        self._unavailable_dates.clear()
        self.reset_failures()

    async def get_profile(self, investigator_id: UUID) -> InvestigatorProfile | None:
        self._check_failure("get_profile")
        return self._profiles.get(investigator_id)

    async def get_unavailable_dates(
        self,
        investigator_id: UUID,
        on_or_after: date | None = None,
    ) -> frozenset[date]:
        self._check_failure("get_unavailable_dates")
        days = self._unavailable_dates.get(investigator_id, set())
        if on_or_after is not None:
            return frozenset(d for d in days if d >= on_or_after)
        return frozenset(days)
