"""Agency repository stub implementation."""

from __future__ import annotations

from uuid import UUID

from argus.application.ports.agency_repository import AgencyRepositoryProtocol
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class AgencyRepositoryStub(FailureInjectionMixin, AgencyRepositoryProtocol):
    """In-memory agency -> owner mapping.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._owners: dict[UUID, UUID] = {}
        self._init_failures("agencies")

    def add_agency(self, agency_id: UUID, owner_id: UUID) -> None:
        """Seed an agency (test helper)."""
        self._owners[agency_id] = owner_id

    def clear(self) -> None:
        self._owners.clear()
        self.reset_failures()

    async def get_owner_id(self, agency_id: UUID) -> UUID | None:
        self._check_failure("get_owner_id")
        return self._owners.get(agency_id)
