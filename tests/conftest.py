"""
Pytest configuration and shared fixtures for Argus tests.

Testing Standards:
- Async tests run in asyncio auto mode (configured in pyproject.toml)
- Use the in-memory repository stubs for service tests
- Use AsyncMock/MagicMock for Supabase client mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from uuid import UUID, uuid4

import pytest

from argus.bootstrap.workflow import (
    WorkflowRepositories,
    WorkflowServices,
    build_workflow_services,
    create_stub_repositories,
)
from argus.config.workflow_config import TEST_WORKFLOW_CONFIG
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from argus import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a clock frozen at 2026-03-02T09:00:00 UTC."""
    return FakeTimeAuthority()


@pytest.fixture
def repositories() -> WorkflowRepositories:
    """Provide fresh in-memory repositories."""
    return create_stub_repositories()


@pytest.fixture
def services(
    repositories: WorkflowRepositories,
    fake_time_authority: FakeTimeAuthority,
) -> WorkflowServices:
    """Provide workflow services over the stubs (workload cap 2, lead time 1h)."""
    return build_workflow_services(
        repositories,
        time_authority=fake_time_authority,
        config=TEST_WORKFLOW_CONFIG,
    )


@pytest.fixture
def agency_id() -> UUID:
    return uuid4()


@pytest.fixture
def agency_owner_id(repositories: WorkflowRepositories, agency_id: UUID) -> UUID:
    """Register the agency with an owner and return the owner id."""
    owner_id = uuid4()
    repositories.agencies.add_agency(agency_id, owner_id)  # type: ignore[attr-defined]
    return owner_id
