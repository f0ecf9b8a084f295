"""Bootstrap wiring for the mandate workflow services.

Development wires the in-memory stubs; production wires the Supabase
repositories. Services are built once and handed to the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from argus.application.ports.agency_repository import AgencyRepositoryProtocol
from argus.application.ports.candidature_repository import (
    CandidatureRepositoryProtocol,
)
from argus.application.ports.investigator_repository import (
    InvestigatorRepositoryProtocol,
)
from argus.application.ports.mandate_repository import MandateRepositoryProtocol
from argus.application.ports.notification_repository import (
    NotificationRepositoryProtocol,
)
from argus.application.ports.rating_repository import RatingRepositoryProtocol
from argus.application.ports.time_authority import (
    SystemTimeAuthority,
    TimeAuthorityProtocol,
)
from argus.application.services.candidature_workflow_service import (
    CandidatureWorkflowService,
)
from argus.application.services.mandate_lifecycle_service import (
    MandateLifecycleService,
)
from argus.application.services.mandate_rating_service import MandateRatingService
from argus.application.services.mandate_validation_service import (
    MandateValidationService,
)
from argus.application.services.notification_dispatch_service import (
    NotificationDispatchService,
)
from argus.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from argus.config.app_config import AppConfig
from argus.config.workflow_config import WorkflowConfig
from argus.infrastructure.stubs import (
    AgencyRepositoryStub,
    CandidatureRepositoryStub,
    InvestigatorRepositoryStub,
    MandateRepositoryStub,
    NotificationRepositoryStub,
    RatingRepositoryStub,
)

logger = get_logger()


@dataclass(frozen=True)
class WorkflowRepositories:
    """The repository adapters behind the workflow services."""

    mandates: MandateRepositoryProtocol
    candidatures: CandidatureRepositoryProtocol
    investigators: InvestigatorRepositoryProtocol
    agencies: AgencyRepositoryProtocol
    notifications: NotificationRepositoryProtocol
    ratings: RatingRepositoryProtocol


@dataclass(frozen=True)
class WorkflowServices:
    """The application services exposed to the API layer."""

    validation: MandateValidationService
    notifications: NotificationDispatchService
    candidatures: CandidatureWorkflowService
    lifecycle: MandateLifecycleService
    inbox: NotificationInboxService
    ratings: MandateRatingService


def create_stub_repositories() -> WorkflowRepositories:
    """Create fresh in-memory repositories."""
    return WorkflowRepositories(
        mandates=MandateRepositoryStub(),
        candidatures=CandidatureRepositoryStub(),
        investigators=InvestigatorRepositoryStub(),
        agencies=AgencyRepositoryStub(),
        notifications=NotificationRepositoryStub(),
        ratings=RatingRepositoryStub(),
    )


async def create_supabase_repositories() -> WorkflowRepositories:
    """Create Supabase-backed repositories sharing one client.

    Raises:
        ValueError: If the Supabase settings are missing.
    """
    from argus.bootstrap.supabase import get_supabase_client
    from argus.infrastructure.adapters.persistence import (
        SupabaseAgencyRepository,
        SupabaseCandidatureRepository,
        SupabaseInvestigatorRepository,
        SupabaseMandateRepository,
        SupabaseNotificationRepository,
        SupabaseRatingRepository,
    )

    client = await get_supabase_client()
    return WorkflowRepositories(
        mandates=SupabaseMandateRepository(client),
        candidatures=SupabaseCandidatureRepository(client),
        investigators=SupabaseInvestigatorRepository(client),
        agencies=SupabaseAgencyRepository(client),
        notifications=SupabaseNotificationRepository(client),
        ratings=SupabaseRatingRepository(client),
    )


def build_workflow_services(
    repositories: WorkflowRepositories,
    time_authority: TimeAuthorityProtocol | None = None,
    config: WorkflowConfig | None = None,
) -> WorkflowServices:
    """Wire the workflow services on top of a set of repositories."""
    clock = time_authority or SystemTimeAuthority()
    workflow_config = config or WorkflowConfig.from_environment()

    validation = MandateValidationService(
        repositories.mandates, repositories.investigators, clock, workflow_config
    )
    dispatch = NotificationDispatchService(repositories.notifications, clock)

    return WorkflowServices(
        validation=validation,
        notifications=dispatch,
        candidatures=CandidatureWorkflowService(
            mandate_repository=repositories.mandates,
            candidature_repository=repositories.candidatures,
            investigator_repository=repositories.investigators,
            agency_repository=repositories.agencies,
            validation_service=validation,
            notification_service=dispatch,
            time_authority=clock,
            config=workflow_config,
        ),
        lifecycle=MandateLifecycleService(
            mandate_repository=repositories.mandates,
            agency_repository=repositories.agencies,
            rating_repository=repositories.ratings,
            validation_service=validation,
            notification_service=dispatch,
            time_authority=clock,
        ),
        inbox=NotificationInboxService(repositories.notifications),
        ratings=MandateRatingService(repositories.mandates, repositories.ratings, clock),
    )


async def create_workflow_services(app_config: AppConfig | None = None) -> WorkflowServices:
    """Build the workflow services for the configured environment."""
    settings = app_config or AppConfig.from_environment()
    if settings.uses_stubs:
        logger.warning(
            "workflow_repositories_initialized",
            repository_type="InMemoryStub",
            message="development environment - data will not persist",
        )
        repositories = create_stub_repositories()
    else:
        repositories = await create_supabase_repositories()
        logger.info("workflow_repositories_initialized", repository_type="Supabase")
    return build_workflow_services(repositories)
