"""Workflow service dependencies for API endpoints.

The services are built once by the application lifespan (or by a test)
and registered with set_workflow_services(); route handlers receive them
through Depends().
"""

from __future__ import annotations

from fastapi import Depends

from argus.application.services.candidature_workflow_service import (
    CandidatureWorkflowService,
)
from argus.application.services.mandate_lifecycle_service import (
    MandateLifecycleService,
)
from argus.application.services.mandate_rating_service import MandateRatingService
from argus.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from argus.bootstrap.workflow import WorkflowServices

_workflow_services: WorkflowServices | None = None


def set_workflow_services(services: WorkflowServices | None) -> None:
    """Register the workflow services (None clears them, for tests)."""
    global _workflow_services
    _workflow_services = services


def has_workflow_services() -> bool:
    return _workflow_services is not None


def get_workflow_services() -> WorkflowServices:
    """Get the registered workflow services.

    Raises:
        RuntimeError: If no services were registered.
    """
    if _workflow_services is None:
        raise RuntimeError(
            "Workflow services not configured. Call set_workflow_services() at startup."
        )
    return _workflow_services


def get_candidature_workflow_service(
    services: WorkflowServices = Depends(get_workflow_services),
) -> CandidatureWorkflowService:
    return services.candidatures


def get_mandate_lifecycle_service(
    services: WorkflowServices = Depends(get_workflow_services),
) -> MandateLifecycleService:
    return services.lifecycle


def get_mandate_rating_service(
    services: WorkflowServices = Depends(get_workflow_services),
) -> MandateRatingService:
    return services.ratings


def get_notification_inbox_service(
    services: WorkflowServices = Depends(get_workflow_services),
) -> NotificationInboxService:
    return services.inbox
