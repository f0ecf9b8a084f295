"""Application services (use cases) of the mandate workflow engine."""

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

__all__: list[str] = [
    "CandidatureWorkflowService",
    "MandateLifecycleService",
    "MandateRatingService",
    "MandateValidationService",
    "NotificationDispatchService",
    "NotificationInboxService",
]
