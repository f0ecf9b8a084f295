"""Infrastructure stubs for development and testing.

In-memory implementations of the repository ports. Every stub supports
failure injection through set_should_fail(operation) so tests can
exercise the infrastructure-failure paths.

Available stubs:
- MandateRepositoryStub: Mandates, with lock-guarded compare-and-set updates
- CandidatureRepositoryStub: Candidatures, unique per (mandate, investigator)
- InvestigatorRepositoryStub: Profiles and unavailable dates
- AgencyRepositoryStub: Agency owners
- NotificationRepositoryStub: Notifications
- RatingRepositoryStub: Ratings, unique per mandate

WARNING: These stubs are NOT for production use.
Production implementations are in argus/infrastructure/adapters/.
"""

from argus.infrastructure.stubs.agency_repository_stub import AgencyRepositoryStub
from argus.infrastructure.stubs.candidature_repository_stub import (
    CandidatureRepositoryStub,
)
from argus.infrastructure.stubs.failure_injection import (
    ALL_OPERATIONS,
    FailureInjectionMixin,
)
from argus.infrastructure.stubs.investigator_repository_stub import (
    InvestigatorRepositoryStub,
)
from argus.infrastructure.stubs.mandate_repository_stub import MandateRepositoryStub
from argus.infrastructure.stubs.notification_repository_stub import (
    NotificationRepositoryStub,
)
from argus.infrastructure.stubs.rating_repository_stub import RatingRepositoryStub

__all__: list[str] = [
    "ALL_OPERATIONS",
    "AgencyRepositoryStub",
    "CandidatureRepositoryStub",
    "FailureInjectionMixin",
    "InvestigatorRepositoryStub",
    "MandateRepositoryStub",
    "NotificationRepositoryStub",
    "RatingRepositoryStub",
]
