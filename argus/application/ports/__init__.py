"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- MandateRepositoryProtocol: Mandates, with compare-and-set updates
- CandidatureRepositoryProtocol: Candidatures (mandate_interests)
- InvestigatorRepositoryProtocol: Profiles and unavailable dates
- AgencyRepositoryProtocol: Agency owner lookup
- NotificationRepositoryProtocol: Notification records
- RatingRepositoryProtocol: Mandate ratings
- TimeAuthorityProtocol: Current time
"""

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

__all__: list[str] = [
    "AgencyRepositoryProtocol",
    "CandidatureRepositoryProtocol",
    "InvestigatorRepositoryProtocol",
    "MandateRepositoryProtocol",
    "NotificationRepositoryProtocol",
    "RatingRepositoryProtocol",
    "SystemTimeAuthority",
    "TimeAuthorityProtocol",
]
