"""Supabase-backed repository adapters."""

from argus.infrastructure.adapters.persistence.agency_repository import (
    SupabaseAgencyRepository,
)
from argus.infrastructure.adapters.persistence.base import SupabaseRepository
from argus.infrastructure.adapters.persistence.candidature_repository import (
    SupabaseCandidatureRepository,
)
from argus.infrastructure.adapters.persistence.investigator_repository import (
    SupabaseInvestigatorRepository,
)
from argus.infrastructure.adapters.persistence.mandate_repository import (
    SupabaseMandateRepository,
)
from argus.infrastructure.adapters.persistence.notification_repository import (
    SupabaseNotificationRepository,
)
from argus.infrastructure.adapters.persistence.rating_repository import (
    SupabaseRatingRepository,
)

__all__: list[str] = [
    "SupabaseAgencyRepository",
    "SupabaseCandidatureRepository",
    "SupabaseInvestigatorRepository",
    "SupabaseMandateRepository",
    "SupabaseNotificationRepository",
    "SupabaseRatingRepository",
    "SupabaseRepository",
]
