"""Mandate Validation Service.

Gates every mutating workflow operation behind the domain rules before
any write happens.

Every check returns a ValidationResult. An ordinary business-rule
failure (including "mandate not found") is a result with a user-facing
reason, never an exception. Repository faults raise PersistenceError,
which propagates to the caller and is reported as an infrastructure
failure, not as a rule violation.

Assignment checks short-circuit: the first failing rule wins.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

import structlog

from argus.application.services.base import LoggingMixin
from argus.config.workflow_config import DEFAULT_WORKFLOW_CONFIG, WorkflowConfig
from argus.domain.models.investigator import InvestigatorAvailability
from argus.domain.models.mandate import MandateStatus
from argus.domain.models.validation import ValidationResult
from argus.domain.services.workflow_transitions import (
    can_transition,
    requires_investigator,
)

if TYPE_CHECKING:
    from argus.application.ports.investigator_repository import (
        InvestigatorRepositoryProtocol,
    )
    from argus.application.ports.mandate_repository import MandateRepositoryProtocol
    from argus.application.ports.time_authority import TimeAuthorityProtocol


# User-facing reasons
MANDATE_NOT_FOUND = "Mandat introuvable"
MANDATE_ASSIGNED_TO_OTHER = "Mandat déjà assigné à un autre enquêteur"
MANDATE_NOT_ASSIGNABLE = "Ce mandat n'accepte plus d'assignation (statut: {status})"
INVESTIGATOR_NOT_FOUND = "Enquêteur introuvable"
INVESTIGATOR_UNAVAILABLE = "L'enquêteur n'est pas disponible"
DATE_REQUIRED_MISSING = "Le mandat doit avoir une date requise"
INVESTIGATOR_UNAVAILABLE_ON_DATE = "L'enquêteur n'est pas disponible à cette date"
WORKLOAD_CAP_REACHED = (
    "L'enquêteur a déjà {count} mandats en cours (maximum {limit})"
)
DATE_NOT_IN_FUTURE = "La date requise doit être dans le futur"
LEAD_TIME_TOO_SHORT = "Un délai minimum de {hours}h est requis"
INVALID_TRANSITION = "Transition invalide: {current} → {new}"
INVESTIGATOR_REQUIRED = "Un enquêteur doit être assigné pour ce statut"
OPEN_WITH_INVESTIGATOR = (
    "Le mandat ne peut pas être 'open' avec un enquêteur assigné"
)


def ensure_utc(moment: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class MandateValidationService(LoggingMixin):
    """Business-rule checks consulted before any workflow mutation.

    Persistence-backed checks (validate_assignment,
    validate_investigator_eligibility) are async and may raise
    PersistenceError. validate_dates and validate_status_transition are
    pure.
    """

    def __init__(
        self,
        mandate_repository: MandateRepositoryProtocol,
        investigator_repository: InvestigatorRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        config: WorkflowConfig = DEFAULT_WORKFLOW_CONFIG,
    ) -> None:
        self._mandates = mandate_repository
        self._investigators = investigator_repository
        self._time = time_authority
        self._config = config
        self._init_logger(component="validation")

    async def validate_assignment(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> ValidationResult:
        """Check whether an investigator may be assigned to a mandate.

        Rules, in order:
        1. The mandate exists.
        2. It is not assigned to a different investigator (re-assigning
           the same investigator passes).
        3. Its status still accepts assignment (not completed, cancelled
           or expired).
        4-8. The investigator is eligible on the mandate's required date
           (see validate_investigator_eligibility).

        Args:
            mandate_id: The mandate to assign.
            investigator_id: The investigator to assign.

        Returns:
            ValidationResult with the reason of the first failing rule.

        Raises:
            PersistenceError: If a lookup fails.
        """
        log = self._log_operation(
            "validate_assignment",
            mandate_id=str(mandate_id),
            investigator_id=str(investigator_id),
        )

        mandate = await self._mandates.get_by_id(mandate_id)
        if mandate is None:
            return self._reject(log, MANDATE_NOT_FOUND)

        if mandate.assigned_to is not None and mandate.assigned_to != investigator_id:
            return self._reject(log, MANDATE_ASSIGNED_TO_OTHER)

        if not mandate.status.accepts_assignment():
            return self._reject(
                log, MANDATE_NOT_ASSIGNABLE.format(status=mandate.status.value)
            )

        already_counted = (
            mandate.assigned_to == investigator_id
            and mandate.status == MandateStatus.IN_PROGRESS
        )
        return await self.validate_investigator_eligibility(
            investigator_id,
            mandate.date_required,
            exclude_mandate_id=mandate.id if already_counted else None,
        )

    async def validate_investigator_eligibility(
        self,
        investigator_id: UUID,
        date_required: datetime | None,
        exclude_mandate_id: UUID | None = None,
    ) -> ValidationResult:
        """Check the investigator-side assignment rules.

        Rules, in order:
        4. The investigator exists.
        5. Their availability status is not UNAVAILABLE.
        6. A required date is known.
        7. That calendar date, in the marketplace timezone, is not one of
           their unavailable dates.
        8. They hold fewer in-progress mandates than the workload cap.

        Args:
            investigator_id: The investigator to check.
            date_required: The mandate's required date.
            exclude_mandate_id: An in-progress mandate already assigned to
                this investigator that must not count toward the cap.

        Returns:
            ValidationResult with the reason of the first failing rule.

        Raises:
            PersistenceError: If a lookup fails.
        """
        log = self._log_operation(
            "validate_investigator_eligibility",
            investigator_id=str(investigator_id),
        )

        profile = await self._investigators.get_profile(investigator_id)
        if profile is None:
            return self._reject(log, INVESTIGATOR_NOT_FOUND)

        if profile.is_unavailable:
            return self._reject(log, INVESTIGATOR_UNAVAILABLE)

        if date_required is None:
            return self._reject(log, DATE_REQUIRED_MISSING)

        required_day = (
            ensure_utc(date_required).astimezone(self._config.timezone).date()
        )
        availability = InvestigatorAvailability(
            investigator_id=investigator_id,
            availability_status=profile.availability_status,
            unavailable_dates=await self._investigators.get_unavailable_dates(
                investigator_id, on_or_after=required_day
            ),
        )
        if availability.is_unavailable_on(required_day):
            return self._reject(log, INVESTIGATOR_UNAVAILABLE_ON_DATE)

        active_count = await self._mandates.count_by_investigator_and_status(
            investigator_id, MandateStatus.IN_PROGRESS
        )
        if exclude_mandate_id is not None:
            active_count = max(active_count - 1, 0)

        limit = self._config.max_concurrent_assignments
        if active_count >= limit:
            return self._reject(
                log, WORKLOAD_CAP_REACHED.format(count=active_count, limit=limit)
            )

        return ValidationResult.ok()

    def validate_dates(
        self,
        date_required: datetime,
        duration: str | None = None,
    ) -> ValidationResult:
        """Check the required date of a new mandate.

        Rules, in order:
        1. date_required is strictly after now.
        2. date_required is at least the minimum lead time from now.

        duration is free text and accepted as-is.

        Args:
            date_required: Requested date (naive values are read as UTC).
            duration: Expected duration.

        Returns:
            ValidationResult.
        """
        now = self._time.now()
        required = ensure_utc(date_required)

        if required <= now:
            return ValidationResult.fail(DATE_NOT_IN_FUTURE)

        if required < now + self._config.min_lead_time:
            return ValidationResult.fail(
                LEAD_TIME_TOO_SHORT.format(hours=self._config.min_lead_time_hours)
            )

        return ValidationResult.ok()

    def validate_status_transition(
        self,
        current_status: MandateStatus,
        new_status: MandateStatus,
        has_assigned_investigator: bool,
    ) -> ValidationResult:
        """Check a mandate status change against the transition table.

        Rules, in order:
        1. The table permits current_status -> new_status.
        2. Moving to IN_PROGRESS (or any row flagged as requiring an
           investigator) needs an assigned investigator.
        3. Moving to OPEN needs the assignment cleared first.

        Returns:
            ValidationResult.
        """
        if not can_transition(current_status, new_status):
            return ValidationResult.fail(
                INVALID_TRANSITION.format(
                    current=current_status.value, new=new_status.value
                )
            )

        needs_investigator = new_status == MandateStatus.IN_PROGRESS or (
            requires_investigator(current_status, new_status)
        )
        if needs_investigator and not has_assigned_investigator:
            return ValidationResult.fail(INVESTIGATOR_REQUIRED)

        if new_status == MandateStatus.OPEN and has_assigned_investigator:
            return ValidationResult.fail(OPEN_WITH_INVESTIGATOR)

        return ValidationResult.ok()

    def _reject(self, log: structlog.BoundLogger, reason: str) -> ValidationResult:
        log.info("validation_rejected", reason=reason)
        return ValidationResult.fail(reason)
