"""Mandate lifecycle service.

Creates mandates and moves them between statuses outside of the
candidature flow:

- create_mandate: OPEN (public) or IN_PROGRESS (direct assignment)
- complete_mandate: IN_PROGRESS -> COMPLETED
- reopen_mandate: COMPLETED -> IN_PROGRESS (not once rated)
- cancel_mandate: OPEN | IN_PROGRESS -> CANCELLED
- expire_mandate: OPEN -> EXPIRED (called by the periodic expiration job)
- reopen_expired_mandate: EXPIRED -> OPEN

Every status change is checked against the transition table and written
with a status compare-and-set, so a concurrent change makes the action
REJECTED instead of overwriting it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import structlog

from argus.application.dtos.workflow import MandateDraftDTO, WorkflowActionResult
from argus.application.services.base import LoggingMixin
from argus.application.services.mandate_validation_service import (
    MANDATE_NOT_FOUND,
    ensure_utc,
)
from argus.domain.errors.persistence import PersistenceError
from argus.domain.models.mandate import AssignmentType, Mandate, MandateStatus

if TYPE_CHECKING:
    from argus.application.ports.agency_repository import AgencyRepositoryProtocol
    from argus.application.ports.mandate_repository import MandateRepositoryProtocol
    from argus.application.ports.rating_repository import RatingRepositoryProtocol
    from argus.application.ports.time_authority import TimeAuthorityProtocol
    from argus.application.services.mandate_validation_service import (
        MandateValidationService,
    )
    from argus.application.services.notification_dispatch_service import (
        NotificationDispatchService,
    )


DIRECT_WITHOUT_INVESTIGATOR = (
    "Un enquêteur doit être choisi pour une assignation directe"
)
PUBLIC_WITH_INVESTIGATOR = (
    "Un mandat public ne peut pas être créé avec un enquêteur assigné"
)
COMPLETE_WITHOUT_INVESTIGATOR = (
    "Impossible de terminer un mandat sans enquêteur assigné"
)
RATED_MANDATE_NOT_REOPENABLE = "Un mandat évalué ne peut pas être rouvert"
MANDATE_CHANGED = "Le mandat a été modifié entre-temps. Veuillez réessayer."

AFTER_CREATE_MANDATE_URL = "/agence/mandats/{mandate_id}"
AFTER_COMPLETE_MANDATE_URL = (
    "/agence/mandats/{mandate_id}?action=rate&investigator={investigator_id}"
)


class MandateLifecycleService(LoggingMixin):
    """Creation and status changes of mandates."""

    def __init__(
        self,
        mandate_repository: MandateRepositoryProtocol,
        agency_repository: AgencyRepositoryProtocol,
        rating_repository: RatingRepositoryProtocol,
        validation_service: MandateValidationService,
        notification_service: NotificationDispatchService,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._mandates = mandate_repository
        self._agencies = agency_repository
        self._ratings = rating_repository
        self._validation = validation_service
        self._notifications = notification_service
        self._time = time_authority
        self._init_logger(component="workflow")

    async def create_mandate(self, draft: MandateDraftDTO) -> WorkflowActionResult:
        """Create a mandate from an agency draft.

        A PUBLIC mandate is created OPEN. A DIRECT mandate is created
        IN_PROGRESS with its investigator, who must pass the same
        eligibility rules as an assignment, and is notified.

        Args:
            draft: The mandate fields entered by the agency.

        Returns:
            WorkflowActionResult carrying the created mandate.
        """
        log = self._log_operation(
            "create_mandate",
            agency_id=str(draft.agency_id),
            assignment_type=draft.assignment_type.value,
        )

        dates = self._validation.validate_dates(draft.date_required, draft.duration)
        if not dates:
            return self._rejected(log, dates.reason or MANDATE_CHANGED)

        if draft.assignment_type == AssignmentType.DIRECT:
            if draft.assigned_to is None:
                return self._rejected(log, DIRECT_WITHOUT_INVESTIGATOR)
            status = MandateStatus.IN_PROGRESS
        else:
            if draft.assigned_to is not None:
                return self._rejected(log, PUBLIC_WITH_INVESTIGATOR)
            status = MandateStatus.OPEN

        now = self._time.now()
        mandate = Mandate(
            id=uuid4(),
            agency_id=draft.agency_id,
            title=draft.title,
            mandate_type=draft.mandate_type,
            description=draft.description,
            location=draft.location,
            date_required=ensure_utc(draft.date_required),
            duration=draft.duration,
            created_at=now,
            priority=draft.priority,
            assignment_type=draft.assignment_type,
            status=status,
            assigned_to=draft.assigned_to,
            budget=draft.budget,
            updated_at=now,
        )

        try:
            if mandate.assigned_to is not None:
                eligibility = await self._validation.validate_investigator_eligibility(
                    mandate.assigned_to, mandate.date_required
                )
                if not eligibility:
                    return self._rejected(log, eligibility.reason or MANDATE_CHANGED)
            created = await self._mandates.save(mandate)
        except PersistenceError:
            return self._failed(log, "mandate_creation_failed")

        log.info("mandate_created", mandate_id=str(created.id), status=created.status.value)

        if created.assigned_to is not None:
            await self._notifications.notify_investigator_assigned(
                created.assigned_to, created.id, created.title
            )

        return WorkflowActionResult.succeeded(
            mandate=created,
            redirect_url=AFTER_CREATE_MANDATE_URL.format(mandate_id=created.id),
        )

    async def complete_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
        """Mark an in-progress mandate completed and notify the agency owner."""
        log = self._log_operation("complete_mandate", mandate_id=str(mandate_id))

        try:
            mandate = await self._mandates.get_by_id(mandate_id)
            if mandate is None:
                return self._rejected(log, MANDATE_NOT_FOUND)
            if mandate.assigned_to is None:
                return self._rejected(log, COMPLETE_WITHOUT_INVESTIGATOR)
            owner_id = await self._agencies.get_owner_id(mandate.agency_id)
        except PersistenceError:
            return self._failed(log, "mandate_completion_precheck_failed")

        result = await self._change_status(mandate, MandateStatus.COMPLETED, log)
        if not result.success or result.mandate is None:
            return result

        completed = result.mandate
        if owner_id is not None:
            await self._notifications.notify_mandate_completed(
                owner_id, completed.id, completed.title
            )
        else:
            log.warning("agency_owner_not_found", agency_id=str(mandate.agency_id))

        return WorkflowActionResult.succeeded(
            mandate=completed,
            redirect_url=AFTER_COMPLETE_MANDATE_URL.format(
                mandate_id=completed.id, investigator_id=completed.assigned_to
            ),
        )

    async def reopen_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
        """Reopen a completed mandate; the investigator stays assigned.

        A rating only exists for a completed mandate, so a rated mandate
        cannot be reopened.
        """
        log = self._log_operation(
            "reopen_mandate",
            mandate_id=str(mandate_id),
            new_status=MandateStatus.IN_PROGRESS.value,
        )
        try:
            mandate = await self._mandates.get_by_id(mandate_id)
            if mandate is None:
                return self._rejected(log, MANDATE_NOT_FOUND)
            rating = await self._ratings.get_by_mandate(mandate_id)
        except PersistenceError:
            return self._failed(log, "mandate_reopen_precheck_failed")

        if rating is not None:
            return self._rejected(log, RATED_MANDATE_NOT_REOPENABLE)
        return await self._change_status(mandate, MandateStatus.IN_PROGRESS, log)

    async def cancel_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
        """Cancel an open or in-progress mandate."""
        return await self._transition(
            "cancel_mandate", mandate_id, MandateStatus.CANCELLED
        )

    async def expire_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
        """Expire an open mandate whose date passed without an assignment."""
        return await self._transition(
            "expire_mandate", mandate_id, MandateStatus.EXPIRED
        )

    async def reopen_expired_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
        """Put an expired mandate back up for candidatures."""
        return await self._transition(
            "reopen_expired_mandate", mandate_id, MandateStatus.OPEN
        )

    async def list_agency_mandates(
        self,
        agency_id: UUID,
        status: MandateStatus | None = None,
    ) -> list[Mandate]:
        """List an agency's mandates, newest first.

        Raises:
            PersistenceError: If the query fails.
        """
        try:
            return await self._mandates.list_by_agency(agency_id, status)
        except PersistenceError:
            self._log_operation(
                "list_agency_mandates", agency_id=str(agency_id)
            ).exception("mandate_listing_failed")
            raise

    async def _transition(
        self,
        operation: str,
        mandate_id: UUID,
        new_status: MandateStatus,
    ) -> WorkflowActionResult:
        log = self._log_operation(
            operation, mandate_id=str(mandate_id), new_status=new_status.value
        )
        try:
            mandate = await self._mandates.get_by_id(mandate_id)
        except PersistenceError:
            return self._failed(log, "mandate_lookup_failed")
        if mandate is None:
            return self._rejected(log, MANDATE_NOT_FOUND)
        return await self._change_status(mandate, new_status, log)

    async def _change_status(
        self,
        mandate: Mandate,
        new_status: MandateStatus,
        log: structlog.BoundLogger,
    ) -> WorkflowActionResult:
        transition = self._validation.validate_status_transition(
            mandate.status, new_status, mandate.has_assigned_investigator
        )
        if not transition:
            return self._rejected(log, transition.reason or MANDATE_CHANGED)

        try:
            updated = await self._mandates.update_status(
                mandate.id, mandate.status, new_status, self._time.now()
            )
        except PersistenceError:
            return self._failed(log, "mandate_status_update_failed")

        if updated is None:
            return self._rejected(log, MANDATE_CHANGED)

        log.info(
            "mandate_status_changed",
            previous_status=mandate.status.value,
            status=updated.status.value,
        )
        return WorkflowActionResult.succeeded(mandate=updated)

    def _rejected(
        self, log: structlog.BoundLogger, reason: str
    ) -> WorkflowActionResult:
        log.info("workflow_action_rejected", reason=reason)
        return WorkflowActionResult.rejected(reason)

    def _failed(self, log: structlog.BoundLogger, event: str) -> WorkflowActionResult:
        log.exception(event)
        return WorkflowActionResult.failed()
