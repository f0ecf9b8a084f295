"""Candidature / Assignment Orchestrator.

Sequences the multi-entity mutations behind the candidature actions an
agency or investigator can trigger:

- accept_candidature: validate -> accept candidature -> assign mandate
  -> reject sibling candidatures -> notify
- reject_candidature: reject candidature -> notify
- unassign_investigator: clear assignment -> notify
- submit_candidature: create candidature -> notify agency owner

Outcome contract:
- REJECTED: a business rule refused the action. Nothing was written.
- FAILED: PersistenceError during the action. Partial writes are
  compensated where possible and no notification is sent.
- SUCCEEDED: the mutation committed, then notifications were dispatched.

Concurrency:
The validation pre-check and the mandate write are not atomic. The
mandate write is a conditional update (assigned_to IS NULL and status
unchanged); when another request won the race the candidature is put
back to INTERESTED and the action is REJECTED.

Callers are assumed to be authorized already.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import structlog

from argus.application.dtos.workflow import WorkflowActionResult
from argus.application.services.base import LoggingMixin
from argus.application.services.mandate_validation_service import (
    INVESTIGATOR_NOT_FOUND,
    MANDATE_ASSIGNED_TO_OTHER,
    MANDATE_NOT_FOUND,
)
from argus.config.workflow_config import DEFAULT_WORKFLOW_CONFIG, WorkflowConfig
from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError
from argus.domain.models.candidature import Candidature, CandidatureStatus
from argus.domain.models.mandate import AssignmentType, MandateStatus

if TYPE_CHECKING:
    from argus.application.ports.agency_repository import AgencyRepositoryProtocol
    from argus.application.ports.candidature_repository import (
        CandidatureRepositoryProtocol,
    )
    from argus.application.ports.investigator_repository import (
        InvestigatorRepositoryProtocol,
    )
    from argus.application.ports.mandate_repository import MandateRepositoryProtocol
    from argus.application.ports.time_authority import TimeAuthorityProtocol
    from argus.application.services.mandate_validation_service import (
        MandateValidationService,
    )
    from argus.application.services.notification_dispatch_service import (
        NotificationDispatchService,
    )


CANDIDATURE_NOT_FOUND = "Candidature introuvable"
CANDIDATURE_MISMATCH = "Cette candidature ne correspond pas à ce mandat"
CANDIDATURE_ALREADY_RESOLVED = "Cette candidature a déjà été traitée"
CANDIDATURE_DUPLICATE = "Vous avez déjà postulé à ce mandat"
MANDATE_NOT_OPEN = "Ce mandat n'accepte plus de candidatures"
MANDATE_NOT_PUBLIC = "Ce mandat n'est pas ouvert aux candidatures"
NO_INVESTIGATOR_ASSIGNED = "Aucun enquêteur n'est assigné à ce mandat"
CANNOT_UNASSIGN_COMPLETED = (
    "Impossible de désassigner un enquêteur d'un mandat complété"
)
MANDATE_CHANGED = "Le mandat a été modifié entre-temps. Veuillez réessayer."

AFTER_ACCEPT_CANDIDATURE_URL = "/agence/mandats/{mandate_id}?success=accepted"


class CandidatureWorkflowService(LoggingMixin):
    """Orchestrates candidature and assignment actions.

    Notifications go out only after the mutating step committed, and a
    notification failure never changes the returned outcome.
    """

    def __init__(
        self,
        mandate_repository: MandateRepositoryProtocol,
        candidature_repository: CandidatureRepositoryProtocol,
        investigator_repository: InvestigatorRepositoryProtocol,
        agency_repository: AgencyRepositoryProtocol,
        validation_service: MandateValidationService,
        notification_service: NotificationDispatchService,
        time_authority: TimeAuthorityProtocol,
        config: WorkflowConfig = DEFAULT_WORKFLOW_CONFIG,
    ) -> None:
        self._mandates = mandate_repository
        self._candidatures = candidature_repository
        self._investigators = investigator_repository
        self._agencies = agency_repository
        self._validation = validation_service
        self._notifications = notification_service
        self._time = time_authority
        self._config = config
        self._init_logger(component="workflow")

    async def accept_candidature(
        self,
        candidature_id: UUID,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> WorkflowActionResult:
        """Accept a candidature and assign its investigator to the mandate.

        Accepting again a candidature whose investigator already holds
        the mandate is a no-op success.

        Args:
            candidature_id: The candidature to accept.
            mandate_id: The mandate it targets.
            investigator_id: The applying investigator.

        Returns:
            WorkflowActionResult carrying the assigned mandate, the
            accepted candidature and the redirect URL on success.
        """
        log = self._log_operation(
            "accept_candidature",
            candidature_id=str(candidature_id),
            mandate_id=str(mandate_id),
            investigator_id=str(investigator_id),
        )
        log.info("candidature_acceptance_requested")
        redirect_url = AFTER_ACCEPT_CANDIDATURE_URL.format(mandate_id=mandate_id)

        try:
            validation = await self._validation.validate_assignment(
                mandate_id, investigator_id
            )
            if not validation:
                return self._rejected(log, validation.reason or MANDATE_NOT_FOUND)

            candidature = await self._candidatures.get_by_id(candidature_id)
            mandate = await self._mandates.get_by_id(mandate_id)
        except PersistenceError:
            return self._failed(log, "candidature_acceptance_precheck_failed")

        if candidature is None:
            return self._rejected(log, CANDIDATURE_NOT_FOUND)
        if (
            candidature.mandate_id != mandate_id
            or candidature.investigator_id != investigator_id
        ):
            return self._rejected(log, CANDIDATURE_MISMATCH)
        if mandate is None:
            return self._rejected(log, MANDATE_NOT_FOUND)

        already_assigned = (
            mandate.status == MandateStatus.IN_PROGRESS
            and mandate.assigned_to == investigator_id
        )
        if already_assigned and candidature.status == CandidatureStatus.ACCEPTED:
            log.info("candidature_already_accepted")
            return WorkflowActionResult.succeeded(
                mandate=mandate, candidature=candidature, redirect_url=redirect_url
            )
        if candidature.status.is_resolved():
            return self._rejected(log, CANDIDATURE_ALREADY_RESOLVED)

        if not already_assigned:
            transition = self._validation.validate_status_transition(
                mandate.status, MandateStatus.IN_PROGRESS, True
            )
            if not transition:
                return self._rejected(log, transition.reason or MANDATE_CHANGED)

        now = self._time.now()
        try:
            accepted = await self._candidatures.update_status(
                candidature_id,
                CandidatureStatus.INTERESTED,
                CandidatureStatus.ACCEPTED,
                now,
            )
        except PersistenceError:
            return self._failed(log, "candidature_acceptance_failed")
        if accepted is None:
            return self._rejected(log, CANDIDATURE_ALREADY_RESOLVED)

        if already_assigned:
            assigned = mandate
        else:
            try:
                assigned = await self._mandates.assign_investigator(
                    mandate_id, investigator_id, mandate.status, now
                )
            except PersistenceError:
                await self._restore_candidature(accepted, log)
                return self._failed(log, "mandate_assignment_failed")
            if assigned is None:
                log.warning("assignment_race_lost")
                await self._restore_candidature(accepted, log)
                return self._rejected(log, MANDATE_ASSIGNED_TO_OTHER)

        log.info("candidature_accepted")

        siblings = await self._reject_siblings(mandate_id, candidature_id, log)

        await self._notifications.notify_candidature_accepted(
            investigator_id, mandate_id, assigned.title
        )
        for sibling in siblings:
            await self._notifications.notify_candidature_rejected(
                sibling.investigator_id, mandate_id, assigned.title
            )

        return WorkflowActionResult.succeeded(
            mandate=assigned, candidature=accepted, redirect_url=redirect_url
        )

    async def reject_candidature(self, candidature_id: UUID) -> WorkflowActionResult:
        """Reject a pending candidature. The mandate is left untouched.

        Args:
            candidature_id: The candidature to reject.

        Returns:
            WorkflowActionResult carrying the rejected candidature.
        """
        log = self._log_operation(
            "reject_candidature", candidature_id=str(candidature_id)
        )
        log.info("candidature_rejection_requested")

        try:
            candidature = await self._candidatures.get_by_id(candidature_id)
            if candidature is None:
                return self._rejected(log, CANDIDATURE_NOT_FOUND)
            if candidature.status.is_resolved():
                return self._rejected(log, CANDIDATURE_ALREADY_RESOLVED)

            mandate = await self._mandates.get_by_id(candidature.mandate_id)
            if mandate is None:
                return self._rejected(log, MANDATE_NOT_FOUND)

            rejected = await self._candidatures.update_status(
                candidature_id,
                CandidatureStatus.INTERESTED,
                CandidatureStatus.REJECTED,
                self._time.now(),
            )
        except PersistenceError:
            return self._failed(log, "candidature_rejection_failed")

        if rejected is None:
            return self._rejected(log, CANDIDATURE_ALREADY_RESOLVED)

        log.info("candidature_rejected", mandate_id=str(mandate.id))
        await self._notifications.notify_candidature_rejected(
            rejected.investigator_id, mandate.id, mandate.title
        )
        return WorkflowActionResult.succeeded(mandate=mandate, candidature=rejected)

    async def unassign_investigator(self, mandate_id: UUID) -> WorkflowActionResult:
        """Remove the assigned investigator and reopen the mandate.

        Resolved candidatures of the mandate are left as they are.

        Args:
            mandate_id: The mandate to reopen.

        Returns:
            WorkflowActionResult carrying the reopened mandate.
        """
        log = self._log_operation("unassign_investigator", mandate_id=str(mandate_id))
        log.info("unassignment_requested")

        try:
            mandate = await self._mandates.get_by_id(mandate_id)
        except PersistenceError:
            return self._failed(log, "unassignment_precheck_failed")

        if mandate is None:
            return self._rejected(log, MANDATE_NOT_FOUND)
        if mandate.assigned_to is None:
            return self._rejected(log, NO_INVESTIGATOR_ASSIGNED)
        if mandate.status == MandateStatus.COMPLETED:
            return self._rejected(log, CANNOT_UNASSIGN_COMPLETED)

        transition = self._validation.validate_status_transition(
            mandate.status, MandateStatus.OPEN, False
        )
        if not transition:
            return self._rejected(log, transition.reason or MANDATE_CHANGED)

        previous_investigator = mandate.assigned_to
        try:
            reopened = await self._mandates.clear_assignment(
                mandate_id, previous_investigator, mandate.status, self._time.now()
            )
        except PersistenceError:
            return self._failed(log, "unassignment_failed")

        if reopened is None:
            return self._rejected(log, MANDATE_CHANGED)

        log.info(
            "investigator_unassigned",
            previous_investigator_id=str(previous_investigator),
        )
        await self._notifications.notify_investigator_unassigned(
            previous_investigator, mandate_id, reopened.title
        )
        return WorkflowActionResult.succeeded(mandate=reopened)

    async def submit_candidature(
        self,
        mandate_id: UUID,
        investigator_id: UUID,
    ) -> WorkflowActionResult:
        """Record an investigator's interest in an open public mandate.

        Only one candidature per (mandate, investigator) pair is kept. A
        concurrent duplicate that reaches the store is rejected, not failed.

        Args:
            mandate_id: The mandate applied to.
            investigator_id: The applying investigator.

        Returns:
            WorkflowActionResult carrying the new candidature.
        """
        log = self._log_operation(
            "submit_candidature",
            mandate_id=str(mandate_id),
            investigator_id=str(investigator_id),
        )

        try:
            mandate = await self._mandates.get_by_id(mandate_id)
            if mandate is None:
                return self._rejected(log, MANDATE_NOT_FOUND)
            if mandate.status != MandateStatus.OPEN:
                return self._rejected(log, MANDATE_NOT_OPEN)
            if mandate.assignment_type != AssignmentType.PUBLIC:
                return self._rejected(log, MANDATE_NOT_PUBLIC)

            profile = await self._investigators.get_profile(investigator_id)
            if profile is None:
                return self._rejected(log, INVESTIGATOR_NOT_FOUND)

            existing = await self._candidatures.find_by_mandate_and_investigator(
                mandate_id, investigator_id
            )
            if existing is not None:
                return self._rejected(log, CANDIDATURE_DUPLICATE)

            owner_id = await self._agencies.get_owner_id(mandate.agency_id)

            candidature = await self._candidatures.save(
                Candidature(
                    id=uuid4(),
                    mandate_id=mandate_id,
                    investigator_id=investigator_id,
                    created_at=self._time.now(),
                )
            )
        except DuplicateRecordError:
            return self._rejected(log, CANDIDATURE_DUPLICATE)
        except PersistenceError:
            return self._failed(log, "candidature_submission_failed")

        log.info("candidature_submitted", candidature_id=str(candidature.id))
        if owner_id is not None:
            await self._notifications.notify_new_candidature(
                owner_id, mandate_id, mandate.title, profile.name
            )
        else:
            log.warning("agency_owner_not_found", agency_id=str(mandate.agency_id))

        return WorkflowActionResult.succeeded(mandate=mandate, candidature=candidature)

    async def list_candidatures(
        self,
        mandate_id: UUID,
        status: CandidatureStatus | None = None,
    ) -> list[Candidature]:
        """List the candidatures of a mandate, oldest first.

        Raises:
            PersistenceError: If the query fails.
        """
        try:
            return await self._candidatures.list_by_mandate(mandate_id, status)
        except PersistenceError:
            self._log_operation(
                "list_candidatures", mandate_id=str(mandate_id)
            ).exception("candidature_listing_failed")
            raise

    async def _reject_siblings(
        self,
        mandate_id: UUID,
        accepted_id: UUID,
        log: structlog.BoundLogger,
    ) -> list[Candidature]:
        """Reject the other pending candidatures once the mandate is assigned.

        The assignment already committed, so a failure here is logged and
        the acceptance still succeeds.
        """
        if not self._config.reject_sibling_candidatures:
            return []
        try:
            siblings = await self._candidatures.reject_pending_for_mandate(
                mandate_id, accepted_id, self._time.now()
            )
        except PersistenceError:
            log.exception("sibling_rejection_failed")
            return []
        if siblings:
            log.info("sibling_candidatures_rejected", count=len(siblings))
        return siblings

    async def _restore_candidature(
        self,
        candidature: Candidature,
        log: structlog.BoundLogger,
    ) -> None:
        """Put an accepted candidature back to INTERESTED after a failed assignment."""
        try:
            await self._candidatures.update_status(
                candidature.id,
                CandidatureStatus.ACCEPTED,
                CandidatureStatus.INTERESTED,
                self._time.now(),
            )
        except PersistenceError:
            log.exception("candidature_compensation_failed")
            return
        log.info("candidature_restored")

    def _rejected(
        self, log: structlog.BoundLogger, reason: str
    ) -> WorkflowActionResult:
        log.info("workflow_action_rejected", reason=reason)
        return WorkflowActionResult.rejected(reason)

    def _failed(self, log: structlog.BoundLogger, event: str) -> WorkflowActionResult:
        log.exception(event)
        return WorkflowActionResult.failed()
