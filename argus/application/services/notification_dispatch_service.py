"""Notification Dispatch Service.

Records user-facing notifications for workflow events.

Developer Golden Rules:
1. Fire-and-forget - dispatch only after the workflow mutation committed
2. Graceful degradation - log failures, never raise
3. A dispatch failure never changes the outcome of the workflow action
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from argus.application.services.base import LoggingMixin
from argus.domain.models.notification import Notification, NotificationType

if TYPE_CHECKING:
    from argus.application.ports.notification_repository import (
        NotificationRepositoryProtocol,
    )
    from argus.application.ports.time_authority import TimeAuthorityProtocol


class NotificationDispatchService(LoggingMixin):
    """Best-effort producer of notification records.

    dispatch() appends exactly one record per call. The returned bool
    only reports whether the write went through; callers use it for
    logging and tests, never to decide a workflow outcome.
    """

    def __init__(
        self,
        notification_repository: NotificationRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._notifications = notification_repository
        self._time = time_authority
        self._init_logger(component="notification")

    async def dispatch(
        self,
        recipient_id: UUID,
        title: str,
        message: str,
        notification_type: NotificationType,
        mandate_id: UUID | None = None,
    ) -> bool:
        """Append one notification for a recipient.

        Args:
            recipient_id: User receiving the notification.
            title: Short title.
            message: Body text.
            notification_type: Type tag.
            mandate_id: Related mandate, if any.

        Returns:
            True if the record was written, False if the write failed.
        """
        log = self._log_operation(
            "dispatch",
            recipient_id=str(recipient_id),
            notification_type=notification_type.value,
            mandate_id=str(mandate_id) if mandate_id else None,
        )

        try:
            notification = Notification(
                id=uuid4(),
                user_id=recipient_id,
                title=title,
                message=message,
                type=notification_type,
                created_at=self._time.now(),
                mandate_id=mandate_id,
            )
            await self._notifications.save(notification)
        except Exception:
            log.exception("notification_dispatch_failed")
            return False

        log.info("notification_dispatched", notification_id=str(notification.id))
        return True

    async def notify_candidature_accepted(
        self, investigator_id: UUID, mandate_id: UUID, mandate_title: str
    ) -> bool:
        return await self.dispatch(
            investigator_id,
            "Candidature acceptée",
            f'Votre candidature pour le mandat "{mandate_title}" a été acceptée! '
            "Vous êtes maintenant assigné à ce mandat.",
            NotificationType.ACCEPTED,
            mandate_id,
        )

    async def notify_candidature_rejected(
        self, investigator_id: UUID, mandate_id: UUID, mandate_title: str
    ) -> bool:
        return await self.dispatch(
            investigator_id,
            "Candidature refusée",
            f'Votre candidature pour le mandat "{mandate_title}" '
            "n'a pas été retenue cette fois.",
            NotificationType.UPDATE,
            mandate_id,
        )

    async def notify_investigator_unassigned(
        self, investigator_id: UUID, mandate_id: UUID, mandate_title: str
    ) -> bool:
        return await self.dispatch(
            investigator_id,
            "Mandat réassigné",
            f'Vous n\'êtes plus assigné au mandat "{mandate_title}".',
            NotificationType.UPDATE,
            mandate_id,
        )

    async def notify_investigator_assigned(
        self,
        investigator_id: UUID,
        mandate_id: UUID,
        mandate_title: str,
        agency_name: str | None = None,
    ) -> bool:
        """Tell an investigator a mandate was assigned to them directly."""
        sender = f"L'agence {agency_name}" if agency_name else "Une agence"
        return await self.dispatch(
            investigator_id,
            "Nouveau mandat attribué",
            f"{sender} vous a attribué le mandat: {mandate_title}",
            NotificationType.MANDATE_ASSIGNED,
            mandate_id,
        )

    async def notify_mandate_completed(
        self, agency_owner_id: UUID, mandate_id: UUID, mandate_title: str
    ) -> bool:
        return await self.dispatch(
            agency_owner_id,
            "Mandat complété",
            f'Le mandat "{mandate_title}" a été marqué comme complété. '
            "N'oubliez pas d'évaluer l'enquêteur.",
            NotificationType.UPDATE,
            mandate_id,
        )

    async def notify_new_candidature(
        self,
        agency_owner_id: UUID,
        mandate_id: UUID,
        mandate_title: str,
        investigator_name: str,
    ) -> bool:
        return await self.dispatch(
            agency_owner_id,
            "Nouvelle candidature",
            f'{investigator_name} a postulé pour le mandat "{mandate_title}".',
            NotificationType.NEW_MANDATE,
            mandate_id,
        )
