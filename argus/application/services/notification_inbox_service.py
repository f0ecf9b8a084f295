"""Notification inbox service.

Recipient-facing access to notifications: list, mark read, delete.
A notification owned by another user is reported as not found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from argus.application.services.base import LoggingMixin

if TYPE_CHECKING:
    from argus.application.ports.notification_repository import (
        NotificationRepositoryProtocol,
    )
    from argus.domain.models.notification import Notification


class NotificationInboxService(LoggingMixin):
    """Read and housekeeping operations on a user's notifications.

    PersistenceError propagates to the caller.
    """

    def __init__(self, notification_repository: NotificationRepositoryProtocol) -> None:
        self._notifications = notification_repository
        self._init_logger(component="notification")

    async def list_notifications(
        self,
        user_id: UUID,
        unread_only: bool = False,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        return await self._notifications.list_for_user(user_id, unread_only=unread_only)

    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> bool:
        """Mark one of the user's notifications read.

        Returns:
            True if the notification exists and belongs to user_id.
        """
        log = self._log_operation(
            "mark_as_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        )
        updated = await self._notifications.mark_as_read(notification_id, user_id)
        log.info("notification_marked_read" if updated else "notification_not_found")
        return updated

    async def delete_notification(self, notification_id: UUID, user_id: UUID) -> bool:
        """Delete one of the user's notifications.

        Returns:
            True if the notification exists and belongs to user_id.
        """
        log = self._log_operation(
            "delete_notification",
            notification_id=str(notification_id),
            user_id=str(user_id),
        )
        deleted = await self._notifications.delete(notification_id, user_id)
        log.info("notification_deleted" if deleted else "notification_not_found")
        return deleted
