"""Notification repository stub implementation."""

from __future__ import annotations

from uuid import UUID

from argus.application.ports.notification_repository import (
    NotificationRepositoryProtocol,
)
from argus.domain.models.notification import Notification
from argus.infrastructure.stubs.failure_injection import FailureInjectionMixin


class NotificationRepositoryStub(FailureInjectionMixin, NotificationRepositoryProtocol):
    """In-memory notification storage.

    WARNING: Not for production use.
    """

    def __init__(self) -> None:
        self._notifications: dict[UUID, Notification] = {}
        self._init_failures("notifications")

    def get_all(self) -> list[Notification]:
        """All stored notifications in insertion order (test helper)."""
        return list(self._notifications.values())

    def get_for_user(self, user_id: UUID) -> list[Notification]:
        """Notifications of one recipient in insertion order (test helper)."""
        return [n for n in self._notifications.values() if n.user_id == user_id]

    def clear(self) -> None:
        self._notifications.clear()
        self.reset_failures()

    def count(self) -> int:
        return len(self._notifications)

    async def save(self, notification: Notification) -> None:
        self._check_failure("save")
        self._notifications[notification.id] = notification

    async def list_for_user(
        self,
        user_id: UUID,
        unread_only: bool = False,
    ) -> list[Notification]:
        self._check_failure("list_for_user")
        notifications = [
            n
            for n in self._notifications.values()
            if n.user_id == user_id and not (unread_only and n.read)
        ]
        return sorted(notifications, key=lambda n: n.created_at, reverse=True)

    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> bool:
        self._check_failure("mark_as_read")
        notification = self._notifications.get(notification_id)
        if notification is None or notification.user_id != user_id:
            return False
        self._notifications[notification_id] = notification.as_read()
        return True

    async def delete(self, notification_id: UUID, user_id: UUID) -> bool:
        self._check_failure("delete")
        notification = self._notifications.get(notification_id)
        if notification is None or notification.user_id != user_id:
            return False
        del self._notifications[notification_id]
        return True
