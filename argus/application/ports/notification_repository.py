"""Notification repository protocol.

The workflow engine appends notifications; recipients list, mark read
and delete their own notifications. mark_as_read and delete are scoped
to the recipient: a notification owned by someone else is treated as
not found.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from argus.domain.models.notification import Notification


class NotificationRepositoryProtocol(Protocol):
    """Protocol for notification persistence."""

    @abstractmethod
    async def save(self, notification: Notification) -> None:
        """Append a notification record.

        Raises:
            PersistenceError: If the insert fails.
        """
        ...

    @abstractmethod
    async def list_for_user(
        self,
        user_id: UUID,
        unread_only: bool = False,
    ) -> list[Notification]:
        """List a user's notifications, newest first.

        Raises:
            PersistenceError: If the query fails.
        """
        ...

    @abstractmethod
    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> bool:
        """Mark a notification read.

        Returns:
            True if a notification owned by user_id was updated.

        Raises:
            PersistenceError: If the update fails.
        """
        ...

    @abstractmethod
    async def delete(self, notification_id: UUID, user_id: UUID) -> bool:
        """Delete a notification.

        Returns:
            True if a notification owned by user_id was deleted.

        Raises:
            PersistenceError: If the delete fails.
        """
        ...
