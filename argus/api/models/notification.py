"""Notification inbox API models."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from argus.domain.models.notification import Notification, NotificationType


class NotificationResponse(BaseModel):
    """One notification."""

    id: UUID
    user_id: UUID
    mandate_id: UUID | None
    title: str
    message: str
    type: NotificationType
    read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> NotificationResponse:
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            mandate_id=notification.mandate_id,
            title=notification.title,
            message=notification.message,
            type=notification.type,
            read=notification.read,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    """A user's notifications, newest first."""

    notifications: list[NotificationResponse]
    unread_count: int
