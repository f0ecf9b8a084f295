"""Supabase implementation of NotificationRepositoryProtocol."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from argus.application.ports.notification_repository import (
    NotificationRepositoryProtocol,
)
from argus.domain.models.notification import Notification, NotificationType
from argus.infrastructure.adapters.persistence.base import (
    SupabaseRepository,
    parse_timestamp,
    to_iso,
)


class SupabaseNotificationRepository(
    SupabaseRepository, NotificationRepositoryProtocol
):
    """Notifications stored in the `notifications` table.

    mark_as_read and delete filter on user_id as well as id, so a
    notification owned by someone else is never touched.
    """

    table_name = "notifications"

    def _row_to_notification(self, row: dict[str, Any]) -> Notification:
        mandate_id = row.get("mandate_id")
        return Notification(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            title=row["title"],
            message=row.get("message") or "",
            type=NotificationType(row["type"]),
            created_at=parse_timestamp(row["created_at"]),  # type: ignore[arg-type]
            mandate_id=UUID(mandate_id) if mandate_id else None,
            read=bool(row.get("read")),
        )

    async def save(self, notification: Notification) -> None:
        await self._execute(
            "save",
            self._query().insert(
                {
                    "id": str(notification.id),
                    "user_id": str(notification.user_id),
                    "mandate_id": (
                        str(notification.mandate_id) if notification.mandate_id else None
                    ),
                    "title": notification.title,
                    "message": notification.message,
                    "type": notification.type.value,
                    "read": notification.read,
                    "created_at": to_iso(notification.created_at),
                }
            ),
        )

    async def list_for_user(
        self,
        user_id: UUID,
        unread_only: bool = False,
    ) -> list[Notification]:
        query = self._query().select("*").eq("user_id", str(user_id))
        if unread_only:
            query = query.eq("read", False)
        rows = await self._fetch_rows(
            "list_for_user", query.order("created_at", desc=True)
        )
        return [self._row_to_notification(row) for row in rows]

    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> bool:
        rows = await self._fetch_rows(
            "mark_as_read",
            self._query()
            .update({"read": True})
            .eq("id", str(notification_id))
            .eq("user_id", str(user_id)),
        )
        return bool(rows)

    async def delete(self, notification_id: UUID, user_id: UUID) -> bool:
        rows = await self._fetch_rows(
            "delete",
            self._query()
            .delete()
            .eq("id", str(notification_id))
            .eq("user_id", str(user_id)),
        )
        return bool(rows)
