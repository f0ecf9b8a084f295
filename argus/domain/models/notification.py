"""Notification domain models.

Notifications are user-addressed event records created as a side effect
of workflow events. The workflow engine only creates them; the recipient
marks them read or deletes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID


class NotificationType(str, Enum):
    """Type tag shown in the recipient's inbox."""

    NEW_MANDATE = "new-mandate"
    UPDATE = "update"
    ACCEPTED = "accepted"
    REMINDER = "reminder"
    MESSAGE = "message"
    MANDATE_ASSIGNED = "mandate_assigned"


@dataclass(frozen=True, eq=True)
class Notification:
    """A notification addressed to one user.

    Attributes:
        id: Unique identifier.
        user_id: Recipient.
        title: Short title.
        message: Body text.
        type: Type tag.
        created_at: Creation timestamp (UTC).
        mandate_id: Related mandate, if any.
        read: Whether the recipient has read it.
    """

    id: UUID
    user_id: UUID
    title: str
    message: str
    type: NotificationType
    created_at: datetime
    mandate_id: UUID | None = field(default=None)
    read: bool = field(default=False)

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("title must not be empty")
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (UTC)")

    def as_read(self) -> Notification:
        """Create a copy marked as read."""
        return replace(self, read=True)
