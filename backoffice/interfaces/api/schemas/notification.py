"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from backoffice.domain.entities import Notification, NotificationKind
from backoffice.utils import describe_elapsed


class NotificationCreate(BaseModel):
    """Payload used by producers to add a notification."""

    kind: NotificationKind
    title: str = Field(..., min_length=1, description="Short headline")
    message: str = Field(..., min_length=1, description="Body displayed under the title")
    persistent: bool = False
    duration_ms: int | None = Field(
        default=None, gt=0, description="Milliseconds before a transient notification expires"
    )
    action_label: str | None = Field(default=None, min_length=1)
    action_target: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _validate_action_pair(self) -> "NotificationCreate":
        if (self.action_label is None) != (self.action_target is None):
            raise ValueError("action_label and action_target must be provided together")
        return self


class NotificationCreated(BaseModel):
    """Identifier returned after adding a notification."""

    id: str


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    kind: NotificationKind
    title: str
    message: str
    created_at: datetime
    created_ago: str
    read: bool
    persistent: bool
    duration_ms: int | None = None
    action_label: str | None = None
    action_target: str | None = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        return cls(
            id=notification.id,
            kind=notification.kind,
            title=notification.title,
            message=notification.message,
            created_at=notification.created_at,
            created_ago=describe_elapsed(notification.created_at),
            read=notification.read,
            persistent=notification.persistent,
            duration_ms=notification.duration_ms,
            action_label=notification.action_label,
            action_target=notification.action_target,
        )


class NotificationListRead(BaseModel):
    """Full collection rendered by the notification list view."""

    notifications: list[NotificationRead] = Field(default_factory=list)
    unread_count: int = 0


class UnreadCountRead(BaseModel):
    unread_count: int


__all__ = [
    "NotificationCreate",
    "NotificationCreated",
    "NotificationListRead",
    "NotificationRead",
    "UnreadCountRead",
]
