"""Domain entity representing a back-office notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationKind(str, Enum):
    """Presentation category of a notification."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class NotificationDraft:
    """Producer supplied fields used to create a :class:`Notification`."""

    kind: NotificationKind | str
    title: str
    message: str
    persistent: bool = False
    duration_ms: int | None = None
    action_label: str | None = None
    action_target: str | None = None


@dataclass(frozen=True)
class Notification:
    """User-facing event kept by the notification center.

    Every field is fixed at creation time except ``read``, which the center
    flips to ``True`` by storing a replacement copy.
    """

    id: str
    kind: NotificationKind
    title: str
    message: str
    created_at: datetime
    read: bool = False
    persistent: bool = False
    duration_ms: int | None = None
    action_label: str | None = None
    action_target: str | None = None

    @property
    def has_action(self) -> bool:
        return self.action_label is not None and self.action_target is not None


__all__ = ["Notification", "NotificationDraft", "NotificationKind"]
