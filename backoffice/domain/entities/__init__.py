"""Domain entities exposed by the application."""

from .notification import Notification, NotificationDraft, NotificationKind

__all__ = [
    "Notification",
    "NotificationDraft",
    "NotificationKind",
]
