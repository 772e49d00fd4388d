"""Use cases for reading the notification collection."""

from dataclasses import dataclass

from backoffice.domain.entities import Notification
from backoffice.infrastructure.notifications import NotificationCenter


@dataclass(frozen=True)
class NotificationListing:
    """Snapshot consumed by the notification list view."""

    notifications: tuple[Notification, ...]
    unread_count: int


def list_notifications(center: NotificationCenter) -> NotificationListing:
    """Return the ordered notifications together with the unread counter."""

    notifications = center.snapshot()
    unread_count = sum(1 for notification in notifications if not notification.read)
    return NotificationListing(notifications=notifications, unread_count=unread_count)


def latest_notifications(center: NotificationCenter, *, limit: int) -> tuple[Notification, ...]:
    """Return the newest notifications for ambient toast display."""

    return center.latest(limit)
