"""Use cases for discarding notifications."""

from backoffice.infrastructure.notifications import NotificationCenter


def remove_notification(center: NotificationCenter, notification_id: str) -> None:
    """Remove a single notification; unknown ids are ignored."""

    center.remove(notification_id)


def clear_notifications(center: NotificationCenter) -> None:
    """Remove every notification currently held by ``center``."""

    center.clear_all()
