"""Use cases for updating the read state of notifications."""

from typing import Iterable

from backoffice.infrastructure.notifications import NotificationCenter


def mark_notification_read(center: NotificationCenter, notification_id: str) -> None:
    center.mark_read(notification_id)


def acknowledge_notifications(
    center: NotificationCenter, notification_ids: Iterable[object]
) -> int:
    """Mark each id in ``notification_ids`` as read.

    Used by the toast renderer, which acknowledges notifications as soon as it
    displays them. Values that are not strings are skipped. Returns the number
    of ids processed.
    """

    processed = 0
    for notification_id in notification_ids:
        if not isinstance(notification_id, str):
            continue
        center.mark_read(notification_id)
        processed += 1
    return processed


def mark_all_notifications_read(center: NotificationCenter) -> None:
    center.mark_all_read()
