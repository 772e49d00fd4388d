"""Use cases for producing and consuming notifications."""

from .add_notification import add_notification
from .events import (
    classify_stock_level,
    notify_error,
    notify_info,
    notify_stock_alert,
    notify_success,
    notify_warning,
)
from .list_notifications import (
    NotificationListing,
    latest_notifications,
    list_notifications,
)
from .mark_read import (
    acknowledge_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .remove_notification import clear_notifications, remove_notification

__all__ = [
    "add_notification",
    "classify_stock_level",
    "notify_error",
    "notify_info",
    "notify_stock_alert",
    "notify_success",
    "notify_warning",
    "NotificationListing",
    "latest_notifications",
    "list_notifications",
    "acknowledge_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "clear_notifications",
    "remove_notification",
]
