"""Notification center and realtime helpers for the infrastructure layer."""

from .center import (
    DEFAULT_DURATION_MS,
    EVENT_ADDED,
    EVENT_CLEARED,
    EVENT_READ,
    EVENT_READ_ALL,
    EVENT_REMOVED,
    NotificationCenter,
    generate_notification_id,
)
from .manager import NotificationConnectionManager
from .publisher import NotificationPublisher, serialize_notification
from .scheduler import AsyncioExpiryScheduler, ExpiryScheduler, ScheduledExpiry

__all__ = [
    "DEFAULT_DURATION_MS",
    "EVENT_ADDED",
    "EVENT_CLEARED",
    "EVENT_READ",
    "EVENT_READ_ALL",
    "EVENT_REMOVED",
    "NotificationCenter",
    "generate_notification_id",
    "NotificationConnectionManager",
    "NotificationPublisher",
    "serialize_notification",
    "AsyncioExpiryScheduler",
    "ExpiryScheduler",
    "ScheduledExpiry",
]
