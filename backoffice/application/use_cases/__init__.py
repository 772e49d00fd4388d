"""Aggregate application use cases."""

from .notifications import add_notification, list_notifications

__all__ = [
    "add_notification",
    "list_notifications",
]
