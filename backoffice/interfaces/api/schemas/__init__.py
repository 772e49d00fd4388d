from .notification import (
    NotificationCreate,
    NotificationCreated,
    NotificationListRead,
    NotificationRead,
    UnreadCountRead,
)

__all__ = [
    "NotificationCreate",
    "NotificationCreated",
    "NotificationListRead",
    "NotificationRead",
    "UnreadCountRead",
]
