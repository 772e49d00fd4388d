"""In-memory store holding the notifications of the current session."""

from __future__ import annotations

import logging
import secrets
import string
import threading
import time
from dataclasses import replace
from typing import Any, Callable, Iterator

from backoffice.domain.entities import Notification, NotificationDraft
from backoffice.domain.validators import ensure_valid_draft
from backoffice.utils import now_in_app_timezone

from .scheduler import AsyncioExpiryScheduler, ExpiryScheduler, ScheduledExpiry

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 5000

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9

EVENT_ADDED = "notification.added"
EVENT_REMOVED = "notification.removed"
EVENT_READ = "notification.read"
EVENT_READ_ALL = "notifications.read_all"
EVENT_CLEARED = "notifications.cleared"

ChangeListener = Callable[[str, Any], None]


def generate_notification_id() -> str:
    """Return an identifier built from the epoch milliseconds and a random suffix."""

    timestamp = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"notif_{timestamp}_{suffix}"


class NotificationCenter:
    """Own the ordered collection of notifications for the running session.

    Notifications are kept newest first. Non persistent entries are removed by
    an expiry callback keyed by id; because :meth:`remove` ignores unknown ids,
    a callback that fires after a manual removal or :meth:`clear_all` has no
    effect. Cancelling the callback on removal only saves work.
    """

    def __init__(
        self,
        *,
        scheduler: ExpiryScheduler | None = None,
        default_duration_ms: int = DEFAULT_DURATION_MS,
        listener: ChangeListener | None = None,
        id_factory: Callable[[], str] = generate_notification_id,
        clock: Callable[[], Any] = now_in_app_timezone,
    ) -> None:
        if default_duration_ms <= 0:
            raise ValueError("default_duration_ms must be greater than zero")
        self._scheduler = scheduler or AsyncioExpiryScheduler()
        self._default_duration_ms = default_duration_ms
        self._listener = listener
        self._id_factory = id_factory
        self._clock = clock
        self._items: list[Notification] = []
        self._expiries: dict[str, ScheduledExpiry] = {}
        self._lock = threading.RLock()

    def start(self) -> None:
        """Bind the expiry scheduler to the running event loop when it supports it."""

        bind = getattr(self._scheduler, "bind", None)
        if callable(bind):
            bind()
        logger.debug("Notification center started")

    def close(self) -> None:
        """Cancel pending expiries and drop every stored notification."""

        with self._lock:
            expiries = list(self._expiries.values())
            self._expiries.clear()
            self._items.clear()
        for expiry in expiries:
            expiry.cancel()
        unbind = getattr(self._scheduler, "unbind", None)
        if callable(unbind):
            unbind()
        logger.debug("Notification center closed (%d pending expiries cancelled)", len(expiries))

    def add(self, draft: NotificationDraft) -> str:
        """Store a new notification built from ``draft`` and return its id."""

        fields = ensure_valid_draft(draft)
        with self._lock:
            notification_id = self._id_factory()
            while self._find_index(notification_id) is not None:
                notification_id = self._id_factory()

            notification = Notification(
                id=notification_id,
                kind=fields.kind,
                title=fields.title,
                message=fields.message,
                created_at=self._clock(),
                read=False,
                persistent=fields.persistent,
                duration_ms=fields.duration_ms,
                action_label=fields.action_label,
                action_target=fields.action_target,
            )
            # Arm the expiry first: a scheduler error must leave the store untouched.
            if not notification.persistent:
                delay_ms = notification.duration_ms or self._default_duration_ms
                self._expiries[notification_id] = self._scheduler.schedule(
                    delay_ms / 1000, lambda: self._expire(notification_id)
                )
            self._items.insert(0, notification)

        logger.debug(
            "Added %s notification %s (persistent=%s)",
            notification.kind.value,
            notification_id,
            notification.persistent,
        )
        self._emit(EVENT_ADDED, notification)
        return notification_id

    def remove(self, notification_id: str) -> None:
        """Remove ``notification_id`` if present."""

        self._discard(notification_id, reason="removed")

    def mark_read(self, notification_id: str) -> None:
        """Flag ``notification_id`` as read; unknown or already read ids are ignored."""

        with self._lock:
            index = self._find_index(notification_id)
            if index is None or self._items[index].read:
                return
            updated = replace(self._items[index], read=True)
            self._items[index] = updated
        self._emit(EVENT_READ, updated)

    def mark_all_read(self) -> None:
        with self._lock:
            changed = False
            for index, notification in enumerate(self._items):
                if not notification.read:
                    self._items[index] = replace(notification, read=True)
                    changed = True
        if changed:
            self._emit(EVENT_READ_ALL, None)

    def clear_all(self) -> None:
        """Empty the collection; pending expiries are left to fire as no-ops."""

        with self._lock:
            if not self._items:
                return
            count = len(self._items)
            self._items.clear()
        logger.debug("Cleared %d notifications", count)
        self._emit(EVENT_CLEARED, None)

    @property
    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for notification in self._items if not notification.read)

    def snapshot(self) -> tuple[Notification, ...]:
        """Return the current notifications, newest first."""

        with self._lock:
            return tuple(self._items)

    def latest(self, limit: int) -> tuple[Notification, ...]:
        """Return up to ``limit`` of the most recently added notifications."""

        if limit <= 0:
            return ()
        with self._lock:
            return tuple(self._items[:limit])

    def get(self, notification_id: str) -> Notification | None:
        with self._lock:
            index = self._find_index(notification_id)
            return None if index is None else self._items[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, notification_id: object) -> bool:
        return isinstance(notification_id, str) and self.get(notification_id) is not None

    def __iter__(self) -> Iterator[Notification]:
        return iter(self.snapshot())

    def _expire(self, notification_id: str) -> None:
        self._discard(notification_id, reason="expired", cancel=False)

    def _discard(self, notification_id: str, *, reason: str, cancel: bool = True) -> None:
        with self._lock:
            expiry = self._expiries.pop(notification_id, None)
            index = self._find_index(notification_id)
            removed = self._items.pop(index) if index is not None else None
        if cancel and expiry is not None:
            expiry.cancel()
        if removed is None:
            return
        logger.debug("Notification %s %s", notification_id, reason)
        self._emit(EVENT_REMOVED, {"id": notification_id, "reason": reason})

    def _find_index(self, notification_id: str) -> int | None:
        for index, notification in enumerate(self._items):
            if notification.id == notification_id:
                return index
        return None

    def _emit(self, event_type: str, data: Any) -> None:
        if self._listener is None:
            return
        try:
            self._listener(event_type, data)
        except Exception:
            logger.exception("Notification listener failed for %s", event_type)


__all__ = [
    "DEFAULT_DURATION_MS",
    "EVENT_ADDED",
    "EVENT_CLEARED",
    "EVENT_READ",
    "EVENT_READ_ALL",
    "EVENT_REMOVED",
    "NotificationCenter",
    "generate_notification_id",
]
