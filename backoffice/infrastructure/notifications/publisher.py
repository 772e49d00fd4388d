"""Utility helpers to push notification changes to websocket subscribers."""

from __future__ import annotations

import asyncio
from typing import Any

from anyio import from_thread

from backoffice.domain.entities import Notification

from .manager import NotificationConnectionManager


class NotificationPublisher:
    """Serialize center changes and schedule their delivery.

    Instances are callable so they can be registered directly as the
    notification center's change listener.
    """

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._loop: asyncio.AbstractEventLoop | None = None

    def bind(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Remember the loop that owns the websocket connections."""

        self._loop = loop or asyncio.get_running_loop()

    def unbind(self) -> None:
        self._loop = None

    def __call__(self, event_type: str, data: Any) -> None:
        self.dispatch(event_type, data)

    def dispatch(self, event_type: str, data: Any) -> None:
        """Schedule an ``event_type`` message for every subscriber."""

        if not len(self._manager):
            return

        if isinstance(data, Notification):
            data = serialize_notification(data)
        message = {"type": event_type, "data": data}
        self._schedule_broadcast(message)

    def _schedule_broadcast(self, message: dict[str, Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._loop is not None and not self._loop.is_closed():
                asyncio.run_coroutine_threadsafe(
                    self._manager.broadcast(message), self._loop
                )
            else:
                from_thread.run(self._manager.broadcast, message)
        else:
            loop.create_task(self._manager.broadcast(message))


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "kind": notification.kind.value,
        "title": notification.title,
        "message": notification.message,
        "created_at": notification.created_at.isoformat(),
        "read": notification.read,
        "persistent": notification.persistent,
        "duration_ms": notification.duration_ms,
        "action_label": notification.action_label,
        "action_target": notification.action_target,
    }


__all__ = ["NotificationPublisher", "serialize_notification"]
