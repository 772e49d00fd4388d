"""Connection management helpers for notification websockets."""

from __future__ import annotations

import logging
from typing import Any, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track the websocket clients subscribed to notification changes."""

    def __init__(self) -> None:
        self._connections: Set[WebSocket] = set()

    def __len__(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        """Accept the websocket connection and register it."""

        await websocket.accept()
        self._connections.add(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        """Remove ``websocket`` from the pool."""

        self._connections.discard(websocket)

    async def broadcast(self, message: dict[str, Any]) -> None:
        """Send ``message`` to every active connection."""

        for connection in list(self._connections):
            try:
                await connection.send_json(message)
            except Exception:  # pragma: no cover - depends on client teardown
                logger.warning("Dropping notification websocket after failed send")
                self.disconnect(connection)


__all__ = ["NotificationConnectionManager"]
