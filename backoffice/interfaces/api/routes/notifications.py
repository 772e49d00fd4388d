"""Endpoints and websocket handler for the notification center."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)

from backoffice.application.use_cases.notifications import (
    acknowledge_notifications,
    add_notification,
    clear_notifications,
    latest_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    remove_notification,
)
from backoffice.config import Settings
from backoffice.domain.validators import NotificationValidationError
from backoffice.infrastructure.notifications import (
    NotificationCenter,
    NotificationConnectionManager,
    serialize_notification,
)
from backoffice.interfaces.api.dependencies import (
    get_app_settings,
    get_connection_manager,
    get_notification_center,
)
from backoffice.interfaces.api.schemas import (
    NotificationCreate,
    NotificationCreated,
    NotificationListRead,
    NotificationRead,
    UnreadCountRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=NotificationListRead)
async def list_all_notifications(
    center: NotificationCenter = Depends(get_notification_center),
) -> NotificationListRead:
    """Return every notification, newest first, with the unread counter."""

    listing = list_notifications(center)
    return NotificationListRead(
        notifications=[NotificationRead.from_entity(n) for n in listing.notifications],
        unread_count=listing.unread_count,
    )


@router.get("/latest", response_model=list[NotificationRead])
async def list_latest_notifications(
    limit: int | None = Query(default=None, gt=0),
    center: NotificationCenter = Depends(get_notification_center),
    settings: Settings = Depends(get_app_settings),
) -> list[NotificationRead]:
    """Return the newest notifications for the toast renderer."""

    effective_limit = limit or settings.notification_latest_limit
    return [
        NotificationRead.from_entity(notification)
        for notification in latest_notifications(center, limit=effective_limit)
    ]


@router.get("/unread-count", response_model=UnreadCountRead)
async def get_unread_count(
    center: NotificationCenter = Depends(get_notification_center),
) -> UnreadCountRead:
    return UnreadCountRead(unread_count=center.unread_count)


@router.post("/", response_model=NotificationCreated, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreate,
    center: NotificationCenter = Depends(get_notification_center),
) -> NotificationCreated:
    """Add a notification on behalf of a back-office module."""

    try:
        notification_id = add_notification(
            center,
            kind=payload.kind,
            title=payload.title,
            message=payload.message,
            persistent=payload.persistent,
            duration_ms=payload.duration_ms,
            action_label=payload.action_label,
            action_target=payload.action_target,
        )
    except NotificationValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return NotificationCreated(id=notification_id)


@router.post("/read-all", status_code=status.HTTP_204_NO_CONTENT)
async def mark_all_read(
    center: NotificationCenter = Depends(get_notification_center),
) -> Response:
    mark_all_notifications_read(center)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_read(
    notification_id: str,
    center: NotificationCenter = Depends(get_notification_center),
) -> Response:
    """Mark a notification as read. Unknown ids are accepted silently."""

    mark_notification_read(center, notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def clear_all(
    center: NotificationCenter = Depends(get_notification_center),
) -> Response:
    clear_notifications(center)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    center: NotificationCenter = Depends(get_notification_center),
) -> Response:
    """Remove a notification. Unknown ids are accepted silently."""

    remove_notification(center, notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket,
    center: NotificationCenter = Depends(get_notification_center),
    manager: NotificationConnectionManager = Depends(get_connection_manager),
) -> None:
    """Websocket endpoint that streams notification changes to the admin panel."""

    await manager.connect(websocket)
    try:
        listing = list_notifications(center)
        await websocket.send_json(
            {
                "type": "init",
                "data": {
                    "notifications": [
                        serialize_notification(n) for n in listing.notifications
                    ],
                    "unread_count": listing.unread_count,
                },
            }
        )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                logger.debug("Ignoring malformed websocket message")
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    acknowledge_notifications(center, ids)
                continue
    except WebSocketDisconnect:
        manager.disconnect(websocket)
    except Exception:  # pragma: no cover - unexpected transport failure
        manager.disconnect(websocket)
        raise
