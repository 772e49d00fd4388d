"""FastAPI dependency utilities."""

from fastapi.requests import HTTPConnection

from backoffice.config import Settings
from backoffice.infrastructure.notifications import (
    NotificationCenter,
    NotificationConnectionManager,
)


def get_notification_center(connection: HTTPConnection) -> NotificationCenter:
    """Return the notification center owned by the running application."""

    return connection.app.state.notification_center


def get_connection_manager(connection: HTTPConnection) -> NotificationConnectionManager:
    """Return the websocket pool used to stream notification changes."""

    return connection.app.state.notification_connections


def get_app_settings(connection: HTTPConnection) -> Settings:
    """Return the settings the application was created with."""

    return connection.app.state.settings
