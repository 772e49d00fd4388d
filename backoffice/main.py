import logging
from contextlib import asynccontextmanager
from datetime import datetime
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.config import Settings, get_settings
from backoffice.infrastructure.notifications import (
    AsyncioExpiryScheduler,
    NotificationCenter,
    NotificationConnectionManager,
    NotificationPublisher,
)
from backoffice.interfaces.api.routes import register_routes
from backoffice.utils import resolve_timezone


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bind the notification center to the server loop and dispose it on shutdown."""

    center: NotificationCenter = app.state.notification_center
    publisher: NotificationPublisher = app.state.notification_publisher
    publisher.bind()
    center.start()
    yield
    center.close()
    publisher.unbind()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    logging.getLogger("backoffice").setLevel(settings.log_level)

    app = FastAPI(title="Back-office notifications", lifespan=lifespan)

    connections = NotificationConnectionManager()
    publisher = NotificationPublisher(connections)
    app.state.settings = settings
    app.state.notification_connections = connections
    app.state.notification_publisher = publisher
    app.state.notification_center = NotificationCenter(
        scheduler=AsyncioExpiryScheduler(),
        default_duration_ms=settings.notification_default_duration_ms,
        listener=publisher,
        clock=partial(datetime.now, resolve_timezone(settings.app_timezone)),
    )

    # The admin panel SPA is served from a different origin during development.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app
