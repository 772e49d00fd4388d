"""Utility helpers used by back-office modules to raise notifications."""

from __future__ import annotations

from backoffice.domain.entities import NotificationKind
from backoffice.infrastructure.notifications import NotificationCenter

from .add_notification import add_notification

STOCK_SEVERITY_CRITICAL = "critical"
STOCK_SEVERITY_WARNING = "warning"
STOCK_SEVERITY_LOW = "low"

DEFAULT_REORDER_LEVEL = 10
INVENTORY_ACTION_LABEL = "View inventory"
INVENTORY_ACTION_TARGET = "/warehouse"

_STOCK_KINDS = {
    STOCK_SEVERITY_CRITICAL: NotificationKind.ERROR,
    STOCK_SEVERITY_WARNING: NotificationKind.WARNING,
    STOCK_SEVERITY_LOW: NotificationKind.INFO,
}


def notify_success(center: NotificationCenter, title: str, message: str, **options) -> str:
    return add_notification(
        center, kind=NotificationKind.SUCCESS, title=title, message=message, **options
    )


def notify_error(center: NotificationCenter, title: str, message: str, **options) -> str:
    return add_notification(
        center, kind=NotificationKind.ERROR, title=title, message=message, **options
    )


def notify_warning(center: NotificationCenter, title: str, message: str, **options) -> str:
    return add_notification(
        center, kind=NotificationKind.WARNING, title=title, message=message, **options
    )


def notify_info(center: NotificationCenter, title: str, message: str, **options) -> str:
    return add_notification(
        center, kind=NotificationKind.INFO, title=title, message=message, **options
    )


def classify_stock_level(available: int, reorder_level: int | None = None) -> str | None:
    """Return the alert severity for ``available`` units, or ``None`` when stock is fine.

    Stock at or below zero is critical, at or below half the reorder level is a
    warning and anything else up to the reorder level is low.
    """

    level = reorder_level or DEFAULT_REORDER_LEVEL
    if available <= 0:
        return STOCK_SEVERITY_CRITICAL
    if available <= level * 0.5:
        return STOCK_SEVERITY_WARNING
    if available <= level:
        return STOCK_SEVERITY_LOW
    return None


def notify_stock_alert(
    center: NotificationCenter,
    *,
    product_name: str,
    available: int,
    reorder_level: int | None = None,
    location_name: str | None = None,
) -> str | None:
    """Raise a warehouse alert for ``product_name`` when its stock is low.

    Critical and warning alerts stay until dismissed; low stock alerts expire
    like any other transient notification.
    """

    severity = classify_stock_level(available, reorder_level)
    if severity is None:
        return None

    where = f" at {location_name}" if location_name else ""
    if severity == STOCK_SEVERITY_CRITICAL:
        title = "Out of stock"
        message = f"{product_name} is out of stock{where}."
    else:
        title = "Low stock alert"
        unit = "unit" if available == 1 else "units"
        message = f"{product_name} is running low{where} ({available} {unit} left)."

    return add_notification(
        center,
        kind=_STOCK_KINDS[severity],
        title=title,
        message=message,
        persistent=severity != STOCK_SEVERITY_LOW,
        action_label=INVENTORY_ACTION_LABEL,
        action_target=INVENTORY_ACTION_TARGET,
    )


__all__ = [
    "classify_stock_level",
    "notify_error",
    "notify_info",
    "notify_stock_alert",
    "notify_success",
    "notify_warning",
]
