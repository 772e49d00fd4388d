"""Utility helpers for reusable functionality."""

from .datetime import (
    describe_elapsed,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
    resolve_timezone,
)

__all__ = [
    "describe_elapsed",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
    "resolve_timezone",
]
