"""Validation helpers for notification drafts."""

from __future__ import annotations

from dataclasses import dataclass

from .entities import NotificationDraft, NotificationKind


class NotificationValidationError(ValueError):
    """Raised when a producer submits a malformed notification draft."""


@dataclass(frozen=True)
class ValidatedDraft:
    """Draft fields after normalization."""

    kind: NotificationKind
    title: str
    message: str
    persistent: bool
    duration_ms: int | None
    action_label: str | None
    action_target: str | None


def ensure_valid_draft(draft: NotificationDraft) -> ValidatedDraft:
    """Return the normalized draft or raise :class:`NotificationValidationError`."""

    try:
        kind = NotificationKind(draft.kind)
    except ValueError as exc:
        allowed = ", ".join(kind.value for kind in NotificationKind)
        msg = f"Notification kind must be one of: {allowed}"
        raise NotificationValidationError(msg) from exc

    title = _ensure_text(draft.title, "title")
    message = _ensure_text(draft.message, "message")

    duration_ms = draft.duration_ms
    if duration_ms is not None:
        if isinstance(duration_ms, bool) or not isinstance(duration_ms, int):
            raise NotificationValidationError("duration_ms must be an integer")
        if duration_ms <= 0:
            raise NotificationValidationError("duration_ms must be greater than zero")

    action_label = draft.action_label
    action_target = draft.action_target
    if (action_label is None) != (action_target is None):
        raise NotificationValidationError(
            "action_label and action_target must be provided together"
        )
    if action_label is not None:
        action_label = _ensure_text(action_label, "action_label")
        action_target = _ensure_text(action_target, "action_target")

    return ValidatedDraft(
        kind=kind,
        title=title,
        message=message,
        persistent=bool(draft.persistent),
        duration_ms=duration_ms,
        action_label=action_label,
        action_target=action_target,
    )


def _ensure_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise NotificationValidationError(f"{field_name} must be a non-empty string")
    return value


__all__ = ["NotificationValidationError", "ValidatedDraft", "ensure_valid_draft"]
