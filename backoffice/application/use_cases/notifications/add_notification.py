"""Use case for surfacing a new notification."""

from backoffice.domain.entities import NotificationDraft, NotificationKind
from backoffice.infrastructure.notifications import NotificationCenter


def add_notification(
    center: NotificationCenter,
    *,
    kind: NotificationKind | str,
    title: str,
    message: str,
    persistent: bool = False,
    duration_ms: int | None = None,
    action_label: str | None = None,
    action_target: str | None = None,
) -> str:
    """Add a notification to ``center`` and return its identifier."""

    draft = NotificationDraft(
        kind=kind,
        title=title,
        message=message,
        persistent=persistent,
        duration_ms=duration_ms,
        action_label=action_label,
        action_target=action_target,
    )
    return center.add(draft)
