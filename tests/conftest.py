"""Shared fixtures for the notification center tests."""

from __future__ import annotations

from typing import Callable

import pytest

from backoffice.infrastructure.notifications import NotificationCenter


class ManualTimer:
    """Timer handle driven by :class:`ManualExpiryScheduler`."""

    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualExpiryScheduler:
    """Expiry scheduler running on a simulated millisecond clock."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.timers: list[ManualTimer] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now_ms + round(delay * 1000), callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, milliseconds: int) -> None:
        """Move the clock forward, firing due timers in deadline order."""

        target = self.now_ms + milliseconds
        while True:
            due = [timer for timer in self.pending if timer.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda item: item.due_ms)
            self.timers.remove(timer)
            self.now_ms = timer.due_ms
            timer.callback()
        self.now_ms = target


@pytest.fixture()
def scheduler() -> ManualExpiryScheduler:
    return ManualExpiryScheduler()


@pytest.fixture()
def events() -> list[tuple[str, object]]:
    return []


@pytest.fixture()
def center(scheduler, events) -> NotificationCenter:
    return NotificationCenter(
        scheduler=scheduler,
        listener=lambda event_type, data: events.append((event_type, data)),
    )


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
