"""Deferred callbacks used to expire transient notifications."""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Protocol


class ScheduledExpiry(Protocol):
    """Handle returned by :meth:`ExpiryScheduler.schedule`."""

    def cancel(self) -> None: ...


class ExpiryScheduler(Protocol):
    """Run ``callback`` once after ``delay`` seconds."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledExpiry: ...


class _ThreadSafeTimer:
    """Timer handle created on behalf of a thread outside the event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False
        self._lock = threading.Lock()

    def arm(self, delay: float, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._handle = self._loop.call_later(delay, callback)

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            handle = self._handle
        if handle is not None and not self._loop.is_closed():
            self._loop.call_soon_threadsafe(handle.cancel)


class AsyncioExpiryScheduler:
    """Schedule expiries on the asyncio loop that owns the application.

    The loop is captured by :meth:`bind`, normally from the FastAPI lifespan.
    Producers running in the threadpool forward their timers to that loop.
    Without a usable loop the expiry runs on a daemon :class:`threading.Timer`.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def bind(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Attach the scheduler to ``loop`` or to the running loop."""

        self._loop = loop or asyncio.get_running_loop()

    def unbind(self) -> None:
        self._loop = None

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledExpiry:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        loop = self._loop
        if loop is None or loop.is_closed():
            loop = running
        if loop is None:
            timer = threading.Timer(delay, callback)
            timer.daemon = True
            timer.start()
            return timer

        if running is loop:
            return loop.call_later(delay, callback)

        timer = _ThreadSafeTimer(loop)
        loop.call_soon_threadsafe(timer.arm, delay, callback)
        return timer


__all__ = ["AsyncioExpiryScheduler", "ExpiryScheduler", "ScheduledExpiry"]
