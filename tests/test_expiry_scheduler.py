"""Tests for the asyncio backed expiry scheduler."""

from __future__ import annotations

import threading
import time

import anyio
import anyio.to_thread
import pytest

from backoffice.domain.entities import NotificationDraft
from backoffice.infrastructure.notifications import (
    AsyncioExpiryScheduler,
    NotificationCenter,
)


def _transient(duration_ms: int) -> NotificationDraft:
    return NotificationDraft(
        kind="success",
        title="Payment received",
        message="Payment for Order #ORD-2024-001 has been processed",
        duration_ms=duration_ms,
    )


@pytest.mark.anyio
async def test_expiry_fires_on_running_loop() -> None:
    center = NotificationCenter(scheduler=AsyncioExpiryScheduler())
    center.start()
    notification_id = center.add(_transient(20))

    assert notification_id in center
    await anyio.sleep(0.2)

    assert notification_id not in center
    center.close()


@pytest.mark.anyio
async def test_remove_cancels_loop_timer() -> None:
    fired: list[str] = []
    scheduler = AsyncioExpiryScheduler()
    scheduler.bind()

    handle = scheduler.schedule(0.02, lambda: fired.append("expired"))
    handle.cancel()
    await anyio.sleep(0.1)

    assert fired == []


@pytest.mark.anyio
async def test_schedule_from_worker_thread() -> None:
    fired: list[str] = []
    scheduler = AsyncioExpiryScheduler()
    scheduler.bind()

    await anyio.to_thread.run_sync(
        scheduler.schedule, 0.02, lambda: fired.append("expired")
    )
    await anyio.sleep(0.2)

    assert fired == ["expired"]


@pytest.mark.anyio
async def test_cancel_from_worker_thread() -> None:
    fired: list[str] = []
    scheduler = AsyncioExpiryScheduler()
    scheduler.bind()

    handle = await anyio.to_thread.run_sync(
        scheduler.schedule, 0.05, lambda: fired.append("expired")
    )
    await anyio.to_thread.run_sync(handle.cancel)
    await anyio.sleep(0.2)

    assert fired == []


@pytest.mark.anyio
async def test_center_add_from_worker_thread() -> None:
    center = NotificationCenter(scheduler=AsyncioExpiryScheduler())
    center.start()

    notification_id = await anyio.to_thread.run_sync(center.add, _transient(20))
    await anyio.sleep(0.2)

    assert notification_id not in center
    center.close()


def test_unbound_scheduler_falls_back_to_thread_timer() -> None:
    fired = threading.Event()
    scheduler = AsyncioExpiryScheduler()

    handle = scheduler.schedule(0.01, fired.set)

    assert isinstance(handle, threading.Timer)
    assert fired.wait(1)


def test_thread_timer_can_be_cancelled() -> None:
    fired = threading.Event()
    scheduler = AsyncioExpiryScheduler()

    handle = scheduler.schedule(0.05, fired.set)
    handle.cancel()

    assert not fired.wait(0.2)


def test_default_center_without_event_loop() -> None:
    center = NotificationCenter()

    notification_id = center.add(_transient(20))

    assert notification_id in center
    time.sleep(0.3)
    assert notification_id not in center


@pytest.mark.anyio
async def test_center_accepts_notifications_after_close() -> None:
    center = NotificationCenter(scheduler=AsyncioExpiryScheduler())
    center.start()
    center.close()

    notification_id = await anyio.to_thread.run_sync(center.add, _transient(20))

    assert notification_id in center
    await anyio.sleep(0.3)
    assert notification_id not in center
