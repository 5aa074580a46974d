"""Tests for the debounce scheduler."""

import asyncio

from settle import DebounceScheduler


class TestDebounceScheduler:
    """Tests for DebounceScheduler arming and cancellation."""

    async def test_fires_once_with_latest_value(self) -> None:
        """Test that repeated arming collapses into one firing."""
        fired: list[str] = []
        scheduler = DebounceScheduler(10)

        scheduler.arm("a", fired.append)
        scheduler.arm("b", fired.append)
        scheduler.arm("c", fired.append)
        assert scheduler.pending

        await asyncio.sleep(0.05)
        assert fired == ["c"]
        assert not scheduler.pending

    async def test_zero_delay_is_deferred(self) -> None:
        """Test that a zero delay still waits for the next loop iteration."""
        fired: list[str] = []
        scheduler = DebounceScheduler(0)

        scheduler.arm("a", fired.append)
        scheduler.arm("b", fired.append)
        assert fired == []

        await asyncio.sleep(0.01)
        assert fired == ["b"]

    async def test_negative_delay_clamps(self) -> None:
        """Test that a negative delay behaves like zero."""
        scheduler = DebounceScheduler(-100)
        assert scheduler.delay == 0

    async def test_cancel_pending(self) -> None:
        """Test that cancel() prevents the firing."""
        fired: list[str] = []
        scheduler = DebounceScheduler(10)

        scheduler.arm("a", fired.append)
        assert scheduler.cancel() is True
        assert not scheduler.pending

        await asyncio.sleep(0.03)
        assert fired == []

    def test_cancel_without_timer_is_noop(self) -> None:
        """Test that cancel() is idempotent."""
        scheduler = DebounceScheduler(10)
        assert scheduler.cancel() is False
        assert scheduler.cancel() is False
