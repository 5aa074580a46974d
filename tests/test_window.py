"""Tests for validation windows."""

import asyncio

from settle import MISSING, ValidationWindow


class TestValidationWindow:
    """Tests for ValidationWindow waiter handling."""

    async def test_release_resolves_all_waiters(self) -> None:
        """Test that every waiter receives the same outcome."""
        loop = asyncio.get_running_loop()
        window = ValidationWindow()
        first = window.wait(loop)
        second = window.wait(loop)

        assert window.release(True) == 2
        assert first.result() is True
        assert second.result() is True
        assert len(window) == 0

    async def test_release_skips_cancelled_waiters(self) -> None:
        """Test that a caller-cancelled future is left alone."""
        loop = asyncio.get_running_loop()
        window = ValidationWindow()
        cancelled = window.wait(loop)
        kept = window.wait(loop)
        cancelled.cancel()

        assert window.release(False) == 1
        assert kept.result() is False

    async def test_release_twice_is_harmless(self) -> None:
        """Test that a second release has nothing left to resolve."""
        loop = asyncio.get_running_loop()
        window = ValidationWindow()
        future = window.wait(loop)
        window.release(True)

        assert window.release(False) == 0
        assert future.result() is True

    def test_retarget(self) -> None:
        """Test that retargeting records the latest value."""
        window = ValidationWindow()
        assert window.target is MISSING
        window.retarget("x", 1.0)
        window.retarget("y", 2.0)
        assert window.target == "y"
        assert window.scheduled_at == 2.0
