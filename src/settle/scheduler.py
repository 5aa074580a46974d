"""Single-timer trailing-edge debounce."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class DebounceScheduler:
    """Owns at most one pending timer on the running event loop.

    Every ``arm()`` replaces the pending timer, so a burst of calls inside
    one delay collapses into a single firing carrying the latest value. A
    zero delay still defers to the next loop iteration.
    """

    def __init__(self, delay_ms: int) -> None:
        self._delay = max(delay_ms, 0) / 1000
        self._handle: asyncio.TimerHandle | None = None

    @property
    def delay(self) -> float:
        """Delay in seconds."""
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a timer is armed and has not fired yet."""
        return self._handle is not None

    def arm(self, value: Any, on_fire: Callable[[Any], None]) -> None:
        """Cancel any pending timer and schedule on_fire(value) after delay."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self._delay, self._fire, value, on_fire)

    def cancel(self) -> bool:
        """Cancel the pending timer. Returns False if none was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self, value: Any, on_fire: Callable[[Any], None]) -> None:
        self._handle = None
        on_fire(value)
