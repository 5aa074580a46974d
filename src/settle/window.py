"""Validation windows: one debounce cycle and the callers waiting on it."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

from settle.types import MISSING


@dataclass(slots=True)
class ValidationWindow:
    """A debounce cycle from arming until its predicate call settles.

    Each window owns its waiters, so a slow predicate call from an earlier
    window can only ever release the callers that were captured with it.
    """

    target: Any = MISSING
    scheduled_at: float | None = None
    waiters: list[asyncio.Future[bool]] = field(default_factory=list)

    def wait(self, loop: asyncio.AbstractEventLoop) -> asyncio.Future[bool]:
        """Register a new waiter and return its future."""
        future: asyncio.Future[bool] = loop.create_future()
        self.waiters.append(future)
        return future

    def retarget(self, value: Any, at: float) -> None:
        self.target = value
        self.scheduled_at = at

    def release(self, outcome: bool) -> int:
        """Resolve every waiter still pending. Returns how many were resolved."""
        waiters, self.waiters = self.waiters, []
        released = 0
        for future in waiters:
            # A caller may have cancelled its own future
            if not future.done():
                future.set_result(outcome)
                released += 1
        return released

    def __len__(self) -> int:
        return len(self.waiters)
