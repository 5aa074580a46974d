"""Debounced, cached, race-free validator.

Provides:
- DebouncedValidator: call it with a value, await a bool
- create_validator(): build one from a ValidatorOptions
- @debounced(...): decorator turning a predicate into a validator
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from settle.cache import ResultCache, same_value
from settle.duration import normalize_delay
from settle.errors import ValidationFailure, ValidatorClosedError
from settle.reactive import Signal
from settle.scheduler import DebounceScheduler
from settle.types import MISSING, Duration, Predicate, ValidatorOptions
from settle.window import ValidationWindow

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DebouncedValidator(Generic[T]):
    """Answers "is this value acceptable?" for a stream of candidate values.

    Calls arriving within ``delay`` of each other share one window: the
    predicate runs once, against the latest value, and every caller of that
    window receives the same outcome. Outcomes are cached (negation
    applied) and replayed without touching the timer while no window is
    armed. Predicate errors resolve the window with ``False`` and are never
    cached.

    Example:
        validator = DebouncedValidator(email_taken, delay="300ms", negate=True)
        available = await validator("someone@example.com")
    """

    def __init__(
        self,
        predicate: Predicate[T],
        *,
        delay: Duration = "500ms",
        negate: bool = False,
        default_value: Any = MISSING,
        max_cache_size: int = 50,
    ) -> None:
        self._predicate = predicate
        self._delay = normalize_delay(delay)
        self._negate = negate
        self._default_value = default_value
        self._cache = ResultCache(max_cache_size)
        self._signal: Signal[bool] = Signal(False)
        self._scheduler = DebounceScheduler(self._delay)
        self._window: ValidationWindow | None = None
        self._in_flight: dict[asyncio.Task[None], ValidationWindow] = {}
        self._closed = False

    @classmethod
    def from_options(
        cls, predicate: Predicate[T], options: ValidatorOptions
    ) -> DebouncedValidator[T]:
        return cls(
            predicate,
            delay=options.delay,
            negate=options.negate,
            default_value=options.default_value,
            max_cache_size=options.max_cache_size,
        )

    @property
    def delay(self) -> int:
        """Debounce delay in milliseconds."""
        return self._delay

    @property
    def negate(self) -> bool:
        return self._negate

    @property
    def default_value(self) -> Any:
        return self._default_value

    @property
    def last_result(self) -> bool:
        """Outcome of the most recently settled predicate call."""
        return self._signal.value

    @property
    def signal(self) -> Signal[bool]:
        return self._signal

    @property
    def cache(self) -> ResultCache:
        return self._cache

    @property
    def pending(self) -> bool:
        """Whether a window is armed and waiting for its timer."""
        return self._scheduler.pending

    @property
    def in_flight(self) -> int:
        """Number of fired windows whose predicate has not settled."""
        return len(self._in_flight)

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, value: T) -> asyncio.Future[bool]:
        return self.check(value)

    def check(self, value: T) -> asyncio.Future[bool]:
        """Validate value; the returned future resolves exactly once."""
        if self._closed:
            raise ValidatorClosedError("validator is closed")
        loop = asyncio.get_running_loop()

        if self._default_value is not MISSING and same_value(
            value, self._default_value
        ):
            logger.debug("Default value bypass: %r", value)
            return _resolved(loop, True)

        # Cache replays only while no window is armed
        window = self._window
        if window is None:
            cached = self._cache.lookup(value)
            if cached is not None:
                return _resolved(loop, cached)
            window = self._window = ValidationWindow()
        future = window.wait(loop)
        window.retarget(value, loop.time())
        self._scheduler.arm(value, self._fire)
        logger.debug("Window armed for %r (%d waiting)", value, len(window))
        return future

    def _fire(self, value: Any) -> None:
        # Capture the armed window; later calls open a fresh one.
        window, self._window = self._window, None
        if window is None:
            return
        logger.debug("Window fired for %r (%d waiting)", value, len(window))
        task = asyncio.get_running_loop().create_task(self._settle(window))
        self._in_flight[task] = window
        task.add_done_callback(self._discard)

    def _discard(self, task: asyncio.Task[None]) -> None:
        self._in_flight.pop(task, None)

    async def _settle(self, window: ValidationWindow) -> None:
        value = window.target
        try:
            raw = self._predicate(value)
            if inspect.isawaitable(raw):
                raw = await raw
            outcome = not raw if self._negate else bool(raw)
        except asyncio.CancelledError:
            window.release(False)
            raise
        except Exception as e:
            logger.warning("%s", ValidationFailure(value, e), exc_info=e)
            self._complete(window, False, cache=False)
        else:
            self._complete(window, outcome, cache=True)

    def _complete(
        self, window: ValidationWindow, outcome: bool, *, cache: bool
    ) -> None:
        if self._closed:
            # close() already released these waiters with the last result
            return
        if cache:
            self._cache.insert(window.target, outcome)
        self._signal.set(outcome)
        released = window.release(outcome)
        logger.debug(
            "Window settled for %r -> %s (%d released)",
            window.target,
            outcome,
            released,
        )

    def close(self) -> None:
        """Cancel the timer and release every waiter with the last result.

        In-flight predicate calls keep running, but their completion no
        longer touches the cache or the signal.
        """
        if self._closed:
            return
        self._closed = True
        if self._scheduler.cancel():
            logger.debug("Pending window cancelled on close")
        last = self._signal.value
        if self._window is not None:
            self._window.release(last)
            self._window = None
        for window in self._in_flight.values():
            window.release(last)
        self._cache.clear()

    async def aclose(self) -> None:
        """close(), then wait for in-flight predicate calls to finish."""
        self.close()
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def __aenter__(self) -> DebouncedValidator[T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _resolved(loop: asyncio.AbstractEventLoop, outcome: bool) -> asyncio.Future[bool]:
    future: asyncio.Future[bool] = loop.create_future()
    future.set_result(outcome)
    return future


def create_validator(
    predicate: Predicate[T], options: ValidatorOptions | None = None
) -> DebouncedValidator[T]:
    """Create a DebouncedValidator from an options object."""
    return DebouncedValidator.from_options(predicate, options or ValidatorOptions())


def debounced(
    *,
    delay: Duration = "500ms",
    negate: bool = False,
    default_value: Any = MISSING,
    max_cache_size: int = 50,
) -> Callable[[Predicate[T]], DebouncedValidator[T]]:
    """Decorator that wraps a predicate in a DebouncedValidator.

    Usage:
        @debounced(delay="300ms", negate=True, default_value="")
        async def email_taken(email: str) -> bool:
            ...

        available = await email_taken("someone@example.com")
    """

    def decorator(predicate: Predicate[T]) -> DebouncedValidator[T]:
        return DebouncedValidator(
            predicate,
            delay=delay,
            negate=negate,
            default_value=default_value,
            max_cache_size=max_cache_size,
        )

    return decorator
