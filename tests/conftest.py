"""Shared pytest fixtures."""

import asyncio
from typing import Any

import pytest


class RecordingPredicate:
    """Async predicate that records every value it is called with."""

    def __init__(
        self,
        result: Any = True,
        *,
        results: dict[Any, Any] | None = None,
        latency: dict[Any, float] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.results = results or {}
        self.latency = latency or {}
        self.error = error
        self.calls: list[Any] = []

    async def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        delay = self.latency.get(value, 0)
        if delay:
            await asyncio.sleep(delay)
        if self.error is not None:
            raise self.error
        return self.results.get(value, self.result)


@pytest.fixture
def predicate() -> RecordingPredicate:
    """Create a fresh predicate that always answers True."""
    return RecordingPredicate()


@pytest.fixture
def make_predicate() -> type[RecordingPredicate]:
    """Factory for predicates with custom results, latency or errors."""
    return RecordingPredicate
