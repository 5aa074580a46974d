"""Bounded FIFO cache of validation outcomes.

Keys follow strict equality: scalars (``str``, ``int``, ``bytes``, ...)
match by type and value, everything else matches by identity. Two distinct
dicts with the same contents are different inputs and are validated
separately; this mirrors how form input identity is tracked by callers and
keeps lookups cheap on the hot path.
"""

import logging
from collections import OrderedDict
from typing import Any

logger = logging.getLogger(__name__)

_SCALAR_TYPES: frozenset[type] = frozenset(
    {str, bytes, int, float, complex, bool, type(None)}
)


def _cache_key(value: Any) -> tuple[Any, Any]:
    """Build a hashable key honouring strict equality."""
    if type(value) in _SCALAR_TYPES:
        # bool is kept apart from int: True and 1 are different inputs
        return (type(value), value)
    return (object, id(value))


def same_value(a: Any, b: Any) -> bool:
    """Strict equality: identity, or equal scalars of the same type."""
    if a is b:
        return True
    return type(a) is type(b) and type(a) in _SCALAR_TYPES and a == b


class ResultCache:
    """Insertion-ordered outcome cache with strict FIFO eviction.

    A hit never refreshes an entry's position, and re-inserting an existing
    key updates its outcome in place.
    """

    def __init__(self, max_size: int = 50) -> None:
        if max_size < 1:
            raise ValueError("max_cache_size must be a positive integer")
        self._max_size = max_size
        # The value is stored alongside the outcome so that identity keys
        # stay valid for as long as the entry lives.
        self._entries: OrderedDict[tuple[Any, Any], tuple[Any, bool]] = (
            OrderedDict()
        )

    @property
    def max_size(self) -> int:
        return self._max_size

    def lookup(self, value: Any) -> bool | None:
        """Return the cached outcome for value, or None on a miss."""
        entry = self._entries.get(_cache_key(value))
        if entry is None:
            logger.debug("Cache MISS: %r", value)
            return None
        logger.debug("Cache HIT: %r -> %s", value, entry[1])
        return entry[1]

    def insert(self, value: Any, outcome: bool) -> None:
        """Store an outcome, evicting the oldest entry when full."""
        key = _cache_key(value)
        if key in self._entries:
            self._entries[key] = (value, outcome)
            return
        if len(self._entries) >= self._max_size:
            _, (evicted, _) = self._entries.popitem(last=False)
            logger.debug("Cache EVICT: %r", evicted)
        self._entries[key] = (value, outcome)
        logger.debug("Cache SET: %r -> %s", value, outcome)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def values(self) -> list[Any]:
        """Cached input values, oldest first."""
        return [value for value, _ in self._entries.values()]

    def __contains__(self, value: object) -> bool:
        return _cache_key(value) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
