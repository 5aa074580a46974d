"""Core types for settle validators."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Final, TypeVar

T = TypeVar("T")


class _Missing:
    """Sentinel type for "no default value"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

# Sync or async; the result is coerced with bool()
Predicate = Callable[[T], bool | Awaitable[bool]]

# Duration type alias
Duration = str | int  # "500ms", "1s" or milliseconds


@dataclass(frozen=True, slots=True)
class ValidatorOptions:
    """Configuration for a debounced validator."""

    delay: Duration = "500ms"
    negate: bool = False
    default_value: object = MISSING  # compared by identity, see cache.same_value
    max_cache_size: int = 50
