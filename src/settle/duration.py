"""Delay parsing for debounce timers."""

import re

from settle.types import Duration

_DELAY_PATTERN = re.compile(r"(?P<amount>\d+)(?P<unit>ms|s|m|h|d)")
_MS_PER_UNIT: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


def parse_duration(duration: Duration, *, minimum: int | None = None) -> int:
    """Convert "250ms", "2s", ... or integer milliseconds to milliseconds.

    With ``minimum`` set, smaller results are raised to it instead of
    rejected.
    """
    if isinstance(duration, bool) or not isinstance(duration, (int, str)):
        raise TypeError(f"Invalid duration: {duration!r}")

    if isinstance(duration, str):
        match = _DELAY_PATTERN.fullmatch(duration)
        if match is None:
            raise ValueError(f"Invalid duration: {duration!r}")
        millis = int(match["amount"]) * _MS_PER_UNIT[match["unit"]]
    else:
        millis = duration

    if minimum is not None and millis < minimum:
        return minimum
    return millis


def normalize_delay(delay: Duration) -> int:
    """Parse a debounce delay; negative delays mean "next loop iteration"."""
    return parse_duration(delay, minimum=0)
