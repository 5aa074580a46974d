"""settle - Debounced, cached, race-free async validation for Python."""

# Building blocks
from settle.cache import ResultCache, same_value

# Duration parsing
from settle.duration import normalize_delay, parse_duration
from settle.errors import SettleError, ValidationFailure, ValidatorClosedError

# Lookup predicates (httpx is imported on construction)
from settle.lookups import AsyncHttpLookup, HttpLookup
from settle.reactive import Signal
from settle.scheduler import DebounceScheduler

# Core types
from settle.types import (
    MISSING,
    Duration,
    Predicate,
    ValidatorOptions,
)

# Validator API
from settle.validator import DebouncedValidator, create_validator, debounced
from settle.window import ValidationWindow

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "AsyncHttpLookup",
    "DebounceScheduler",
    "DebouncedValidator",
    "Duration",
    "HttpLookup",
    "Predicate",
    "ResultCache",
    "SettleError",
    "Signal",
    "ValidationFailure",
    "ValidationWindow",
    "ValidatorClosedError",
    "ValidatorOptions",
    "create_validator",
    "debounced",
    "normalize_delay",
    "parse_duration",
    "same_value",
]
