"""Exception types raised or recorded by settle."""

from typing import Any


class SettleError(Exception):
    """Base class for settle errors."""


class ValidationFailure(SettleError):
    """A predicate raised instead of answering.

    Never raised to callers of a validator: the window that produced it
    resolves its waiters with ``False`` and the failure is logged.
    """

    def __init__(self, value: Any, cause: BaseException) -> None:
        super().__init__(f"Predicate failed for {value!r}: {cause!r}")
        self.value = value
        self.cause = cause


class ValidatorClosedError(SettleError, RuntimeError):
    """The validator was used after close()."""
