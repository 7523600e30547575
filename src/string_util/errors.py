"""Exception hierarchy for string-util.

Synchronous helpers raise these directly.  ``replace_all_async`` does not
wrap replacer failures: the callback's own exception comes back out of
the await unchanged.
"""

from __future__ import annotations
from typing import Any


class StringUtilError(Exception):
    """Base exception for string-util."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidArgument(StringUtilError, ValueError):
    """Raised when a parameter has the wrong type or is out of range."""


class RandomSourceUnavailable(StringUtilError, RuntimeError):
    """Raised when no cryptographically secure byte source can be used."""


def check_int(name: str, value: Any, minimum: int) -> int:
    """Return ``value`` if it is an integer >= ``minimum``, else raise InvalidArgument."""
    # bool is an int subclass; True is not a length
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"{name} must be an integer, got {type(value).__name__}",
            {"argument": name, "value": repr(value)},
        )
    if value < minimum:
        raise InvalidArgument(
            f"{name} must be at least {minimum}, got {value}",
            {"argument": name, "value": value},
        )
    return value
