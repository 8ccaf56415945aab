"""Argument checks shared by the public functions."""

from __future__ import annotations

from .exceptions import InvalidArgumentError


def ensure_text(value: object, name: str = "value") -> str:
    """Fail fast unless `value` is a string.

    Args:
        value: Argument to check.
        name: Parameter name used in the error message.

    Returns:
        str: The value unchanged.

    Raises:
        InvalidArgumentError: If `value` is None or not a `str`.

    Examples:
        ensure_text("abc")  # "abc"
        ensure_text(None)  # raises InvalidArgumentError
    """
    if value is None:
        raise InvalidArgumentError(name)
    if not isinstance(value, str):
        raise InvalidArgumentError(name, f"must be a string, got {type(value).__name__}")
    return value


def ensure_non_negative(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, "must be an integer")
    if value < 0:
        raise InvalidArgumentError(name, f"must be >= 0, got {value}")
    return value
