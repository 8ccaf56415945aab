"""Truncation helpers."""

from __future__ import annotations

from .constants import DEFAULT_FILLER
from .exceptions import InvalidArgumentError
from .slugify import words
from .validation import ensure_non_negative, ensure_text


def safe_truncate(value: str, length: int, filler: str = DEFAULT_FILLER) -> str:
    """Truncate text without cutting a word in half.

    Whole words are joined with single spaces for as long as
    ``len(kept) + len(word) + len(filler) + words_kept`` stays within
    `length`; `filler` is then appended. Punctuation between words is not
    kept. The budget counts one extra character per kept word, so the result
    can be shorter than strictly necessary.

    Args:
        value: Text to truncate.
        length: Target maximum length.
        filler: Text appended to a truncated result, for example ``"..."``.

    Returns:
        str: An empty string when `length` is 0, `value` unchanged when it
            already fits, otherwise the kept words followed by `filler`.

    Raises:
        InvalidArgumentError: If `value` or `filler` is not a string or
            `length` is negative.

    Examples:
        safe_truncate("A Javascript string manipulation library.", 19)
        # "A Javascript..."
    """
    ensure_text(value)
    ensure_text(filler, "filler")
    ensure_non_negative(length, "length")

    if length == 0:
        return ""
    if length >= len(value):
        return value

    kept: list[str] = []
    kept_length = 0
    for word in words(value):
        if kept_length + len(word) + len(filler) + len(kept) > length:
            break
        kept_length += len(word) + (1 if kept else 0)
        kept.append(word)
    return " ".join(kept) + filler


def truncate(value: str, length: int, filler: str = DEFAULT_FILLER) -> str:
    """Truncate text to exactly `length` characters, cutting words if needed.

    Examples:
        truncate("A Javascript string manipulation library.", 14)
        # "A Javascrip..."
    """
    ensure_text(value)
    ensure_text(filler, "filler")
    ensure_non_negative(length, "length")

    if length == 0:
        return ""
    if length >= len(value):
        return value
    if length < len(filler):
        raise InvalidArgumentError(
            "length", f"must be at least the filler length ({len(filler)}), got {length}"
        )
    return value[: length - len(filler)] + filler
