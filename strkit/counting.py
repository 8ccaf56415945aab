"""Substring occurrence counting."""

from __future__ import annotations

from .exceptions import InvalidArgumentError
from .validation import ensure_text


def count_substr(
    value: str,
    sub_str: str,
    case_sensitive: bool = True,
    allow_overlapping: bool = False,
) -> int:
    """Count occurrences of `sub_str` in `value`.

    After a match at position ``p`` the scan resumes at ``p + len(sub_str)``,
    or at ``p + 1`` when overlapping matches are allowed.

    Args:
        value: Text to search.
        sub_str: Non-empty text to look for.
        case_sensitive: When False, both strings are lowercased before
            scanning.
        allow_overlapping: Whether consecutive matches may share characters.

    Returns:
        int: Number of matches found.

    Raises:
        InvalidArgumentError: If either argument is not a string or `sub_str`
            is empty.

    Examples:
        count_substr("aaaa", "aa")  # 2
        count_substr("aaaa", "aa", allow_overlapping=True)  # 3
        count_substr("Hello hello", "HELLO", case_sensitive=False)  # 2
    """
    ensure_text(value)
    ensure_text(sub_str, "sub_str")
    if not sub_str:
        raise InvalidArgumentError("sub_str", "must not be empty")

    if not case_sensitive:
        value = value.lower()
        sub_str = sub_str.lower()

    step = 1 if allow_overlapping else len(sub_str)
    count = 0
    position = value.find(sub_str)
    while position != -1:
        count += 1
        position = value.find(sub_str, position + step)
    return count
