"""Case conversion between camel, studly, kebab, and snake case."""

from __future__ import annotations

from .constants import CASE_DELIMITERS
from .exceptions import InvalidArgumentError
from .models import CaseStyle
from .validation import ensure_text


def upper_first(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    ensure_text(value)
    return value[:1].upper() + value[1:]


def lower_first(value: str) -> str:
    """Lowercase the first character and leave the rest untouched."""
    ensure_text(value)
    return value[:1].lower() + value[1:]


def split_words(value: str) -> list[str]:
    """Split text into case-conversion segments.

    A new segment starts after every run of ``_``, ``-``, or whitespace, and
    at every uppercase letter that follows another character of the same
    segment. Delimiters are dropped; empty segments never appear.

    Every converter in this module segments its input with this function, so
    delimited and camel-cased inputs are treated alike.

    Args:
        value: Text to segment.

    Returns:
        list[str]: Segments in input order.

    Examples:
        split_words("foo_bar-baz")  # ["foo", "bar", "baz"]
        split_words("fooBarBaz")  # ["foo", "Bar", "Baz"]
        split_words("XMLHttp request")  # ["X", "M", "L", "Http", "request"]
    """
    ensure_text(value)

    segments = []
    current: list[str] = []
    for char in value:
        if char in CASE_DELIMITERS or char.isspace():
            if current:
                segments.append("".join(current))
                current = []
        elif char.isupper() and current:
            segments.append("".join(current))
            current = [char]
        else:
            current.append(char)

    if current:
        segments.append("".join(current))
    return segments


def to_studly_case(value: str) -> str:
    """Convert text to StudlyCase (PascalCase).

    Only the first character of each segment is uppercased; the remaining
    characters keep their case.

    Examples:
        to_studly_case("foo_bar-baz")  # "FooBarBaz"
        to_studly_case("hello wORLD")  # "HelloWORLD"
    """
    return "".join(upper_first(segment) for segment in split_words(value))


def to_camel_case(value: str) -> str:
    """Convert text to camelCase.

    Examples:
        to_camel_case("foo_bar-baz")  # "fooBarBaz"
        to_camel_case("FooBar")  # "fooBar"
    """
    return lower_first(to_studly_case(value))


def to_decamelize(value: str, separator: str) -> str:
    """Lowercase every segment of `value` and join them with `separator`.

    Args:
        value: Text to convert.
        separator: String placed between segments.

    Returns:
        str: The lowercased, separated text.

    Raises:
        InvalidArgumentError: If `value` or `separator` is not a string.

    Examples:
        to_decamelize("fooBarBaz", ".")  # "foo.bar.baz"
    """
    ensure_text(separator, "separator")
    return separator.join(segment.lower() for segment in split_words(value))


def to_kebab_case(value: str) -> str:
    """Convert text to kebab-case.

    Examples:
        to_kebab_case("FooBarBaz")  # "foo-bar-baz"
    """
    return to_decamelize(value, "-")


def to_snake_case(value: str) -> str:
    """Convert text to snake_case.

    Examples:
        to_snake_case("fooBarBaz")  # "foo_bar_baz"
    """
    return to_decamelize(value, "_")


_CONVERTERS = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.STUDLY: to_studly_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.SNAKE: to_snake_case,
}


def convert_case(value: str, style: CaseStyle | str) -> str:
    """Convert text to the given case style.

    Args:
        value: Text to convert.
        style: A `CaseStyle` member or its value (``"camel"``, ``"studly"``,
            ``"kebab"``, ``"snake"``).

    Returns:
        str: The converted text.

    Raises:
        InvalidArgumentError: If `style` is not a known case style.

    Examples:
        convert_case("foo bar", CaseStyle.SNAKE)  # "foo_bar"
        convert_case("foo bar", "kebab")  # "foo-bar"
    """
    try:
        style = CaseStyle(style)
    except ValueError as error:
        choices = ", ".join(member.value for member in CaseStyle)
        raise InvalidArgumentError("style", f"must be one of: {choices}") from error
    return _CONVERTERS[style](value)
