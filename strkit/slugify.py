"""Transliteration and slug generation."""

from __future__ import annotations

from .constants import (
    AMPERSAND,
    AMPERSAND_REPLACEMENT,
    SLUG_SEPARATOR,
    WHITESPACE_PATTERN,
    WORD_PATTERN,
)
from .tables import TRANSLITERATION_MAP
from .validation import ensure_text


def collapse_whitespace(value: str) -> str:
    """Trim `value` and collapse internal whitespace runs to single spaces.

    Examples:
        collapse_whitespace("  foo \t  bar ")  # "foo bar"
    """
    ensure_text(value)
    return WHITESPACE_PATTERN.sub(" ", value.strip())


def words(value: str) -> list[str]:
    """Split text into words, dropping the separators between them.

    A word is a run of letters, digits, or underscores.

    Examples:
        words("Hello, wide world!")  # ["Hello", "wide", "world"]
        words("  ")  # []
    """
    ensure_text(value)
    return WORD_PATTERN.findall(value)


def transliterate(value: str) -> str:
    """Replace accented and non-Latin characters with ASCII equivalents.

    Characters without an entry in the transliteration table pass through
    unchanged. Applying the function twice gives the same result as applying
    it once.

    Args:
        value: Text to transliterate.

    Returns:
        str: Text with every known variant replaced by its ASCII form.

    Raises:
        InvalidArgumentError: If `value` is not a string.

    Examples:
        transliterate("Crème brûlée")  # "Creme brulee"
        transliterate("Straße")  # "Strasse"
    """
    ensure_text(value)
    return value.translate(TRANSLITERATION_MAP)


def slugify(value: str, fallback: str = "") -> str:
    """Generate a URL-style slug.

    Lowercases and trims the text, collapses whitespace, transliterates it to
    ASCII, spells out ``&`` as ``and``, and joins the remaining words with
    hyphens. Punctuation and other non-word characters act as separators.

    Args:
        value: Text to convert into a slug.
        fallback: Returned when no word survives normalization.

    Returns:
        str: Hyphen-separated slug, or `fallback` when the slug would be empty.

    Raises:
        InvalidArgumentError: If `value` or `fallback` is not a string.

    Examples:
        slugify("Hello World & Friends")  # "hello-world-and-friends"
        slugify("Über café")  # "uber-cafe"
        slugify("?!", fallback="untitled")  # "untitled"
    """
    ensure_text(value)
    ensure_text(fallback, "fallback")

    normalized = collapse_whitespace(value.lower())
    normalized = transliterate(normalized)
    normalized = normalized.replace(AMPERSAND, AMPERSAND_REPLACEMENT)

    slug = SLUG_SEPARATOR.join(words(normalized))
    return slug if slug else fallback
