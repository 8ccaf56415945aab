"""HTML entity encoding and decoding."""

from __future__ import annotations

import re
from html.entities import codepoint2name
from types import MappingProxyType

from .validation import ensure_text

HTML_ENCODE_TABLE = MappingProxyType(
    {chr(codepoint): f"&{name};" for codepoint, name in codepoint2name.items()}
)
HTML_DECODE_TABLE = MappingProxyType(
    {entity: char for char, entity in HTML_ENCODE_TABLE.items()}
)

ENTITY_PATTERN = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);")


def html_encode(value: str) -> str:
    """Replace every character that has a named HTML entity with that entity.

    Examples:
        html_encode("<b>Fish & Chips</b>")  # "&lt;b&gt;Fish &amp; Chips&lt;/b&gt;"
    """
    ensure_text(value)
    return "".join(HTML_ENCODE_TABLE.get(char, char) for char in value)


def html_decode(value: str) -> str:
    """Replace named and numeric HTML character references.

    Unknown names and out-of-range numeric references are left as they are.

    Examples:
        html_decode("&lt;p&gt;&#169; &#x263A;")  # "<p>© ☺"
        html_decode("&bogus;")  # "&bogus;"
    """
    ensure_text(value)
    return ENTITY_PATTERN.sub(_replace_entity, value)


def _replace_entity(match: re.Match[str]) -> str:
    entity = match.group(0)
    if entity.startswith("&#"):
        body = entity[2:-1]
        codepoint = int(body[1:], 16) if body[:1] in ("x", "X") else int(body)
        if codepoint > 0x10FFFF:
            return entity
        return chr(codepoint)
    return HTML_DECODE_TABLE.get(entity, entity)
