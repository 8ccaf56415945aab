from __future__ import annotations

import pytest

from strkit.entities import HTML_DECODE_TABLE, HTML_ENCODE_TABLE, html_decode, html_encode
from strkit.exceptions import InvalidArgumentError


def test_html_encode_replaces_named_characters():
    assert html_encode("<b>Fish & Chips</b>") == "&lt;b&gt;Fish &amp; Chips&lt;/b&gt;"
    assert html_encode("© 2024") == "&copy; 2024"


def test_html_encode_leaves_plain_text_alone():
    assert html_encode("plain text 123") == "plain text 123"


def test_html_decode_replaces_named_and_numeric_references():
    assert html_decode("&lt;p&gt;&#169; &#x263A;") == "<p>© ☺"
    assert html_decode("&amp;amp;") == "&amp;"


@pytest.mark.parametrize("text", ["&bogus;", "&#1114112;", "& alone", "&amp"])
def test_html_decode_leaves_unknown_references(text: str):
    assert html_decode(text) == text


def test_entity_tables_are_inverses():
    assert len(HTML_ENCODE_TABLE) == len(HTML_DECODE_TABLE)
    for char, entity in HTML_ENCODE_TABLE.items():
        assert HTML_DECODE_TABLE[entity] == char


def test_html_functions_reject_none():
    with pytest.raises(InvalidArgumentError):
        html_encode(None)
    with pytest.raises(InvalidArgumentError):
        html_decode(None)
