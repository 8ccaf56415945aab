from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from strkit.casing import split_words, to_kebab_case, to_snake_case, to_studly_case
from strkit.codec import decode, encode
from strkit.counting import count_substr
from strkit.entities import html_decode, html_encode
from strkit.models import CODEC_SPECS
from strkit.slugify import slugify, transliterate, words
from strkit.truncate import safe_truncate


@given(st.text())
def test_transliterate_is_idempotent(text: str):
    once = transliterate(text)
    assert transliterate(once) == once


@given(st.text())
def test_slug_has_no_whitespace_or_edge_hyphens(text: str):
    slug = slugify(text)
    assert not any(char.isspace() for char in slug)
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug


@given(st.text(alphabet=" \t\n?!.,-", min_size=0))
def test_separator_only_titles_have_empty_slugs(text: str):
    assert slugify(text) == ""


@given(st.text())
def test_slugify_is_idempotent(text: str):
    slug = slugify(text)
    assert slugify(slug) == slug


@given(st.sampled_from(sorted(CODEC_SPECS)), st.text())
def test_named_codecs_round_trip(name: str, text: str):
    spec = CODEC_SPECS[name]
    encoded = encode(text, spec.digits, spec.radix, strict=True)
    assert len(encoded) % spec.digits == 0
    assert decode(encoded, spec.digits, spec.radix) == text


@given(
    st.integers(min_value=2, max_value=36),
    st.text(alphabet=string.ascii_letters + string.digits, max_size=20),
)
def test_wide_groups_round_trip_in_any_radix(radix: int, text: str):
    encoded = encode(text, 16, radix)
    assert decode(encoded, 16, radix) == text


@given(st.text(alphabet="ab", max_size=30), st.text(alphabet="ab", min_size=1, max_size=3))
def test_overlapping_count_is_never_smaller(value: str, sub_str: str):
    plain = count_substr(value, sub_str)
    overlapping = count_substr(value, sub_str, allow_overlapping=True)
    assert plain == value.count(sub_str)
    assert overlapping >= plain


@given(st.text(), st.integers(min_value=0, max_value=60))
def test_safe_truncate_never_splits_words(text: str, length: int):
    filler = "..."
    result = safe_truncate(text, length, filler)

    if length == 0:
        assert result == ""
        return
    if length >= len(text):
        assert result == text
        return

    assert result.endswith(filler)
    kept = result[: -len(filler)]
    kept_words = kept.split(" ") if kept else []
    assert kept_words == words(text)[: len(kept_words)]


@given(st.text(alphabet=string.ascii_letters + "_- ", max_size=40))
def test_kebab_and_snake_agree_on_segments(text: str):
    segments = [segment.lower() for segment in split_words(text)]
    assert to_kebab_case(text) == "-".join(segments)
    assert to_snake_case(text) == "_".join(segments)


@given(st.text(alphabet=string.ascii_lowercase + "_- ", max_size=40))
def test_studly_case_contains_no_delimiters(text: str):
    studly = to_studly_case(text)
    assert not any(char in "_- " for char in studly)


@given(st.text())
def test_html_round_trip(text: str):
    assert html_decode(html_encode(text)) == text
