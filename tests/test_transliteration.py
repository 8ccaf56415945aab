from __future__ import annotations

import pytest

from strkit.exceptions import InvalidArgumentError
from strkit.slugify import transliterate
from strkit.tables import TRANSLITERATION_MAP, TRANSLITERATIONS


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Crème brûlée", "Creme brulee"),
        ("Straße", "Strasse"),
        ("Ærøskøbing", "AEroskobing"),
        ("Щука", "SHCHuka"),
        ("Ελλάδα", "Ellada"),
        ("x²", "x2"),
    ],
)
def test_transliterate_examples(text: str, expected: str):
    assert transliterate(text) == expected


def test_transliterate_passes_unmapped_characters_through():
    assert transliterate("plain ASCII, 日本, ☺") == "plain ASCII, 日本, ☺"


def test_transliterate_rejects_none():
    with pytest.raises(InvalidArgumentError):
        transliterate(None)


def test_every_variant_maps_to_its_canonical_form():
    for canonical, variants in TRANSLITERATIONS.items():
        for variant in variants:
            assert transliterate(variant) == canonical


def test_table_variants_are_disjoint_single_non_ascii_characters():
    seen: dict[str, str] = {}
    for canonical, variants in TRANSLITERATIONS.items():
        assert canonical.isascii()
        assert canonical
        for variant in variants:
            assert len(variant) == 1
            assert not variant.isascii()
            assert variant not in seen, f"{variant!r} maps to {seen.get(variant)!r} and {canonical!r}"
            seen[variant] = canonical

    assert len(TRANSLITERATION_MAP) == len(seen)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TRANSLITERATIONS["q"] = ("ʠ",)
