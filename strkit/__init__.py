"""
strkit: locale-independent string transformations.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    strkit slugify "Hello World & Friends"

Library Usage:
    from strkit import slugify, to_snake_case, hex_encode

    slugify("Crème brûlée & Co")  # "creme-brulee-and-co"
    to_snake_case("fooBarBaz")  # "foo_bar_baz"
    hex_encode("A")  # "0041"
"""

from .casing import (
    convert_case,
    lower_first,
    split_words,
    to_camel_case,
    to_decamelize,
    to_kebab_case,
    to_snake_case,
    to_studly_case,
    upper_first,
)
from .codec import (
    bin_decode,
    bin_encode,
    dec_decode,
    dec_encode,
    decode,
    encode,
    hex_decode,
    hex_encode,
)
from .counting import count_substr
from .entities import html_decode, html_encode
from .exceptions import (
    InvalidArgumentError,
    MalformedInputError,
    StrkitError,
    UnevenDigitGroupsError,
)
from .models import CaseStyle, CodecSpec
from .slugify import collapse_whitespace, slugify, transliterate, words
from .truncate import safe_truncate, truncate

__version__ = "0.1.0"

__all__ = [
    # Slugs and transliteration
    "slugify",
    "transliterate",
    "collapse_whitespace",
    "words",
    # Codec
    "encode",
    "decode",
    "bin_encode",
    "bin_decode",
    "hex_encode",
    "hex_decode",
    "dec_encode",
    "dec_decode",
    # Counting
    "count_substr",
    # Case conversion
    "convert_case",
    "split_words",
    "to_camel_case",
    "to_studly_case",
    "to_kebab_case",
    "to_snake_case",
    "to_decamelize",
    "upper_first",
    "lower_first",
    # Truncation
    "safe_truncate",
    "truncate",
    # HTML entities
    "html_encode",
    "html_decode",
    # Data models
    "CaseStyle",
    "CodecSpec",
    # Exceptions
    "StrkitError",
    "InvalidArgumentError",
    "MalformedInputError",
    "UnevenDigitGroupsError",
    # Version
    "__version__",
]
