"""Constants used across the strkit package."""

from __future__ import annotations

import re
import string

# Text patterns
WORD_PATTERN = re.compile(r"\w+")
WHITESPACE_PATTERN = re.compile(r"\s+")
CASE_DELIMITERS = frozenset("_-")

# Slug pipeline
AMPERSAND = "&"
AMPERSAND_REPLACEMENT = "-and-"
SLUG_SEPARATOR = "-"

# Codec
RADIX_DIGITS = string.digits + string.ascii_lowercase
MIN_RADIX = 2
MAX_RADIX = len(RADIX_DIGITS)
MAX_CODE_UNIT = 0xFFFF
MAX_CODE_POINT = 0x10FFFF

# Truncation
DEFAULT_FILLER = "..."

# Input limits
DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024
