"""Fixed-width positional encoding of text.

Each UTF-16 code unit of the input becomes one zero-padded numeral of a fixed
width, so the named codecs (binary, hex, decimal) can represent any string:
characters outside the Basic Multilingual Plane are written as two groups.
"""

from __future__ import annotations

from .constants import MAX_CODE_POINT, MAX_CODE_UNIT, MAX_RADIX, MIN_RADIX, RADIX_DIGITS
from .exceptions import InvalidArgumentError, MalformedInputError, UnevenDigitGroupsError
from .models import BINARY, DECIMAL, HEX, CodecSpec
from .validation import ensure_text

_UTF16 = "utf-16-be"


def encode(value: str, digits: int, radix: int, strict: bool = False) -> str:
    """Encode text as concatenated fixed-width numerals.

    Args:
        value: Text to encode.
        digits: Width of each digit group; shorter numerals are left-padded
            with ``0``.
        radix: Numeric base, between 2 and 36. Digits above 9 are lowercase
            letters.
        strict: When True, reject code units that need more than `digits`
            digits. Otherwise such numerals are emitted unpadded, and the
            result will not decode with the same parameters.

    Returns:
        str: The encoded text.

    Raises:
        InvalidArgumentError: If `value` is not a string, the codec parameters
            are out of range, or (in strict mode) a code unit does not fit.

    Examples:
        encode("A", 4, 16)  # "0041"
        encode("A", 16, 2)  # "0000000001000001"
    """
    ensure_text(value)
    spec = _make_spec(digits, radix)

    groups = []
    for unit in _code_units(value):
        numeral = _to_numeral(unit, spec.radix)
        if strict and unit > spec.capacity:
            raise InvalidArgumentError(
                "value",
                f"contains code unit {unit:#06x} which does not fit in "
                f"{spec.digits} base-{spec.radix} digits",
            )
        groups.append(numeral.rjust(spec.digits, "0"))
    return "".join(groups)


def decode(value: str, digits: int, radix: int) -> str:
    """Decode text produced by `encode` with the same parameters.

    Decoding with parameters other than the ones used to encode does not
    raise as long as every group parses; it simply yields different text.

    Args:
        value: Concatenated fixed-width numerals.
        digits: Width of each digit group.
        radix: Numeric base of the numerals.

    Returns:
        str: The decoded text.

    Raises:
        InvalidArgumentError: If `value` is not a string or the codec
            parameters are out of range.
        UnevenDigitGroupsError: If the length of `value` is not a multiple of
            `digits`.
        MalformedInputError: If a group contains characters that are not
            digits of `radix`, or names a value above U+10FFFF.

    Examples:
        decode("00410042", 4, 16)  # "AB"
    """
    ensure_text(value)
    spec = _make_spec(digits, radix)

    if len(value) % spec.digits:
        raise UnevenDigitGroupsError(len(value), spec.digits)

    units: list[int] = []
    for start in range(0, len(value), spec.digits):
        group = value[start : start + spec.digits]
        number = _from_numeral(group, spec.radix)
        if number > MAX_CODE_POINT:
            raise MalformedInputError(
                f"Digit group {group!r} at offset {start} exceeds the largest code point"
            )
        if number > MAX_CODE_UNIT:
            units.extend(_code_units(chr(number)))
        else:
            units.append(number)

    raw = b"".join(unit.to_bytes(2, "big") for unit in units)
    return raw.decode(_UTF16, "surrogatepass")


def bin_encode(value: str) -> str:
    """Encode text as 16-digit binary groups."""
    return encode(value, BINARY.digits, BINARY.radix)


def bin_decode(value: str) -> str:
    """Decode 16-digit binary groups."""
    return decode(value, BINARY.digits, BINARY.radix)


def hex_encode(value: str) -> str:
    """Encode text as 4-digit hexadecimal groups."""
    return encode(value, HEX.digits, HEX.radix)


def hex_decode(value: str) -> str:
    """Decode 4-digit hexadecimal groups."""
    return decode(value, HEX.digits, HEX.radix)


def dec_encode(value: str) -> str:
    """Encode text as 5-digit decimal groups."""
    return encode(value, DECIMAL.digits, DECIMAL.radix)


def dec_decode(value: str) -> str:
    """Decode 5-digit decimal groups."""
    return decode(value, DECIMAL.digits, DECIMAL.radix)


def _make_spec(digits: object, radix: object) -> CodecSpec:
    for name, number in (("digits", digits), ("radix", radix)):
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidArgumentError(name, "must be an integer")
    if digits < 1:
        raise InvalidArgumentError("digits", f"must be >= 1, got {digits}")
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidArgumentError(
            "radix", f"must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}"
        )
    return CodecSpec(digits=digits, radix=radix)


def _code_units(value: str) -> list[int]:
    raw = value.encode(_UTF16, "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "big") for i in range(0, len(raw), 2)]


def _to_numeral(number: int, radix: int) -> str:
    if number == 0:
        return "0"
    numeral = []
    while number:
        number, remainder = divmod(number, radix)
        numeral.append(RADIX_DIGITS[remainder])
    return "".join(reversed(numeral))


def _from_numeral(group: str, radix: int) -> int:
    # int() also accepts signs, whitespace, and underscores; reject them first
    allowed = RADIX_DIGITS[:radix] + RADIX_DIGITS[10:radix].upper()
    if any(char not in allowed for char in group):
        raise MalformedInputError(f"{group!r} is not a base-{radix} numeral")
    return int(group, radix)
