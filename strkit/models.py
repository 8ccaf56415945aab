"""Data models for strkit."""

from dataclasses import dataclass
from enum import Enum


class CaseStyle(Enum):
    """Casing conventions supported by the case converter.

    Attributes:
        CAMEL: ``fooBarBaz``.
        STUDLY: ``FooBarBaz`` (also known as PascalCase).
        KEBAB: ``foo-bar-baz``.
        SNAKE: ``foo_bar_baz``.
    """

    CAMEL = "camel"
    STUDLY = "studly"
    KEBAB = "kebab"
    SNAKE = "snake"


@dataclass(frozen=True)
class CodecSpec:
    """Parameters of a fixed-width positional codec.

    Attributes:
        digits: Width of each digit group.
        radix: Numeric base of the digits, between 2 and 36.
    """

    digits: int
    radix: int

    @property
    def capacity(self) -> int:
        """Largest value a single digit group can hold."""
        return self.radix**self.digits - 1


BINARY = CodecSpec(digits=16, radix=2)
HEX = CodecSpec(digits=4, radix=16)
DECIMAL = CodecSpec(digits=5, radix=10)

CODEC_SPECS = {
    "binary": BINARY,
    "hex": HEX,
    "decimal": DECIMAL,
}
