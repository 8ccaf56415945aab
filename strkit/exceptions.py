"""Package-specific exception types."""

from __future__ import annotations


class StrkitError(ValueError):
    """Base class for errors raised by strkit transformations."""


class InvalidArgumentError(StrkitError):
    """Raised when an argument is missing or outside its documented domain.

    Args:
        name: Name of the offending parameter.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, name: str, reason: str = "should not be None"):
        self.name = name
        self.reason = reason
        super().__init__(f"'{self.name}' {self.reason}.")


class MalformedInputError(StrkitError):
    """Raised when input cannot be decoded with the requested parameters."""


class UnevenDigitGroupsError(MalformedInputError):
    """Raised when encoded input does not split into whole digit groups.

    Args:
        length: Length of the encoded input.
        digits: Width of a single digit group.
    """

    def __init__(self, length: int, digits: int):
        self.length = length
        self.digits = digits
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Encoded input of length {self.length} is not a multiple "
            f"of the digit group width {self.digits}"
        )
