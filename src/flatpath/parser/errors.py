"""Errors raised while parsing path data."""

from __future__ import annotations

from enum import Enum


class Expected(Enum):
    """What the parser expected when it failed."""

    COMMAND = "command"
    NUMBER = "number"


class PathParseError(ValueError):
    """The path data could not be parsed.

    Attributes:
        expected: Whether a command letter or a number was expected.
        position: The offset of the offending token in the path data
            or None if the path data ended early.
    """

    def __init__(self, expected: Expected, position: int | None = None) -> None:
        """Initialize the error.

        Args:
            expected: What the parser expected.
            position: Offset of the offending token, None at the end of input.
        """
        self.expected = expected
        self.position = position

        where = "end of input" if position is None else f"position {position}"
        super().__init__(f"expected {expected.value} at {where}")
