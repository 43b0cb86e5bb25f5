"""Split SVG path data into command and number tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, TypeAlias, cast

import numpy as np

from .constants import INVALID_PATTERN, SEPARATOR_PATTERN, TOKEN_PATTERN, ValidCommand

if TYPE_CHECKING:
    from collections.abc import Iterator


class CommandToken(NamedTuple):
    """A command letter with its relative flag (lower case letters)."""

    command: ValidCommand
    relative: bool


class InvalidToken(NamedTuple):
    """Text which is neither a command letter nor a number."""

    text: str
    position: int


Token: TypeAlias = CommandToken | float | InvalidToken
"""A token of the path data. Numbers are rounded to 32-bit precision."""


def to_float32(text: str) -> float:
    """Convert a number literal to a float with 32-bit precision.

    Examples:
        >>> to_float32("0.5")
        0.5
        >>> to_float32("-.25")
        -0.25
    """
    return float(np.float32(text))


def tokenize(path: str) -> Iterator[tuple[Token, int]]:
    """Lazily tokenize the path data.

    Separators (spaces, commas, tabs and line breaks) are skipped.
    Text that does not form a token is yielded as `InvalidToken`
    and tokenizing stops there.

    Args:
        path: The path data.

    Yields:
        Tuples of the token and its position in the path data.

    Example:
        >>> [token for token, _ in tokenize("10-5.5 .5")]
        [10.0, -5.5, 0.5]
        >>> next(tokenize("z"))
        (CommandToken(command='Z', relative=True), 0)
    """
    pos = 0
    end = len(path)

    while pos < end:
        if sep := SEPARATOR_PATTERN.match(path, pos):
            pos = sep.end()
            continue

        match = TOKEN_PATTERN.match(path, pos)

        if match is None:
            invalid = INVALID_PATTERN.match(path, pos)
            text = invalid.group() if invalid else path[pos]
            yield InvalidToken(text, pos), pos
            return

        if letter := match.group("command"):
            command = cast(ValidCommand, letter.upper())
            yield CommandToken(command, letter.islower()), pos
        else:
            yield to_float32(match.group("number")), pos

        pos = match.end()
