"""Parse SVG path data into drawing commands in absolute coordinates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flatpath.commands import (
    ClosePath,
    Command,
    CurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    SmoothCurveTo,
    SmoothQuadraticCurveTo,
)

from .arc import flatten_arc, solve_arc
from .constants import DEFAULT_BEZIER_STEPS, SMOOTH_PREDECESSORS, ValidCommand
from .errors import Expected, PathParseError
from .tokens import CommandToken, InvalidToken, Token, tokenize

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Parser:
    """Single pass parser for SVG path data.

    The parser tracks the current point, the current control point
    (for smooth curves), the start of the current subpath (for close path)
    and the last command letter. Elliptical arcs are flattened into
    a line and `bezier_steps` smooth quadratic curves.

    Example:
        >>> Parser("M 0 0 10 10").parse()
        [MoveTo(x=0.0, y=0.0), LineTo(x=10.0, y=10.0)]
    """

    def __init__(self, path: str, bezier_steps: int = DEFAULT_BEZIER_STEPS) -> None:
        """Initialize the parser.

        Args:
            path: The path data.
            bezier_steps: The number of quadratic curves per arc.
        """
        if bezier_steps < 1:
            raise ValueError(f"bezier_steps must be positive, got {bezier_steps}")

        self.path = path
        self.bezier_steps = bezier_steps

        self._tokens = tokenize(path)
        self._peeked: tuple[Token, int] | None = None
        self._consumed = False

        self.pos = 0j
        self.control = 0j
        self.start = 0j
        self.last_command: ValidCommand | None = None

        self.commands: list[Command] = []

        self._handlers: dict[ValidCommand, Callable[[bool], None]] = {
            "M": self._move_to,
            "L": self._line_to,
            "H": self._horizontal,
            "V": self._vertical,
            "C": self._curve_to,
            "S": self._smooth_curve_to,
            "Q": self._quadratic,
            "T": self._smooth_quadratic,
            "A": self._arc,
            "Z": self._close_path,
        }

    def parse(self) -> list[Command]:
        """Parse the whole path data.

        Raises:
            PathParseError: If a command letter or a number was expected
                but something else was found.
            RuntimeError: If the parser was already used.
        """
        if self._consumed:
            raise RuntimeError("Parser can only be used once")
        self._consumed = True

        while (item := self._next()) is not None:
            token, position = item

            if not isinstance(token, CommandToken):
                raise PathParseError(Expected.COMMAND, position)

            self._handlers[token.command](token.relative)
            self.last_command = token.command

        logger.debug(
            "Parsed %d commands from %d characters", len(self.commands), len(self.path)
        )

        return self.commands

    def _next(self) -> tuple[Token, int] | None:
        """Consume the next token."""
        if self._peeked is not None:
            item, self._peeked = self._peeked, None
            return item
        return next(self._tokens, None)

    def _peek(self) -> tuple[Token, int] | None:
        """Look at the next token without consuming it."""
        if self._peeked is None:
            self._peeked = next(self._tokens, None)
        return self._peeked

    def _number(self) -> float:
        """Consume a number or fail."""
        item = self._next()

        if item is None:
            raise PathParseError(Expected.NUMBER)

        token, position = item
        if isinstance(token, CommandToken | InvalidToken):
            raise PathParseError(Expected.NUMBER, position)

        return token

    def _try_number(self) -> float | None:
        """Consume the next token only if it is a number."""
        item = self._peek()

        if item is None or isinstance(item[0], CommandToken | InvalidToken):
            return None

        self._peeked = None
        return item[0]

    def _point(self) -> complex:
        """Consume a coordinate pair."""
        x = self._number()
        return complex(x, self._number())

    def _delta(self, relative: bool) -> complex:
        return self.pos if relative else 0j

    def _reflected_control(self, command: ValidCommand) -> complex:
        """The first control point of a smooth curve."""
        if self.last_command in SMOOTH_PREDECESSORS[command]:
            return 2 * self.pos - self.control
        return self.pos

    def _move_to(self, relative: bool) -> None:
        self.pos = self._point() + self._delta(relative)
        self.start = self.pos
        self.commands.append(MoveTo.from_points(self.pos))

        # further coordinate pairs are implicit line to commands
        self._line_to(relative)

    def _line_to(self, relative: bool) -> None:
        while (x := self._try_number()) is not None:
            self.pos = complex(x, self._number()) + self._delta(relative)
            self.commands.append(LineTo.from_points(self.pos))

    def _horizontal(self, relative: bool) -> None:
        while (x := self._try_number()) is not None:
            x += self.pos.real if relative else 0
            self.pos = complex(x, self.pos.imag)
            self.commands.append(LineTo.from_points(self.pos))

    def _vertical(self, relative: bool) -> None:
        while (y := self._try_number()) is not None:
            y += self.pos.imag if relative else 0
            self.pos = complex(self.pos.real, y)
            self.commands.append(LineTo.from_points(self.pos))

    def _curve_to(self, relative: bool) -> None:
        while (x1 := self._try_number()) is not None:
            delta = self._delta(relative)
            p1 = complex(x1, self._number()) + delta
            p2 = self._point() + delta
            self.pos = self._point() + delta
            self.control = p2
            self.commands.append(CurveTo.from_points(p1, p2, self.pos))

    def _smooth_curve_to(self, relative: bool) -> None:
        while (x2 := self._try_number()) is not None:
            delta = self._delta(relative)
            p2 = complex(x2, self._number()) + delta
            end = self._point() + delta

            control = self._reflected_control("S")
            self.pos = end
            self.control = p2
            self.commands.append(SmoothCurveTo.from_points(control, p2, end))
            self.last_command = "S"

    def _quadratic(self, relative: bool) -> None:
        while (x1 := self._try_number()) is not None:
            delta = self._delta(relative)
            p1 = complex(x1, self._number()) + delta
            self.pos = self._point() + delta
            self.control = p1
            self.commands.append(QuadraticCurveTo.from_points(p1, self.pos))

    def _smooth_quadratic(self, relative: bool) -> None:
        while (x := self._try_number()) is not None:
            end = complex(x, self._number()) + self._delta(relative)

            control = self._reflected_control("T")
            self.pos = end
            self.commands.append(SmoothQuadraticCurveTo.from_points(control, end))
            self.control = end
            self.last_command = "T"

    def _arc(self, relative: bool) -> None:
        while (rx := self._try_number()) is not None:
            delta = self._delta(relative)
            radii = complex(rx, self._number())
            x_axis_rotation = self._number()
            large_arc = self._number() != 0
            sweep = self._number() != 0
            end = self._point() + delta

            params = solve_arc(self.pos, end, radii, x_axis_rotation, large_arc, sweep)
            if params is not None:
                self.commands.extend(
                    flatten_arc(params, x_axis_rotation, self.bezier_steps)
                )

            self.pos = end
            self.control = end

    def _close_path(self, relative: bool) -> None:
        del relative  # z and Z are the same
        self.pos = self.start
        self.commands.append(ClosePath())


def parse_path_str(
    path: str, bezier_steps: int = DEFAULT_BEZIER_STEPS
) -> list[Command]:
    """Parse SVG path data into drawing commands in absolute coordinates.

    Args:
        path: The path data, e.g. the `d` attribute of a `<path>` element.
        bezier_steps: The number of quadratic curves each arc is flattened into.

    Returns:
        The drawing commands.

    Raises:
        PathParseError: If the path data is malformed.

    Example:
        >>> parse_path_str("M 5 5 l 10 0 Z")
        [MoveTo(x=5.0, y=5.0), LineTo(x=15.0, y=5.0), ClosePath()]
    """
    return Parser(path, bezier_steps).parse()
