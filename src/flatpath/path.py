"""A parsed path with its cached span and whole-path transforms."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from flatpath.parser import DEFAULT_BEZIER_STEPS, parse_path_str
from flatpath.viewbox import Dimensions, ViewBox, estimate_dimensions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import Self

    from flatpath.commands import Command


class Path:
    """Drawing commands bundled with their span `bb` (width, height).

    The span is computed when the commands are set. The transforms
    (`translate`, `resize`, `scale`, `fit`, `cover`) do not update it;
    call `refresh_bb` to derive it from the transformed commands.
    All scaling happens about the origin.

    Example:
        >>> path = Path.from_str("M 0 0 L 10 20")
        >>> path.bb
        (10.0, 20.0)
        >>> path.fit(5, 5)
        >>> path.commands[-1]
        LineTo(x=2.5, y=5.0)
    """

    def __init__(self, commands: Iterable[Command]) -> None:
        """Initialize the path and compute its span."""
        self.commands = list(commands)

    @classmethod
    def from_str(cls, d: str, bezier_steps: int = DEFAULT_BEZIER_STEPS) -> Self:
        """Parse path data into a path.

        Raises:
            PathParseError: If the path data is malformed.
        """
        return cls(parse_path_str(d, bezier_steps))

    def __repr__(self) -> str:
        return f"Path({len(self._commands)} commands, bb={self._bb})"

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def commands(self) -> list[Command]:
        """The drawing commands. Assigning replaces them and recomputes `bb`."""
        return self._commands

    @commands.setter
    def commands(self, commands: list[Command]) -> None:
        self._commands = commands
        self._bb = estimate_dimensions(commands)

    @property
    def bb(self) -> Dimensions:
        """The cached span (width, height)."""
        return self._bb

    def refresh_bb(self) -> Dimensions:
        """Recompute the span from the current commands."""
        self._bb = estimate_dimensions(self._commands)
        return self._bb

    def take_commands(self) -> list[Command]:
        """Hand over the commands, leaving the path empty."""
        commands = self._commands
        self.commands = []
        return commands

    def translate(self, x: float, y: float) -> None:
        """Shift every point by (x, y)."""
        self._commands = [cmd.translate(x, y) for cmd in self._commands]

    def _span(self) -> Dimensions:
        """The cached span, which must be non-zero for rescaling."""
        width, height = self._bb
        if width == 0 or height == 0:
            raise ValueError(f"Cannot rescale a path with a zero span {self._bb}")
        return width, height

    def _apply_scale(self, scale_x: float, scale_y: float) -> None:
        width, height = self._span()

        # a zero factor collapses the axis onto the origin
        vb = ViewBox(
            0,
            0,
            width / scale_x if scale_x else math.inf,
            height / scale_y if scale_y else math.inf,
        )
        self._commands = [vb.scale_cmd(cmd, width, height) for cmd in self._commands]

    def _ratios(self, width: float, height: float) -> tuple[float, float]:
        """The scale factors which map the span to (width, height)."""
        bb_width, bb_height = self._span()
        return width / bb_width, height / bb_height

    def resize(self, width: float, height: float) -> None:
        """Scale x and y independently so the span becomes (width, height)."""
        self._apply_scale(*self._ratios(width, height))

    def scale(self, scale: float) -> None:
        """Scale uniformly by `scale`."""
        self._apply_scale(scale, scale)

    def fit(self, width: float, height: float) -> None:
        """Scale uniformly so the span fits inside (width, height)."""
        scale = min(self._ratios(width, height))
        self._apply_scale(scale, scale)

    def cover(self, width: float, height: float) -> None:
        """Scale uniformly so the span covers (width, height)."""
        scale = max(self._ratios(width, height))
        self._apply_scale(scale, scale)
