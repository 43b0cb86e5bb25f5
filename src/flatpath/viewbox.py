"""Bounding box estimation and viewbox rescaling of drawing commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, MutableSequence, Sequence

    from flatpath.commands import Command

Dimensions: TypeAlias = tuple[float, float]
"""The span of a path as a tuple (width, height)."""


def estimate_dimensions(path: Iterable[Command]) -> Dimensions:
    """Estimate the span of the path from all of its points.

    Control points are included. The bounds are seeded at the origin,
    so the span always reaches (0, 0).

    Args:
        path: The drawing commands.

    Returns:
        The span as a tuple (width, height).

    Example:
        >>> from flatpath.commands import LineTo, MoveTo
        >>> estimate_dimensions([MoveTo(10, 10), LineTo(20, -5)])
        (20.0, 15.0)
    """
    min_x = min_y = max_x = max_y = 0.0

    for cmd in path:
        for p in cmd.points():
            min_x = min(min_x, p.real)
            min_y = min(min_y, p.imag)
            max_x = max(max_x, p.real)
            max_y = max(max_y, p.imag)

    return max_x - min_x, max_y - min_y


@dataclass(frozen=True)
class ViewBox:
    """A rectangle defining the source coordinate frame for rescaling."""

    min_x: float
    min_y: float
    width: float
    height: float

    def scale_x(self, x: float, w: float) -> float:
        """Map x from the viewbox to a frame of width `w`."""
        return (x - self.min_x) * w / self.width

    def scale_y(self, y: float, h: float) -> float:
        """Map y from the viewbox to a frame of height `h`."""
        return (y - self.min_y) * h / self.height

    def scale_cmd(self, cmd: Command, w: float, h: float) -> Command:
        """Map every point of the command to a frame of size (w, h)."""
        return cmd.map_points(
            lambda p: complex(self.scale_x(p.real, w), self.scale_y(p.imag, h))
        )

    def scale_path(self, path: Sequence[Command]) -> list[Command]:
        """Scale the path to its own estimated dimensions."""
        w, h = estimate_dimensions(path)
        return [self.scale_cmd(cmd, w, h) for cmd in path]

    def scale_path_in_place(self, path: MutableSequence[Command]) -> None:
        """Like `scale_path`, but replaces the commands of `path`."""
        w, h = estimate_dimensions(path)
        for ix, cmd in enumerate(path):
            path[ix] = self.scale_cmd(cmd, w, h)

    def scale_iter(self, path: Sequence[Command]) -> Iterator[Command]:
        """Lazily scale the path to its own estimated dimensions."""
        w, h = estimate_dimensions(path)
        return (self.scale_cmd(cmd, w, h) for cmd in path)
