"""Drawing commands in absolute coordinates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import Self, override

if TYPE_CHECKING:
    from collections.abc import Callable


class Command(ABC):
    """Abstract base class for drawing commands.

    Every coordinate pair of a command is exposed as a complex number
    (real part x, imaginary part y) in field order.
    """

    __slots__ = ()

    @abstractmethod
    def points(self) -> tuple[complex, ...]:
        """The coordinate pairs of the command."""

    @classmethod
    @abstractmethod
    def from_points(cls, *points: complex) -> Self:
        """Build the command from its coordinate pairs."""

    @property
    def end(self) -> complex | None:
        """The pen position after the command, None for close path."""
        points = self.points()
        return points[-1] if points else None

    def map_points(self, fn: Callable[[complex], complex]) -> Self:
        """Return a copy with every coordinate pair mapped by `fn`."""
        return self.from_points(*(fn(p) for p in self.points()))

    def translate(self, dx: float, dy: float) -> Self:
        """Return a copy shifted by (dx, dy)."""
        offset = complex(dx, dy)
        return self.map_points(lambda p: p + offset)


@dataclass(frozen=True, slots=True)
class MoveTo(Command):
    """M x y"""

    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (complex(self.x, self.y),)

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        (p,) = points
        return cls(p.real, p.imag)


@dataclass(frozen=True, slots=True)
class LineTo(Command):
    """L x y"""

    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (complex(self.x, self.y),)

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        (p,) = points
        return cls(p.real, p.imag)


@dataclass(frozen=True, slots=True)
class CurveTo(Command):
    """C x1 y1 x2 y2 x y"""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (
            complex(self.x1, self.y1),
            complex(self.x2, self.y2),
            complex(self.x, self.y),
        )

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        p1, p2, p = points
        return cls(p1.real, p1.imag, p2.real, p2.imag, p.real, p.imag)


@dataclass(frozen=True, slots=True)
class ClosePath(Command):
    """Z"""

    @override
    def points(self) -> tuple[complex, ...]:
        return ()

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        if points:
            raise ValueError("Close path takes no points")
        return cls()


@dataclass(frozen=True, slots=True)
class SmoothCurveTo(Command):
    """S x2 y2 x y with the reflected first control point (cx, cy)."""

    cx: float
    cy: float
    x2: float
    y2: float
    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (
            complex(self.cx, self.cy),
            complex(self.x2, self.y2),
            complex(self.x, self.y),
        )

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        c, p2, p = points
        return cls(c.real, c.imag, p2.real, p2.imag, p.real, p.imag)


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo(Command):
    """Q x1 y1 x y"""

    x1: float
    y1: float
    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (complex(self.x1, self.y1), complex(self.x, self.y))

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        p1, p = points
        return cls(p1.real, p1.imag, p.real, p.imag)


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurveTo(Command):
    """T x y with the reflected control point (cx, cy)."""

    cx: float
    cy: float
    x: float
    y: float

    @override
    def points(self) -> tuple[complex, ...]:
        return (complex(self.cx, self.cy), complex(self.x, self.y))

    @override
    @classmethod
    def from_points(cls, *points: complex) -> Self:
        c, p = points
        return cls(c.real, c.imag, p.real, p.imag)
