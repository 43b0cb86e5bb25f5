"""Solve and flatten elliptical arcs into drawing commands."""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from flatpath.commands import Command, LineTo, SmoothQuadraticCurveTo

from .constants import DEFAULT_BEZIER_STEPS
from .math import arc_segments, ellipse_parameters

logger = logging.getLogger(__name__)


class EllipseParameters(NamedTuple):
    """Center parameterization of an elliptical arc.

    Angles are in radians. The radii are corrected so that the ellipse
    spans both end points.
    """

    cx: float
    cy: float
    rx: float
    ry: float
    start_angle: float
    delta_angle: float

    @property
    def end_angle(self) -> float:
        """The angle at which the arc ends."""
        return self.start_angle + self.delta_angle


def solve_arc(
    start: complex,
    end: complex,
    radii: complex,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
) -> EllipseParameters | None:
    """Convert an SVG arc to its center parameterization.

    Args:
        start: The current point.
        end: The end point of the arc.
        radii: The radii (rx, ry) as a complex number.
        x_axis_rotation: The rotation of the ellipse in degrees.
        large_arc: The large arc flag.
        sweep: The sweep flag.

    Returns:
        The ellipse parameters or None if the arc is degenerate.

    Example:
        >>> solve_arc(0j, 2 + 0j, 1 + 1j, 0, False, True).cx
        1.0
    """
    params = ellipse_parameters(
        start.real,
        start.imag,
        end.real,
        end.imag,
        radii.real,
        radii.imag,
        x_axis_rotation,
        large_arc,
        sweep,
    )

    if math.isnan(params[0]):
        logger.debug("Skipping degenerate arc from %s to %s", start, end)
        return None

    return EllipseParameters(*(float(x) for x in params))


def flatten_arc(
    params: EllipseParameters,
    x_axis_rotation: float,
    steps: int = DEFAULT_BEZIER_STEPS,
) -> list[Command]:
    """Approximate an arc by a line to its start and `steps` quadratic curves.

    Every segment passes exactly through the ellipse at its start, middle
    and end angle.

    Args:
        params: The solved arc, see `solve_arc`.
        x_axis_rotation: The rotation of the ellipse in degrees.
        steps: The number of quadratic curves.

    Returns:
        A `LineTo` to the start of the arc followed by `steps`
        `SmoothQuadraticCurveTo` commands.

    Raises:
        ValueError: If `steps` is not positive.
    """
    if steps < 1:
        raise ValueError(f"Number of steps must be positive, got {steps}")

    segments = arc_segments(
        params.cx,
        params.cy,
        params.rx,
        params.ry,
        params.start_angle,
        params.end_angle,
        x_axis_rotation,
        steps,
    )

    commands: list[Command] = [LineTo(float(segments[0, 0]), float(segments[0, 1]))]
    commands.extend(
        SmoothQuadraticCurveTo(float(cx), float(cy), float(x), float(y))
        for _, _, cx, cy, x, y in segments
    )

    return commands
