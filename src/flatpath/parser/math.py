"""Numeric kernels for elliptical arcs."""

# allow mathematical names, which would be invalid otherwise
# ruff: noqa: N803
from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
import numpy as np
from numba import njit
from numpy import nan

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
bool_ = numba.types.bool_
f32 = numba.types.float32
f64 = numba.types.float64
intp = numba.types.intp
Tuple = numba.types.Tuple

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Dummy decorator if numba is deactivated."""
        del args, kwargs  # as it is just a debug tool, args and kwargs are not used

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(f64(f64, f64, f64, f64))
def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v.

    The sign follows the cross product u x v. The cosine is clamped
    to [-1, 1] as rounding can push it slightly out of range.
    """
    dot = ux * vx + uy * vy
    length = math.sqrt((ux * ux + uy * uy) * (vx * vx + vy * vy))
    angle = math.acos(min(1.0, max(-1.0, dot / length)))
    if ux * vy - uy * vx < 0:
        return -angle
    return angle


@njit(Tuple([f64, f64])(f64, f64, f64, f64, f64, f64))
def rotate_point(
    px: float, py: float, cx: float, cy: float, cos_phi: float, sin_phi: float
) -> tuple[float, float]:
    """Rotate (px, py) about (cx, cy) by the angle given as cosine and sine."""
    dx = px - cx
    dy = py - cy
    return cx + dx * cos_phi - dy * sin_phi, cy + dx * sin_phi + dy * cos_phi


@njit(Tuple([f32] * 6)(f32, f32, f32, f32, f32, f32, f32, bool_, bool_))
def ellipse_parameters(
    x0: float,
    y0: float,
    x: float,
    y: float,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
) -> tuple[float, float, float, float, float, float]:
    """Convert an arc from endpoint to center parameterization.

    https://www.w3.org/TR/SVG11/implnote.html#ArcConversionEndpointToCenter

    Returns:
        A tuple (cx, cy, rx, ry, start_angle, delta_angle) with the
        corrected radii. All NaN if the arc is degenerate (a zero radius
        or coinciding end points).
    """
    rx = abs(rx)
    ry = abs(ry)

    if rx == 0 or ry == 0 or (x0 == x and y0 == y):
        return nan, nan, nan, nan, nan, nan

    # Convert rotation angle from degrees to radians
    phi = math.radians(x_axis_rotation)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Step 1: Compute (x1', y1')
    dx2 = (x0 - x) / 2
    dy2 = (y0 - y) / 2
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2
    x1p_sq, y1p_sq = x1p**2, y1p**2

    # Correct out of range radii
    radii_check = x1p_sq / rx**2 + y1p_sq / ry**2
    if radii_check > 1:
        rx *= math.sqrt(radii_check)
        ry *= math.sqrt(radii_check)

    # Step 2: Compute (cx', cy')
    rx_sq, ry_sq = rx**2, ry**2

    radical = max(
        0.0,
        (rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq)
        / (rx_sq * y1p_sq + ry_sq * x1p_sq),
    )
    coefficient = math.sqrt(radical)
    if large_arc == sweep:
        coefficient = -coefficient
    cxp = coefficient * rx * y1p / ry
    cyp = -coefficient * ry * x1p / rx

    # Step 3: Compute (cx, cy) from (cx', cy')
    cx = cos_phi * cxp - sin_phi * cyp + (x0 + x) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y0 + y) / 2

    # Step 4: Compute start angle and sweep
    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry

    start_angle = vector_angle(1.0, 0.0, ux, uy)
    delta_angle = vector_angle(ux, uy, vx, vy)

    if not sweep and delta_angle > 0:
        delta_angle -= 2 * math.pi
    elif sweep and delta_angle < 0:
        delta_angle += 2 * math.pi

    return cx, cy, rx, ry, start_angle, delta_angle


@njit(f32[:, ::1](f32, f32, f32, f32, f32, f32, f32, intp))
def arc_segments(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    angle1: float,
    angle2: float,
    x_axis_rotation: float,
    steps: int,
) -> np.ndarray:
    """Approximate an elliptical arc by quadratic Bezier segments.

    The ellipse is sampled at the start, middle and end angle of every
    step. The control point is chosen so that the quadratic curve passes
    through the middle sample at t = 0.5:
    C = 2 * M - 0.5 * P0 - 0.5 * P2

    Returns:
        An array of shape (steps, 6) with the rows (x0, y0, cx, cy, x2, y2).
    """
    phi = math.radians(x_axis_rotation)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    segments = np.empty((steps, 6), dtype=np.float32)

    for i in range(steps):
        a1 = angle1 + (angle2 - angle1) * (i / steps)
        a2 = angle1 + (angle2 - angle1) * ((i + 1) / steps)
        am = (a1 + a2) * 0.5

        x0, y0 = rotate_point(
            cx + math.cos(a1) * rx, cy + math.sin(a1) * ry, cx, cy, cos_phi, sin_phi
        )
        xm, ym = rotate_point(
            cx + math.cos(am) * rx, cy + math.sin(am) * ry, cx, cy, cos_phi, sin_phi
        )
        x2, y2 = rotate_point(
            cx + math.cos(a2) * rx, cy + math.sin(a2) * ry, cx, cy, cos_phi, sin_phi
        )

        segments[i, 0] = x0
        segments[i, 1] = y0
        segments[i, 2] = 2 * xm - 0.5 * x0 - 0.5 * x2
        segments[i, 3] = 2 * ym - 0.5 * y0 - 0.5 * y2
        segments[i, 4] = x2
        segments[i, 5] = y2

    return segments
