"""Parse SVG path data into absolute drawing commands and transform them."""

from __future__ import annotations

from .commands import (
    ClosePath,
    Command,
    CurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    SmoothCurveTo,
    SmoothQuadraticCurveTo,
)
from .parser import (
    DEFAULT_BEZIER_STEPS,
    EllipseParameters,
    Expected,
    Parser,
    PathParseError,
    flatten_arc,
    parse_path_str,
    solve_arc,
    tokenize,
)
from .path import Path
from .viewbox import ViewBox, estimate_dimensions

__all__ = [
    "DEFAULT_BEZIER_STEPS",
    "ClosePath",
    "Command",
    "CurveTo",
    "EllipseParameters",
    "Expected",
    "LineTo",
    "MoveTo",
    "Parser",
    "Path",
    "PathParseError",
    "QuadraticCurveTo",
    "SmoothCurveTo",
    "SmoothQuadraticCurveTo",
    "ViewBox",
    "estimate_dimensions",
    "flatten_arc",
    "parse_path_str",
    "solve_arc",
    "tokenize",
]
