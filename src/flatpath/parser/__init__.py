"""Parse SVG path data into drawing commands with flattened arcs."""

from __future__ import annotations

from .arc import EllipseParameters, flatten_arc, solve_arc
from .constants import DEFAULT_BEZIER_STEPS
from .errors import Expected, PathParseError
from .parse import Parser, parse_path_str
from .tokens import CommandToken, InvalidToken, Token, tokenize

__all__ = [
    "DEFAULT_BEZIER_STEPS",
    "CommandToken",
    "EllipseParameters",
    "Expected",
    "InvalidToken",
    "Parser",
    "PathParseError",
    "Token",
    "flatten_arc",
    "parse_path_str",
    "solve_arc",
    "tokenize",
]
