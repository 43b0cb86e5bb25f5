"""Constants for the SVG path parser."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = r"MLHVCSQTAZmlhvcsqtaz"
"""A string containing all the valid SVG path commands."""

ValidCommand: TypeAlias = Literal["M", "L", "H", "V", "C", "S", "Q", "T", "A", "Z"]
"""A type alias for the valid SVG path commands."""

SEPARATOR_PATTERN = re.compile(r"[ ,\t\r\n]+")
"""A regex pattern to match the separators between tokens."""

TOKEN_PATTERN = re.compile(
    r"(?P<command>[" + COMMANDS + r"])"
    r"|(?P<number>-?(?:(?:0|[1-9]\d*)(?:\.\d+)?|\.\d+))"
)
"""A regex pattern to match a single command letter or number."""

INVALID_PATTERN = re.compile(r"[^ ,\t\r\n]+?(?=[ ,\t\r\n" + COMMANDS + r"]|$)|.")
"""A regex pattern to match the text of an unrecognized token."""

SMOOTH_PREDECESSORS: dict[ValidCommand, frozenset[ValidCommand]] = {
    "S": frozenset({"C", "S"}),
    "T": frozenset({"Q", "T"}),
}
"""The commands whose control point a smooth command reflects."""

DEFAULT_BEZIER_STEPS = 16
"""The default number of quadratic segments an arc is flattened into."""
