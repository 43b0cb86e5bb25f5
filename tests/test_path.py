"""Tests the path aggregate and its transforms."""

from __future__ import annotations

import numpy as np
import pytest

from flatpath import LineTo, MoveTo, Path, PathParseError


def _coords(path: Path) -> np.ndarray:
    return np.array([p for cmd in path.commands for p in cmd.points()])


@pytest.fixture
def path() -> Path:
    return Path.from_str("M 0 0 L 10 20")


def test_bb(path: Path) -> None:
    assert path.bb == (10, 20)
    assert len(path) == 2


def test_from_str_errors() -> None:
    with pytest.raises(PathParseError):
        Path.from_str("M 1")


def test_from_str_steps() -> None:
    path = Path.from_str("M 0 0 A 5 5 0 0 1 10 0", bezier_steps=4)
    assert len(path) == 1 + 1 + 4


@pytest.mark.parametrize(
    "test_input",
    [
        "M 10 315 A 15 15 0 0 1 40 315 L 5 300 Z",
        "M 10 80 C 40 10, 65 10, 95 80 S 150 150, 180 80",
        "m 10 450 q 30 -40, 60 0 t 120 0",
        "M -5 -5 h 10 v 10 h -10 z",
    ],
)
def test_resize_to_own_span_is_identity(test_input: str) -> None:
    path = Path.from_str(test_input)
    before = _coords(path)

    path.resize(*path.bb)

    np.testing.assert_almost_equal(_coords(path), before, decimal=4)


def test_resize(path: Path) -> None:
    path.resize(20, 10)
    assert path.commands == [MoveTo(0, 0), LineTo(20, 10)]


def test_scale(path: Path) -> None:
    path.scale(2)
    assert path.commands[-1] == LineTo(20, 40)


def test_fit(path: Path) -> None:
    path.fit(5, 5)
    assert path.commands[-1] == LineTo(2.5, 5)


def test_cover(path: Path) -> None:
    path.cover(5, 5)
    assert path.commands[-1] == LineTo(5, 10)


def test_translate(path: Path) -> None:
    path.translate(1, 2)

    assert path.commands == [MoveTo(1, 2), LineTo(11, 22)]
    # the cached span is not updated
    assert path.bb == (10, 20)
    assert path.refresh_bb() == (11, 22)


def test_chained_transforms_use_cached_span(path: Path) -> None:
    path.resize(20, 40)
    path.resize(20, 40)
    assert path.commands[-1] == LineTo(40, 80)

    path.refresh_bb()
    path.resize(20, 40)
    assert path.commands[-1] == LineTo(20, 40)


def test_assign_commands_recomputes_bb(path: Path) -> None:
    path.commands = [MoveTo(0, 0), LineTo(3, 4)]
    assert path.bb == (3, 4)


def test_take_commands(path: Path) -> None:
    commands = path.take_commands()

    assert commands == [MoveTo(0, 0), LineTo(10, 20)]
    assert path.commands == []
    assert path.bb == (0, 0)


@pytest.mark.parametrize("method", ["resize", "fit", "cover"])
def test_zero_span(method: str) -> None:
    path = Path.from_str("M 0 0 H 10")

    with pytest.raises(ValueError, match="zero span"):
        getattr(path, method)(5, 5)


def test_scale_by_zero_collapses_to_origin(path: Path) -> None:
    path.scale(0)
    assert path.commands == [MoveTo(0, 0), LineTo(0, 0)]


def test_resize_to_zero_width(path: Path) -> None:
    path.resize(0, 40)
    assert path.commands == [MoveTo(0, 0), LineTo(0, 40)]


def test_fit_to_zero_width(path: Path) -> None:
    path.fit(0, 40)
    assert path.commands == [MoveTo(0, 0), LineTo(0, 0)]


def test_repr(path: Path) -> None:
    assert repr(path) == "Path(2 commands, bb=(10.0, 20.0))"
