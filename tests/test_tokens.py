"""Tests the path data tokenizer."""

from __future__ import annotations

import numpy as np
import pytest

from flatpath.parser import CommandToken, InvalidToken, tokenize


def _tokens(path: str) -> list[object]:
    return [token for token, _ in tokenize(path)]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("10", [10.0]),
        ("-0.5", [-0.5]),
        (".5", [0.5]),
        ("-.25", [-0.25]),
        ("10-5", [10.0, -5.0]),
        ("0.5.5", [0.5, 0.5]),
        ("01", [0.0, 1.0]),
        ("1,2\t3\r\n4", [1.0, 2.0, 3.0, 4.0]),
    ],
)
def test_numbers(path: str, expected: list[float]) -> None:
    assert _tokens(path) == expected


def test_float32_precision() -> None:
    (value,) = _tokens("0.1")
    assert value == float(np.float32(0.1))
    assert value != 0.1


def test_commands() -> None:
    tokens = _tokens("MmLlHhVvCcSsQqTtAaZz")

    assert len(tokens) == 20
    assert tokens[0] == CommandToken("M", relative=False)
    assert tokens[1] == CommandToken("M", relative=True)
    assert {t.command for t in tokens if isinstance(t, CommandToken)} == set(
        "MLHVCSQTAZ"
    )


def test_command_glued_to_numbers() -> None:
    assert _tokens("M1,2L3-4z") == [
        CommandToken("M", False),
        1.0,
        2.0,
        CommandToken("L", False),
        3.0,
        -4.0,
        CommandToken("Z", True),
    ]


def test_positions() -> None:
    assert [pos for _, pos in tokenize(" M 10,20")] == [1, 3, 6]


@pytest.mark.parametrize(
    ("path", "text", "position"),
    [
        ("M 0 0 X", "X", 6),
        ("L 1 - 2", "-", 4),
        ("1e5", "e5", 1),
        ("#", "#", 0),
    ],
)
def test_invalid(path: str, text: str, position: int) -> None:
    tokens = list(tokenize(path))
    assert tokens[-1] == (InvalidToken(text, position), position)


def test_stops_after_invalid() -> None:
    assert _tokens("M 0 0 ? L 1 1")[-1] == InvalidToken("?", 6)


def test_lazy() -> None:
    tokens = tokenize("M 0 0 ?")
    assert next(tokens) == (CommandToken("M", False), 0)
