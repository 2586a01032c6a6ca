"""Unit tests for /src/trainer/square.py"""

from random import Random
from string import ascii_uppercase

import pytest

from src.core.exceptions import InvalidPositionError
from src.trainer.square import BOARD_DIMENSIONS, BoardPosition

ALL_SQUARES = [
    (file, rank, f"{ascii_uppercase[file]}{rank + 1}")
    for file in range(8)
    for rank in range(8)
]


@pytest.mark.parametrize("file, rank, notation", ALL_SQUARES)
def test_notation(file: int, rank: int, notation: str) -> None:
    """The square on the first file and first rank is A1, etc."""
    assert BoardPosition(file, rank).notation == notation


@pytest.mark.parametrize("file, rank, notation", ALL_SQUARES)
def test_parse_notation(file: int, rank: int, notation: str) -> None:
    """Parsing gives back the original square, in upper case as well as lower case."""
    assert BoardPosition.from_notation(notation) == BoardPosition(file, rank)
    assert BoardPosition.from_notation(notation.lower()) == BoardPosition(file, rank)


def test_notations_are_unique() -> None:
    notations = {BoardPosition(file, rank).notation for file, rank, _ in ALL_SQUARES}
    assert len(notations) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@pytest.mark.parametrize(
    "text",
    [
        "",  # empty
        "E",  # too short
        "E44",  # too long
        "I1",  # file beyond H
        "A0",  # rank below 1
        "A9",  # rank above 8
        "4E",  # reversed
        "11",  # first character is not a letter
        "aa",  # second character is not a number
        "E٣",  # a digit, just not one of 1-8
        " E4",  # no trimming here
    ],
)
def test_parse_invalid_notation(text: str) -> None:
    """Invalid input is not an error, there simply is no position."""
    assert BoardPosition.from_notation(text) is None


@pytest.mark.parametrize("file, rank", [(-1, 0), (0, -1), (8, 0), (0, 8), (9, 9)])
def test_position_off_the_board(file: int, rank: int) -> None:
    with pytest.raises(InvalidPositionError):
        _ = BoardPosition(file, rank)


@pytest.mark.parametrize(
    "notation, mirrored",
    [("A1", "H8"), ("E4", "D5"), ("H1", "A8"), ("C7", "F2")],
)
def test_mirrored(notation: str, mirrored: str) -> None:
    """Rotating the board by 180 degrees."""
    position = BoardPosition.from_notation(notation)
    assert position is not None
    assert position.mirrored().notation == mirrored
    assert position.mirrored().mirrored() == position


def test_random_covers_the_board() -> None:
    """Seeded draws stay on the board, and reach every square given enough draws."""
    rng = Random(1234)
    drawn = {BoardPosition.random(rng) for _ in range(2000)}
    assert len(drawn) == 64


def test_positions_are_immutable() -> None:
    position = BoardPosition(0, 0)
    with pytest.raises(AttributeError):
        position.file = 3  # type: ignore[misc]
