"""
A square on the board the player has to find

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from string import ascii_uppercase
from typing import Optional

from src.core.exceptions import InvalidPositionError

# Chess board is always 8x8. Files and ranks are 0-indexed: (0, 0) is A1, (7, 7) is H8
BOARD_DIMENSIONS = (8, 8)
FILE_LETTERS = ascii_uppercase[: BOARD_DIMENSIONS[0]]


@dataclass(frozen=True)
class BoardPosition:
    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (
            0 <= self.file < BOARD_DIMENSIONS[0]
            and 0 <= self.rank < BOARD_DIMENSIONS[1]
        ):
            raise InvalidPositionError(
                f"Position (file={self.file}, rank={self.rank}) is not on the board."
            )

    @classmethod
    def from_notation(cls, notation: str) -> Optional[BoardPosition]:
        """'A1' - 'H8' (any case) get converted to (0,0) - (7,7). Anything else gives None."""
        if len(notation) != 2:
            return None
        letter, digit = notation[0].upper(), notation[1]
        if letter not in FILE_LETTERS or digit not in "12345678":
            return None
        return cls(FILE_LETTERS.index(letter), int(digit) - 1)

    @classmethod
    def random(cls, rng: Random) -> BoardPosition:
        """Uniformly drawn from all 64 squares."""
        return cls(
            rng.randrange(BOARD_DIMENSIONS[0]), rng.randrange(BOARD_DIMENSIONS[1])
        )

    @property
    def notation(self) -> str:
        return f"{FILE_LETTERS[self.file]}{self.rank + 1}"

    def mirrored(self) -> BoardPosition:
        """The same square seen on a board rotated by 180 degrees."""
        return BoardPosition(
            BOARD_DIMENSIONS[0] - 1 - self.file, BOARD_DIMENSIONS[1] - 1 - self.rank
        )
