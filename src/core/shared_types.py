"""
Type definitions used across layers
"""

from enum import StrEnum


class GameMode(StrEnum):
    VISUAL = "visual"
    COORDINATES = "coordinates"


class QueenPositionOption(StrEnum):
    """Which side of the board the white queen starts on, i.e. the board orientation."""

    WHITE_ON_BOTTOM = "whiteOnBottom"
    BLACK_ON_BOTTOM = "blackOnBottom"
    RANDOM = "random"


# --- Themes are purely cosmetic. The core only stores / persists the id.
class BoardTheme(StrEnum):
    BLACK_WHITE = "blackWhite"
    CLASSIC = "classic"
    WOOD = "wood"
    BLUE = "blue"
    GREEN = "green"


class Phase(StrEnum):
    IDLE = "idle"
    COUNTING_DOWN = "countingDown"
    ACTIVE = "active"
    ENDED = "ended"


class Outcome(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"
