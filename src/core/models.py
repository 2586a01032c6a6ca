"""
Boundary layer data model(s).

These objects are shared by the domain (GameSession), the persistence layer and the Service.
(Decouples the stored / transported representation from the domain types themselves)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.core.shared_types import BoardTheme, GameMode, QueenPositionOption


@dataclass(frozen=True)
class ScoreRecord:
    """A finished session the player chose to put a name on."""

    id: UUID
    player_name: str
    score: int
    timestamp: datetime
    duration_seconds: int
    game_mode: str


@dataclass(frozen=True)
class TrainerSettings:
    """The bundle of user preferences. Always persisted as a whole."""

    speech_enabled: bool = True
    use_female_voice: bool = True
    selected_theme: BoardTheme = BoardTheme.BLACK_WHITE
    sound_enabled: bool = True
    selected_game_mode: GameMode = GameMode.VISUAL
    selected_queen_position: QueenPositionOption = QueenPositionOption.RANDOM
