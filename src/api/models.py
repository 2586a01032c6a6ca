"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import ScoreRecord
from src.core.shared_types import BoardTheme, GameMode, Phase, QueenPositionOption
from src.trainer.square import BOARD_DIMENSIONS


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    duration: int

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        if value <= 0:
            raise InvalidRequestError(
                f"Session duration must be a positive number of seconds, got {value}."
            )
        return value


class TapSquareRequest(BaseModel):
    """The square the player tapped, in the coordinates of the board as displayed."""

    file: int
    rank: int

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(f"File {value} is not on the board.")
        return value

    @field_validator("rank")
    @classmethod
    def validate_rank(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[1]:
            raise InvalidRequestError(f"Rank {value} is not on the board.")
        return value


class CoordinateAnswerRequest(BaseModel):
    # NOTE: deliberately not validated. Text that is not a square name is simply ignored by the session.
    text: str


class SaveScoreRequest(BaseModel):
    player_name: str


class UpdateSettingsRequest(BaseModel):
    """Only the fields that are supplied get changed."""

    speech_enabled: Optional[bool] = None
    use_female_voice: Optional[bool] = None
    sound_enabled: Optional[bool] = None
    theme: Optional[BoardTheme] = None
    game_mode: Optional[GameMode] = None
    queen_position: Optional[QueenPositionOption] = None


class HighScoresRequest(BaseModel):
    game_mode: GameMode


# --- RESPONSE MODELS ---
class ScoreRecordResponse(BaseModel):
    id: UUID
    player_name: str
    score: int
    timestamp: datetime
    duration_seconds: int
    game_mode: str

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "ScoreRecordResponse":
        return cls(
            id=record.id,
            player_name=record.player_name,
            score=record.score,
            timestamp=record.timestamp,
            duration_seconds=record.duration_seconds,
            game_mode=record.game_mode,
        )


class SessionStateResponse(BaseModel):
    phase: Phase
    target_notation: str
    display_notation: str
    score: int
    time_remaining: int
    session_duration: int
    countdown_value: int
    is_white_queen_on_top: bool
    message: str
    is_correct: bool
    needs_player_name: bool
    suggested_player_name: str
    speech_enabled: bool
    use_female_voice: bool
    sound_enabled: bool
    theme: BoardTheme
    game_mode: GameMode
    queen_position: QueenPositionOption


class HighScoresResponse(BaseModel):
    game_mode: GameMode
    scores: list[ScoreRecordResponse]
