"""Database tables / schema of stored values"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import BaseModel, TypeAdapter
from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.models import ScoreRecord


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPreference(Base):
    __tablename__ = "preferences"
    key: Mapped[str] = mapped_column(primary_key=True)
    value: Mapped[Any] = mapped_column(JSON)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


# --- Serialized form of the high score list (stored as JSON under the "high-scores" key) ---
class ScoreRecordPayload(BaseModel):
    id: UUID
    player_name: str
    score: int
    timestamp: datetime
    duration_seconds: int
    game_mode: str

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "ScoreRecordPayload":
        return cls(
            id=record.id,
            player_name=record.player_name,
            score=record.score,
            timestamp=record.timestamp,
            duration_seconds=record.duration_seconds,
            game_mode=record.game_mode,
        )

    def to_record(self) -> ScoreRecord:
        return ScoreRecord(
            id=self.id,
            player_name=self.player_name,
            score=self.score,
            timestamp=self.timestamp,
            duration_seconds=self.duration_seconds,
            game_mode=self.game_mode,
        )


HighScoresPayload = TypeAdapter(list[ScoreRecordPayload])
