"""
Runtime configuration.

Values come from environment variables (prefixed with TRAINER_) and fall back to the defaults below.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveFloat, PositiveInt

# The session lengths offered to the player. Any positive number of seconds is accepted by the session though.
DURATION_PRESETS: tuple[int, ...] = (20, 40, 60)


def _env(name: str, default: Any) -> Any:
    value = os.environ.get(f"TRAINER_{name}")
    return value if value is not None else default


class TrainerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    database_url: str = "sqlite:///trainer.db"
    feedback_delay_s: PositiveFloat = 0.2
    countdown_start: PositiveInt = 3
    max_scores_per_mode: PositiveInt = 10

    @classmethod
    def from_env(cls) -> "TrainerConfig":
        """Build the config from the environment. pydantic validates whatever ends up in there."""
        defaults = cls()
        return cls(
            database_url=_env("DATABASE_URL", defaults.database_url),
            feedback_delay_s=_env("FEEDBACK_DELAY_S", defaults.feedback_delay_s),
            countdown_start=_env("COUNTDOWN_START", defaults.countdown_start),
            max_scores_per_mode=_env(
                "MAX_SCORES_PER_MODE", defaults.max_scores_per_mode
            ),
        )
