"""Unit tests for src/core/config.py"""

import pytest
from pydantic import ValidationError

from src.core.config import DURATION_PRESETS, TrainerConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DATABASE_URL",
        "FEEDBACK_DELAY_S",
        "COUNTDOWN_START",
        "MAX_SCORES_PER_MODE",
    ):
        monkeypatch.delenv(f"TRAINER_{name}", raising=False)
    config = TrainerConfig.from_env()
    assert config == TrainerConfig()
    assert config.feedback_delay_s == 0.2
    assert config.countdown_start == 3
    assert config.max_scores_per_mode == 10
    assert DURATION_PRESETS == (20, 40, 60)


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRAINER_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("TRAINER_FEEDBACK_DELAY_S", "0.5")
    monkeypatch.setenv("TRAINER_MAX_SCORES_PER_MODE", "5")
    config = TrainerConfig.from_env()
    assert config.database_url == "sqlite:///:memory:"
    assert config.feedback_delay_s == 0.5
    assert config.max_scores_per_mode == 5


def test_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRAINER_COUNTDOWN_START", "0")
    with pytest.raises(ValidationError):
        TrainerConfig.from_env()


def test_config_is_frozen() -> None:
    config = TrainerConfig()
    with pytest.raises(ValidationError):
        config.countdown_start = 5  # type: ignore[misc]
