"""
Typed access to the PreferenceStore.

The store itself only knows about keys and JSON values. Here those values get decoded into the domain types
(with the defaults below whenever nothing, or something unusable, is stored).
"""

import logging
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import ValidationError

from src.core.exceptions import RepositoryError
from src.core.models import ScoreRecord, TrainerSettings
from src.core.shared_types import BoardTheme, GameMode, QueenPositionOption
from src.db.repository import PreferenceStore
from src.db.schema import HighScoresPayload, ScoreRecordPayload

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


class PreferenceKey(StrEnum):
    SPEECH_ENABLED = "speech-enabled"
    USE_FEMALE_VOICE = "use-female-voice"
    SELECTED_THEME = "selected-theme"
    SOUND_ENABLED = "sound-enabled"
    SELECTED_GAME_MODE = "selected-game-mode"
    SELECTED_QUEEN_POSITION = "selected-queen-position"
    HIGH_SCORES = "high-scores"
    LAST_PLAYER_NAME = "last-player-name"


DEFAULT_SETTINGS = TrainerSettings()


# --- SETTINGS ---
def load_settings(store: PreferenceStore) -> TrainerSettings:
    return TrainerSettings(
        speech_enabled=_get_bool(
            store, PreferenceKey.SPEECH_ENABLED, DEFAULT_SETTINGS.speech_enabled
        ),
        use_female_voice=_get_bool(
            store, PreferenceKey.USE_FEMALE_VOICE, DEFAULT_SETTINGS.use_female_voice
        ),
        selected_theme=_get_enum(
            store,
            PreferenceKey.SELECTED_THEME,
            BoardTheme,
            DEFAULT_SETTINGS.selected_theme,
        ),
        sound_enabled=_get_bool(
            store, PreferenceKey.SOUND_ENABLED, DEFAULT_SETTINGS.sound_enabled
        ),
        selected_game_mode=_get_enum(
            store,
            PreferenceKey.SELECTED_GAME_MODE,
            GameMode,
            DEFAULT_SETTINGS.selected_game_mode,
        ),
        selected_queen_position=_get_enum(
            store,
            PreferenceKey.SELECTED_QUEEN_POSITION,
            QueenPositionOption,
            DEFAULT_SETTINGS.selected_queen_position,
        ),
    )


def save_settings(store: PreferenceStore, settings: TrainerSettings) -> None:
    """The whole bundle is written every time, unchanged values included."""
    store.set(PreferenceKey.SPEECH_ENABLED, settings.speech_enabled)
    store.set(PreferenceKey.USE_FEMALE_VOICE, settings.use_female_voice)
    store.set(PreferenceKey.SELECTED_THEME, settings.selected_theme.value)
    store.set(PreferenceKey.SOUND_ENABLED, settings.sound_enabled)
    store.set(PreferenceKey.SELECTED_GAME_MODE, settings.selected_game_mode.value)
    store.set(
        PreferenceKey.SELECTED_QUEEN_POSITION, settings.selected_queen_position.value
    )


# --- HIGH SCORES ---
def load_high_scores(store: PreferenceStore) -> list[ScoreRecord]:
    """Missing or corrupt data means: no high scores yet."""
    raw = _read(store, PreferenceKey.HIGH_SCORES)
    if raw is None:
        return []
    try:
        payload = HighScoresPayload.validate_python(raw)
    except ValidationError as exc:
        logger.warning(
            "Ignoring stored high scores, they could not be decoded: %s", exc
        )
        return []
    return [entry.to_record() for entry in payload]


def save_high_scores(store: PreferenceStore, records: list[ScoreRecord]) -> None:
    payload = [ScoreRecordPayload.from_record(record) for record in records]
    store.set(
        PreferenceKey.HIGH_SCORES, HighScoresPayload.dump_python(payload, mode="json")
    )


# --- LAST PLAYER NAME ---
def load_last_player_name(store: PreferenceStore) -> str:
    value = _read(store, PreferenceKey.LAST_PLAYER_NAME)
    return value if isinstance(value, str) else ""


def save_last_player_name(store: PreferenceStore, name: str) -> None:
    store.set(PreferenceKey.LAST_PLAYER_NAME, name)


# -- Internal helpers --
def _read(store: PreferenceStore, key: PreferenceKey) -> Any | None:
    """A store that cannot be read from is treated like an empty one."""
    try:
        return store.get(key)
    except RepositoryError as exc:
        logger.warning("Could not read %s, using the default: %s", key, exc)
        return None


def _get_bool(store: PreferenceStore, key: PreferenceKey, default: bool) -> bool:
    value = _read(store, key)
    if value is None:
        return default
    if not isinstance(value, bool):
        _warn_unusable(key, value)
        return default
    return value


def _get_enum(
    store: PreferenceStore, key: PreferenceKey, enum_type: type[E], default: E
) -> E:
    value = _read(store, key)
    if value is None:
        return default
    try:
        return enum_type(value)
    except ValueError:
        _warn_unusable(key, value)
        return default


def _warn_unusable(key: PreferenceKey, value: Any) -> None:
    logger.warning("Stored value %r for %s is unusable. Using the default.", value, key)
