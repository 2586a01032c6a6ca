"""
The GameSession is the entrypoint into the domain layer for the service / presentation layer.
It owns all state of one coordinate training session: the countdown, the play timer, scoring, board orientation,
and delegates persisting the settings / high scores to the PreferenceStore.

Session phases:
    idle --start_game--> counting down --3 ticks--> active --time up / end_game--> ended --start_game--> ...
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from random import Random
from typing import Callable, Optional
from uuid import uuid4

from src.core.config import DURATION_PRESETS, TrainerConfig
from src.core.exceptions import InvalidDurationError, RepositoryError
from src.core.models import ScoreRecord
from src.core.shared_types import (
    BoardTheme,
    GameMode,
    Outcome,
    Phase,
    QueenPositionOption,
)
from src.db import preferences
from src.db.repository import PreferenceStore
from src.trainer.high_scores import rank_scores, scores_for_mode
from src.trainer.notifier import LoggingNotifier, Notifier
from src.trainer.scheduler import Scheduler, TimerHandle
from src.trainer.square import BoardPosition

logger = logging.getLogger(__name__)

CORRECT_MESSAGE = "Correct!"
INCORRECT_MESSAGE = "Incorrect!"

Listener = Callable[["GameSession"], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameSession:
    """State container of the trainer. All mutations go through the public methods below or through timer ticks."""

    def __init__(
        self,
        store: PreferenceStore,
        scheduler: Scheduler,
        notifier: Optional[Notifier] = None,
        config: Optional[TrainerConfig] = None,
        rng: Optional[Random] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._notifier = notifier or LoggingNotifier()
        self._config = config or TrainerConfig.from_env()
        self._rng = rng or Random()
        self._clock = clock
        self._listeners: list[Listener] = []

        self._countdown_timer: Optional[TimerHandle] = None
        self._play_timer: Optional[TimerHandle] = None

        # round state
        self.target_position = BoardPosition.random(self._rng)
        self.score = 0
        self.session_duration = DURATION_PRESETS[0]
        self.time_remaining = 0
        self.is_active = False
        self.is_counting_down = False
        self.countdown_value = self._config.countdown_start
        self.has_ended = False
        self.is_white_queen_on_top = False
        self.message = ""
        self.is_correct = False
        self.user_input = ""

        # end of session
        self.needs_player_name = False
        self.suggested_player_name = preferences.load_last_player_name(store)

        # persisted
        self.settings = preferences.load_settings(store)
        self.high_scores = preferences.load_high_scores(store)

    # --- READ SURFACE ---
    @property
    def phase(self) -> Phase:
        if self.is_counting_down:
            return Phase.COUNTING_DOWN
        if self.is_active:
            return Phase.ACTIVE
        if self.has_ended:
            return Phase.ENDED
        return Phase.IDLE

    @property
    def display_notation(self) -> str:
        """The target as the player sees it: on a flipped board every square is mirrored."""
        if self.is_white_queen_on_top:
            return self.target_position.mirrored().notation
        return self.target_position.notation

    @property
    def speech_enabled(self) -> bool:
        return self.settings.speech_enabled

    @property
    def use_female_voice(self) -> bool:
        return self.settings.use_female_voice

    @property
    def sound_enabled(self) -> bool:
        return self.settings.sound_enabled

    @property
    def selected_theme(self) -> BoardTheme:
        return self.settings.selected_theme

    @property
    def selected_game_mode(self) -> GameMode:
        return self.settings.selected_game_mode

    @property
    def selected_queen_position(self) -> QueenPositionOption:
        return self.settings.selected_queen_position

    def high_scores_for(self, game_mode: GameMode) -> list[ScoreRecord]:
        return scores_for_mode(self.high_scores, game_mode.value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Get called after every state change. Returns a function to unsubscribe again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- SESSION LIFECYCLE ---
    def start_game(self, duration: int) -> None:
        """
        Start a new session of `duration` seconds, beginning with the 3-2-1 countdown.
        ----

        Any timer of a previous session gets cancelled first, so rapid restarts never leave two timers running.
        """
        if duration <= 0:
            raise InvalidDurationError(
                f"A session needs a positive duration, got {duration} seconds."
            )
        self._cancel_timers()

        self.session_duration = duration
        self.time_remaining = duration
        self.score = 0
        self.has_ended = False
        self.is_active = False
        self.needs_player_name = False
        self.message = ""
        self.is_correct = False
        self.user_input = ""
        self.countdown_value = self._config.countdown_start
        self.is_counting_down = True

        logger.info(
            "Starting a %ss session (%s mode)", duration, self.selected_game_mode
        )
        self._announce(str(self.countdown_value))
        self._countdown_timer = self._scheduler.repeat_every_second(
            self._on_countdown_tick
        )
        self._notify()

    def restart_game(self) -> None:
        """Same as starting again with the last configured duration (the shortest preset before any game)."""
        self.start_game(self.session_duration)

    def end_game(self) -> None:
        """Abort the session. Timers are cancelled before this returns, no tick is observed afterwards."""
        if self.phase in (Phase.IDLE, Phase.ENDED):
            return
        logger.info("Session aborted with score %s", self.score)
        self._finish()

    # --- ANSWERS ---
    def submit_answer(self, position: BoardPosition) -> None:
        """Visual mode: the player tapped `position` on the board as displayed."""
        if not self.is_active:
            return
        self._check_answer(position)

    def update_input(self, text: str) -> None:
        """Coordinates mode: the text typed so far."""
        self.user_input = text
        self._notify()

    def submit_coordinate_answer(self, text: Optional[str] = None) -> None:
        """
        Coordinates mode: the player typed a coordinate (defaults to the input buffer).
        Text that is not a square name gets ignored: no score change, no feedback.
        """
        if not self.is_active:
            return
        typed = self.user_input if text is None else text
        self.user_input = ""
        position = BoardPosition.from_notation(typed.strip())
        if position is None:
            logger.debug("Ignoring coordinate input %r", typed)
            self._notify()
            return
        self._check_answer(position)

    def save_score(self, name: str) -> None:
        """Put the current score into the high score table under `name`. Empty names are ignored."""
        name = name.strip()
        if not name:
            return

        record = ScoreRecord(
            id=uuid4(),
            player_name=name,
            score=self.score,
            timestamp=self._clock(),
            duration_seconds=self.session_duration,
            game_mode=self.selected_game_mode.value,
        )
        self.high_scores = rank_scores(
            [*self.high_scores, record], limit=self._config.max_scores_per_mode
        )
        self._persist(preferences.save_high_scores, self.high_scores)

        self.suggested_player_name = name
        self._persist(preferences.save_last_player_name, name)
        self.needs_player_name = False
        logger.info("Saved score %s for %s", record.score, name)
        self._notify()

    # --- SETTINGS ---
    def set_theme(self, theme: BoardTheme) -> None:
        self._update_settings(selected_theme=theme)

    def toggle_speech(self) -> None:
        self._update_settings(speech_enabled=not self.settings.speech_enabled)

    def toggle_voice_gender(self) -> None:
        self._update_settings(use_female_voice=not self.settings.use_female_voice)

    def toggle_sound(self) -> None:
        self._update_settings(sound_enabled=not self.settings.sound_enabled)

    def set_game_mode(self, game_mode: GameMode) -> None:
        self._update_settings(selected_game_mode=game_mode)

    def set_queen_position(self, option: QueenPositionOption) -> None:
        """A fixed orientation applies right away (even mid-round). Random only kicks in at the next round."""
        if option == QueenPositionOption.WHITE_ON_BOTTOM:
            self.is_white_queen_on_top = False
        elif option == QueenPositionOption.BLACK_ON_BOTTOM:
            self.is_white_queen_on_top = True
        self._update_settings(selected_queen_position=option)

    # -- TIMER CALLBACKS --
    def _on_countdown_tick(self) -> None:
        if self.countdown_value > 1:
            self.countdown_value -= 1
            self._announce(str(self.countdown_value))
            self._notify()
            return

        self._cancel_countdown_timer()
        self.is_counting_down = False
        self._begin_round()

    def _on_play_tick(self) -> None:
        self.time_remaining = max(self.time_remaining - 1, 0)
        if self.time_remaining == 0:
            logger.info("Time is up. Final score %s", self.score)
            self._finish()
            return
        self._notify()

    # -- PRIVATE HELPERS --
    def _begin_round(self) -> None:
        """Countdown is over: the play timer starts running."""
        self.is_active = True
        self._next_target()
        self.time_remaining = self.session_duration
        self._play_timer = self._scheduler.repeat_every_second(self._on_play_tick)
        self._notify()

    def _next_target(self) -> None:
        self.target_position = BoardPosition.random(self._rng)
        self.is_white_queen_on_top = self._resolve_orientation()
        logger.debug(
            "New target %s (white queen on top: %s)",
            self.target_position.notation,
            self.is_white_queen_on_top,
        )
        # in coordinates mode the player has to read the square off the board, saying it would give it away
        if self.selected_game_mode != GameMode.COORDINATES:
            self._announce(self.target_position.notation)

    def _resolve_orientation(self) -> bool:
        option = self.selected_queen_position
        if option == QueenPositionOption.WHITE_ON_BOTTOM:
            return False
        if option == QueenPositionOption.BLACK_ON_BOTTOM:
            return True
        return self._rng.random() < 0.5

    def _to_canonical_frame(self, position: BoardPosition) -> BoardPosition:
        """Positions are compared on the board with the white queen at the bottom."""
        return position.mirrored() if self.is_white_queen_on_top else position

    def _check_answer(self, position: BoardPosition) -> None:
        if self._to_canonical_frame(position) == self.target_position:
            self.score += 1
            self.time_remaining += 1
            self.message = CORRECT_MESSAGE
            self.is_correct = True
            self._play_cue(Outcome.SUCCESS)
            self._scheduler.call_later(
                self._config.feedback_delay_s, self._advance_after_correct
            )
        else:
            self.score -= 1
            self.message = INCORRECT_MESSAGE
            self.is_correct = False
            self._play_cue(Outcome.FAILURE)
            self._scheduler.call_later(
                self._config.feedback_delay_s, self._clear_feedback
            )
        self._notify()

    def _advance_after_correct(self) -> None:
        self.message = ""
        # the session may have run out in the meantime: no new target after the end
        if self.is_active:
            self._next_target()
        self._notify()

    def _clear_feedback(self) -> None:
        self.message = ""
        self._notify()

    def _finish(self) -> None:
        self._cancel_timers()
        self.is_counting_down = False
        self.is_active = False
        self.has_ended = True
        self.needs_player_name = self.score > 0
        self._notify()

    def _cancel_timers(self) -> None:
        self._cancel_countdown_timer()
        if self._play_timer is not None:
            self._play_timer.cancel()
            self._play_timer = None

    def _cancel_countdown_timer(self) -> None:
        if self._countdown_timer is not None:
            self._countdown_timer.cancel()
            self._countdown_timer = None

    def _update_settings(self, **changes) -> None:
        self.settings = replace(self.settings, **changes)
        self._persist(preferences.save_settings, self.settings)
        self._notify()

    def _persist(self, save: Callable[..., None], value) -> None:
        """Writes are fire-and-forget: store failures get logged, never raised to the caller."""
        try:
            save(self._store, value)
        except RepositoryError:
            logger.exception("Could not persist %s", save.__name__)

    def _announce(self, text: str) -> None:
        if self.settings.speech_enabled:
            self._notifier.announce(text)

    def _play_cue(self, outcome: Outcome) -> None:
        if self.settings.sound_enabled:
            self._notifier.play_cue(outcome)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
