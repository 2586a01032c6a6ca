"""Orchestration of communication from the presentation layer to the GameSession (and the reverse direction)."""

from src.api.models import (
    CoordinateAnswerRequest,
    HighScoresRequest,
    HighScoresResponse,
    SaveScoreRequest,
    ScoreRecordResponse,
    SessionStateResponse,
    StartGameRequest,
    TapSquareRequest,
    UpdateSettingsRequest,
)
from src.trainer.session import GameSession
from src.trainer.square import BoardPosition


class TrainerService:
    """Presentation-facing operations for one GameSession."""

    def __init__(self, session: GameSession) -> None:
        self.session = session

    # -- Game flow --
    def start_game(self, request: StartGameRequest) -> SessionStateResponse:
        self.session.start_game(request.duration)
        return self.get_state()

    def restart_game(self) -> SessionStateResponse:
        self.session.restart_game()
        return self.get_state()

    def end_game(self) -> SessionStateResponse:
        """User quit mid-game."""
        self.session.end_game()
        return self.get_state()

    def tap_square(self, request: TapSquareRequest) -> SessionStateResponse:
        self.session.submit_answer(BoardPosition(request.file, request.rank))
        return self.get_state()

    def submit_coordinates(
        self, request: CoordinateAnswerRequest
    ) -> SessionStateResponse:
        self.session.submit_coordinate_answer(request.text)
        return self.get_state()

    def save_score(self, request: SaveScoreRequest) -> SessionStateResponse:
        self.session.save_score(request.player_name)
        return self.get_state()

    # -- Settings --
    def update_settings(self, request: UpdateSettingsRequest) -> SessionStateResponse:
        """
        Translate the requested values into the session's setters.
        ----

        The toggles only get called when the requested value differs from the current one.
        """
        session = self.session
        if (
            request.speech_enabled is not None
            and request.speech_enabled != session.speech_enabled
        ):
            session.toggle_speech()
        if (
            request.use_female_voice is not None
            and request.use_female_voice != session.use_female_voice
        ):
            session.toggle_voice_gender()
        if (
            request.sound_enabled is not None
            and request.sound_enabled != session.sound_enabled
        ):
            session.toggle_sound()
        if request.theme is not None:
            session.set_theme(request.theme)
        if request.game_mode is not None:
            session.set_game_mode(request.game_mode)
        if request.queen_position is not None:
            session.set_queen_position(request.queen_position)
        return self.get_state()

    # -- Read surface --
    def get_state(self) -> SessionStateResponse:
        """Snapshot of everything the presentation layer renders."""
        session = self.session
        return SessionStateResponse(
            phase=session.phase,
            target_notation=session.target_position.notation,
            display_notation=session.display_notation,
            score=session.score,
            time_remaining=session.time_remaining,
            session_duration=session.session_duration,
            countdown_value=session.countdown_value,
            is_white_queen_on_top=session.is_white_queen_on_top,
            message=session.message,
            is_correct=session.is_correct,
            needs_player_name=session.needs_player_name,
            suggested_player_name=session.suggested_player_name,
            speech_enabled=session.speech_enabled,
            use_female_voice=session.use_female_voice,
            sound_enabled=session.sound_enabled,
            theme=session.selected_theme,
            game_mode=session.selected_game_mode,
            queen_position=session.selected_queen_position,
        )

    def high_scores(self, request: HighScoresRequest) -> HighScoresResponse:
        return HighScoresResponse(
            game_mode=request.game_mode,
            scores=[
                ScoreRecordResponse.from_record(record)
                for record in self.session.high_scores_for(request.game_mode)
            ],
        )
