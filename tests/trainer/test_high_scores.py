"""Unit tests for /src/trainer/high_scores.py"""

from datetime import datetime, timezone
from uuid import uuid4

from src.core.models import ScoreRecord
from src.trainer.high_scores import MAX_SCORES_PER_MODE, rank_scores, scores_for_mode


def make_record(
    score: int, game_mode: str = "visual", name: str = "Pawnstar"
) -> ScoreRecord:
    return ScoreRecord(
        id=uuid4(),
        player_name=name,
        score=score,
        timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc),
        duration_seconds=40,
        game_mode=game_mode,
    )


def test_sorted_descending() -> None:
    records = [make_record(score) for score in (3, 12, -1, 7)]
    ranked = rank_scores(records)
    assert [record.score for record in ranked] == [12, 7, 3, -1]


def test_cap_per_mode() -> None:
    """Only the best ten of a mode survive, the eleventh (lowest) one is dropped."""
    records = [make_record(score) for score in range(1, 12)]
    ranked = rank_scores(records)
    assert len(ranked) == MAX_SCORES_PER_MODE
    assert [record.score for record in ranked] == list(range(11, 1, -1))


def test_modes_are_ranked_independently() -> None:
    """A full table of high visual scores does not push out a low coordinates score."""
    visual = [make_record(score) for score in range(50, 62)]
    coordinates = [make_record(1, game_mode="coordinates")]
    ranked = rank_scores(visual + coordinates)

    assert len(scores_for_mode(ranked, "visual")) == MAX_SCORES_PER_MODE
    assert scores_for_mode(ranked, "coordinates") == coordinates
    # combined list is still sorted
    assert ranked[-1] == coordinates[0]


def test_ties_keep_their_order() -> None:
    first = make_record(5, name="first")
    second = make_record(5, name="second")
    assert rank_scores([first, second]) == [first, second]


def test_custom_limit() -> None:
    records = [make_record(score) for score in range(5)]
    assert [record.score for record in rank_scores(records, limit=2)] == [4, 3]
