"""Ranking rules for the high score table"""

from src.core.models import ScoreRecord

# Number of records kept for every game mode
MAX_SCORES_PER_MODE = 10


def rank_scores(
    records: list[ScoreRecord], limit: int = MAX_SCORES_PER_MODE
) -> list[ScoreRecord]:
    """
    Sort the records best-first and keep the best `limit` records of each game mode.
    ----

    The game modes are ranked independently: a great visual score never pushes a coordinates score out of the table.
    Records with equal scores keep their relative order (sorting is stable).
    """
    ordered = sorted(records, key=lambda record: record.score, reverse=True)

    kept: list[ScoreRecord] = []
    count_per_mode: dict[str, int] = {}
    for record in ordered:
        count = count_per_mode.get(record.game_mode, 0)
        if count < limit:
            kept.append(record)
            count_per_mode[record.game_mode] = count + 1
    return kept


def scores_for_mode(records: list[ScoreRecord], game_mode: str) -> list[ScoreRecord]:
    return [record for record in records if record.game_mode == game_mode]
