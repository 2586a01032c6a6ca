"""Unit tests for src/db/database.py"""

from sqlalchemy.orm import Session

from src.db.database import get_db, init_db
from src.db.sql_repository import SQLPreferenceStore


def test_get_db_yields_a_session() -> None:
    """The generator hands out a session and closes it when exhausted."""
    generator = get_db()
    db = next(generator)
    assert isinstance(db, Session)
    assert list(generator) == []


def test_store_on_configured_database() -> None:
    """Tables exist, so a store built from get_db() can write and read back."""
    init_db()
    writer = get_db()
    SQLPreferenceStore(next(writer)).set("last-player-name", "Maia")
    writer.close()

    reader = get_db()
    assert SQLPreferenceStore(next(reader)).get("last-player-name") == "Maia"
    reader.close()
