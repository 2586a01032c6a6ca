"""Implementation of PreferenceStore using SQLAlchemy"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.db.schema import DBPreference

logger = logging.getLogger(__name__)


class SQLPreferenceStore:
    """Preferences stored one row per key / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get(self, key: str) -> Any | None:
        """Stored value, if record exists."""
        try:
            preference = self._fetch(key)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not read preference {key!r}.") from exc
        return preference.value if preference else None

    def set(self, key: str, value: Any) -> None:
        """Create or overwrite the record."""
        try:
            preference = self._fetch(key)
            if preference is None:
                self.db.add(DBPreference(key=key, value=value))
            else:
                preference.value = value
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not store preference {key!r}.") from exc
        logger.debug("stored preference %s", key)

    def _fetch(self, key: str) -> DBPreference | None:
        query = select(DBPreference).where(DBPreference.key == key)
        return self.db.scalar(query)
