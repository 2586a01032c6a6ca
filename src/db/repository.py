"""Protocol for the preference store (SQLAlchemy implementation in sql_repository.py, a dict will do in tests)"""

from typing import Any, Protocol


class PreferenceStore(Protocol):
    """Key-value persistence of the user's settings and high scores."""

    def get(self, key: str) -> Any | None:
        """Stored (JSON compatible) value, if a record exists."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Create or overwrite the value stored under key."""
        ...
