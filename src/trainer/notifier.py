"""Voice / sound side effects. The session only ever tells the notifier what to do, it never waits for an answer."""

import logging
from typing import Protocol

from src.core.shared_types import Outcome

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def announce(self, text: str) -> None:
        """Speak the text (countdown values, the target square)."""
        ...

    def play_cue(self, outcome: Outcome) -> None:
        """Play the sound for a correct / incorrect answer."""
        ...


class LoggingNotifier:
    """Stand-in for hosts without speech synthesis or audio: writes the side effects to the log."""

    def announce(self, text: str) -> None:
        logger.info("announce: %s", text)

    def play_cue(self, outcome: Outcome) -> None:
        logger.info("cue: %s", outcome)
