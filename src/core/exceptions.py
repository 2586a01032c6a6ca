"""Custom exceptions. Every layer raises a subclass of TrainerError, so callers can catch a single top-level type."""


class TrainerError(Exception):
    """Base class for all errors raised by the coordinate trainer."""


class InvalidPositionError(TrainerError):
    """A board position outside of the 8x8 board was requested."""


class GameStateError(TrainerError):
    """Operation cannot be performed on the session in its current configuration."""


class InvalidDurationError(GameStateError):
    """A session needs a strictly positive number of seconds to play."""


class InvalidRequestError(TrainerError):
    """Incoming request data failed validation."""


class RepositoryError(TrainerError):
    """Reading from / writing to the preference store failed."""
