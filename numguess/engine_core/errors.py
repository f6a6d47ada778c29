"""
Engine Errors - Failures raised by the game engine.

Every error carries a stable error_code so the API layer can map it
to a structured ErrorResponse without string matching.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for all engine errors."""

    error_code = "GAME_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EntropyUnavailable(GameError):
    """The entropy source could not produce a target. Fatal to start_game."""

    error_code = "ENTROPY_UNAVAILABLE"


class InvalidGuess(GameError):
    """Guess is not a well-formed integer, or outside the declared range."""

    error_code = "INVALID_GUESS"


class NoActiveSession(GameError):
    """A guess was submitted before any game was started."""

    error_code = "NO_ACTIVE_SESSION"

    def __init__(self, message: str = "Please start a new game first", details: dict | None = None):
        super().__init__(message, details)


class SessionComplete(GameError):
    """A guess was submitted against a session that is already won."""

    error_code = "SESSION_COMPLETE"

    def __init__(
        self,
        message: str = "This game is already won - start a new game",
        details: dict | None = None,
    ):
        super().__init__(message, details)
