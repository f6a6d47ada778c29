"""
Game State - The session value round-tripped through the caller.

Design principles:
- Immutable: all mutations return a new GameSession
- Serializable: plain ints and a string enum
- Self-contained: the engine keeps no session table, the caller holds the copy
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum


MIN_TARGET = 1
MAX_TARGET = 100


class SessionStatus(Enum):
    """Status of one game session."""
    ACTIVE = "active"
    WON = "won"


@dataclass(frozen=True)
class GameSession:
    """
    One game instance: the hidden target and how many guesses were evaluated.

    The target is fixed at creation. Attempts only ever grow by one per
    evaluated guess. A WON session is terminal.
    """
    target: int
    attempts: int = 0
    status: SessionStatus = SessionStatus.ACTIVE

    def __post_init__(self):
        if not MIN_TARGET <= self.target <= MAX_TARGET:
            raise ValueError(
                f"target must be between {MIN_TARGET} and {MAX_TARGET}, got {self.target}"
            )
        if self.attempts < 0:
            raise ValueError(f"attempts cannot be negative, got {self.attempts}")

    @classmethod
    def new(cls, target: int) -> GameSession:
        """Create a fresh active session for the given target."""
        return cls(target=target, attempts=0, status=SessionStatus.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def is_won(self) -> bool:
        return self.status == SessionStatus.WON

    def with_attempt(self) -> GameSession:
        """Return new session with one more attempt counted."""
        return self._copy_with(attempts=self.attempts + 1)

    def mark_won(self) -> GameSession:
        """Return new session in the terminal WON status."""
        return self._copy_with(status=SessionStatus.WON)

    def _copy_with(self, **kwargs) -> GameSession:
        """Create a copy with some fields replaced. The target is never replaced."""
        if "target" in kwargs:
            raise ValueError("target cannot change after creation")
        return replace(self, **kwargs)
