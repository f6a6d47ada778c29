"""
Session Module - Drives one number-guessing game.

A session represents one play-through:
- Created when the caller starts a game
- Held by the caller between guesses
- Terminal once the number is guessed

Sessions are EPHEMERAL:
- No server-side storage
- The caller round-trips the session value with each guess
- Starting again simply replaces the value the caller holds
"""

from .lifecycle import (
    SessionLifecycle,
    LifecycleState,
    state_of,
    start_game,
    make_guess,
)

__all__ = [
    "SessionLifecycle",
    "LifecycleState",
    "state_of",
    "start_game",
    "make_guess",
]
