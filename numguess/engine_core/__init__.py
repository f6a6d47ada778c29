"""
Engine Core - Deterministic guess evaluation over caller-held session values.

The engine:
1. Draws a target from the RandomNumberGenerator
2. Wraps it in a GameSession
3. Evaluates guesses via the GuessEvaluator
4. Raises GameError subclasses on contract violations
"""

from .state import GameSession, SessionStatus, MIN_TARGET, MAX_TARGET
from .rng import RandomNumberGenerator
from .evaluator import GuessEvaluator, GuessResult, Verdict, evaluate, format_message
from .validation import validate_guess, INVALID_GUESS_MESSAGE
from .errors import (
    GameError,
    EntropyUnavailable,
    InvalidGuess,
    NoActiveSession,
    SessionComplete,
)

__all__ = [
    "GameSession",
    "SessionStatus",
    "MIN_TARGET",
    "MAX_TARGET",
    "RandomNumberGenerator",
    "GuessEvaluator",
    "GuessResult",
    "Verdict",
    "evaluate",
    "format_message",
    "validate_guess",
    "INVALID_GUESS_MESSAGE",
    "GameError",
    "EntropyUnavailable",
    "InvalidGuess",
    "NoActiveSession",
    "SessionComplete",
]
