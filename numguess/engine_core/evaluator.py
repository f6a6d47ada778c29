"""
Guess Evaluator - Compares a guess against a session's target.

Pure function: (session, guess) -> GuessResult with the updated session.
Range checks belong to the boundary layer; the evaluator only requires
a well-formed integer.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

from .errors import InvalidGuess, SessionComplete
from .state import GameSession


logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Outcome of comparing a guess to the target."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


MESSAGES = {
    Verdict.TOO_LOW: "Too low, try again",
    Verdict.TOO_HIGH: "Too high, try again",
    Verdict.CORRECT: "Congratulations! You guessed the number in {attempts} attempts",
}


def format_message(verdict: Verdict, attempts: int) -> str:
    """Render the caller-facing message for a verdict."""
    return MESSAGES[verdict].format(attempts=attempts)


@dataclass(frozen=True)
class GuessResult:
    """
    Result of evaluating one guess.

    Contains the verdict and the updated session the caller must keep.
    """
    verdict: Verdict
    session: GameSession

    @property
    def attempts(self) -> int:
        return self.session.attempts

    @property
    def message(self) -> str:
        return format_message(self.verdict, self.session.attempts)

    @property
    def is_correct(self) -> bool:
        return self.verdict == Verdict.CORRECT


class GuessEvaluator:
    """
    Evaluates guesses. Stateless - all state is in GameSession.
    """

    def evaluate(self, session: GameSession, guess: int) -> GuessResult:
        """
        Evaluate a guess against the session target.

        Raises:
            SessionComplete: session is already won
            InvalidGuess: guess is not an integer
        """
        if session.is_won:
            raise SessionComplete(details={"attempts": session.attempts})

        # bool is an int subclass but never a meaningful guess
        if isinstance(guess, bool) or not isinstance(guess, int):
            raise InvalidGuess(
                f"Guess must be an integer, got {type(guess).__name__}",
                details={"guess": repr(guess)},
            )

        updated = session.with_attempt()
        if guess < session.target:
            verdict = Verdict.TOO_LOW
        elif guess > session.target:
            verdict = Verdict.TOO_HIGH
        else:
            verdict = Verdict.CORRECT
            updated = updated.mark_won()

        logger.debug("Attempt %d evaluated: %s", updated.attempts, verdict.value)
        return GuessResult(verdict=verdict, session=updated)


def evaluate(session: GameSession, guess: int) -> GuessResult:
    """Convenience function for evaluating a guess."""
    return GuessEvaluator().evaluate(session, guess)
