"""
Session Lifecycle - Starts games and dispatches guesses.

LIFECYCLE:
1. Caller calls start() -> fresh ACTIVE session with a new target
2. Caller calls guess(session, value) with the session it holds
   - TOO_LOW / TOO_HIGH: session stays ACTIVE, attempts + 1
   - CORRECT: session becomes WON (terminal)
3. Caller discards a WON session, or calls start() again to abandon one

There is NO session table. Every call is a pure function of the session
value passed in, so independent callers never share state.
"""

from __future__ import annotations
from enum import Enum
import logging

from ..engine_core.state import GameSession
from ..engine_core.rng import RandomNumberGenerator
from ..engine_core.evaluator import GuessEvaluator, GuessResult
from ..engine_core.errors import NoActiveSession, SessionComplete
from ..engine_core.validation import validate_guess


logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    """Where a caller is in the game, judged from the session value it holds."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    WON = "won"


def state_of(session: GameSession | None) -> LifecycleState:
    """Report the lifecycle state of a caller-held session value."""
    if session is None:
        return LifecycleState.UNINITIALIZED
    if session.is_won:
        return LifecycleState.WON
    return LifecycleState.ACTIVE


class SessionLifecycle:
    """
    Composes the RandomNumberGenerator and GuessEvaluator.

    Holds no per-session state; the generator is the only shared resource
    and it is safe for concurrent use.
    """

    def __init__(
        self,
        rng: RandomNumberGenerator | None = None,
        evaluator: GuessEvaluator | None = None,
    ):
        self.rng = rng or RandomNumberGenerator()
        self.evaluator = evaluator or GuessEvaluator()

    def start(self, previous: GameSession | None = None) -> GameSession:
        """
        Start a new game.

        Allowed from any state. Passing the previous session only affects
        logging: an unfinished one is reported as abandoned.

        Raises:
            EntropyUnavailable: no target could be drawn
        """
        if state_of(previous) == LifecycleState.ACTIVE:
            logger.info("Abandoning active session after %d attempts", previous.attempts)

        session = GameSession.new(self.rng.generate())
        logger.info("Session started")
        return session

    def guess(self, session: GameSession | None, value: int) -> GuessResult:
        """
        Submit a guess for the caller-held session.

        Raises:
            NoActiveSession: no session was started
            SessionComplete: session is already won
            InvalidGuess: value is not an integer between 1 and 100
        """
        if session is None:
            raise NoActiveSession()
        if session.is_won:
            raise SessionComplete(details={"attempts": session.attempts})

        result = self.evaluator.evaluate(session, validate_guess(value))
        if result.is_correct:
            logger.info("Session won in %d attempts", result.attempts)
        return result


# Holds only the OS-entropy generator, no session state
_default_lifecycle = SessionLifecycle()


def start_game(lifecycle: SessionLifecycle | None = None) -> GameSession:
    """Command: start a new game and return the session the caller must hold."""
    return (lifecycle or _default_lifecycle).start()


def make_guess(
    state: GameSession | None,
    guess: int,
    lifecycle: SessionLifecycle | None = None,
) -> tuple[str, int]:
    """Command: evaluate a guess and return (message, attempts after this guess)."""
    result = (lifecycle or _default_lifecycle).guess(state, guess)
    return result.message, result.attempts
