"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API schemas to engine calls
2. Formats engine results for the caller

Range validation happens in the session lifecycle, so every entry point
(this service, the CLI, the plain commands) enforces it the same way.

This layer is framework-agnostic (can be used with FastAPI, a CLI, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    MakeGuessRequest,
    StartGameResponse,
    MakeGuessResponse,
    GameStateInfo,
    VerdictValue,
)
from ..session import SessionLifecycle


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        started = service.start_game()
        response = service.make_guess(
            MakeGuessRequest(state=started.state, guess=50)
        )
        # keep response.state for the next guess
    """
    lifecycle: SessionLifecycle = field(default_factory=SessionLifecycle)

    def start_game(self) -> StartGameResponse:
        """
        Start a new game.

        EntropyUnavailable propagates to the caller.
        """
        session = self.lifecycle.start()
        return StartGameResponse(state=GameStateInfo.from_session(session))

    def make_guess(self, request: MakeGuessRequest) -> MakeGuessResponse:
        """
        Evaluate a guess for the session carried in the request.

        Raises InvalidGuess, NoActiveSession or SessionComplete; nothing is
        mutated when an error is raised.
        """
        session = request.state.to_session() if request.state else None
        result = self.lifecycle.guess(session, request.guess)

        return MakeGuessResponse(
            message=result.message,
            attempts=result.attempts,
            verdict=VerdictValue(result.verdict.value),
            state=GameStateInfo.from_session(result.session),
        )
