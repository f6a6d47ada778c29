"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the presentation layer and
the engine. The session travels to the caller and back on every guess.

Error Codes:
- ENTROPY_UNAVAILABLE: No target could be drawn, game not started
- INVALID_GUESS: Guess is not an integer between 1 and 100
- NO_ACTIVE_SESSION: Guess submitted before a game was started
- SESSION_COMPLETE: Guess submitted for a game that is already won
- VALIDATION_ERROR: Request body is malformed
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.state import GameSession, SessionStatus as EngineStatus, MIN_TARGET, MAX_TARGET


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    WON = "won"


class VerdictValue(str, Enum):
    """Verdict values."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


class ErrorCode(str, Enum):
    """Structured error codes."""
    ENTROPY_UNAVAILABLE = "ENTROPY_UNAVAILABLE"
    INVALID_GUESS = "INVALID_GUESS"
    NO_ACTIVE_SESSION = "NO_ACTIVE_SESSION"
    SESSION_COMPLETE = "SESSION_COMPLETE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GameStateInfo(BaseModel):
    """
    Caller-held game session.

    Returned by start_game and make_guess; send the latest copy back with
    the next guess. The target is readable by the caller.
    """
    target_number: int = Field(..., ge=MIN_TARGET, le=MAX_TARGET)
    attempts: int = Field(0, ge=0)
    status: SessionStatus = SessionStatus.ACTIVE

    @classmethod
    def from_session(cls, session: GameSession) -> "GameStateInfo":
        return cls(
            target_number=session.target,
            attempts=session.attempts,
            status=SessionStatus(session.status.value),
        )

    def to_session(self) -> GameSession:
        return GameSession(
            target=self.target_number,
            attempts=self.attempts,
            status=EngineStatus(self.status.value),
        )


# =============================================================================
# Request Models
# =============================================================================

class MakeGuessRequest(BaseModel):
    """Request to evaluate a guess."""
    state: Optional[GameStateInfo] = Field(
        None, description="Session returned by the previous call; omit only if no game was started"
    )
    guess: int = Field(
        ..., strict=True, description=f"Whole number between {MIN_TARGET} and {MAX_TARGET}; booleans and strings are rejected"
    )


# =============================================================================
# Response Models
# =============================================================================

class StartGameResponse(BaseModel):
    """Response after starting a game."""
    state: GameStateInfo
    message: str = f"Game started! Guess a number between {MIN_TARGET} and {MAX_TARGET}"
    api_version: str = "v1"


class MakeGuessResponse(BaseModel):
    """Response after evaluating a guess."""
    message: str
    attempts: int = Field(..., ge=1, description="Attempts including this guess")
    verdict: VerdictValue
    state: GameStateInfo = Field(..., description="Updated session to send with the next guess")
    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
