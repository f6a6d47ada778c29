"""
API Module - Request/response interface for the presentation layer.

Exposes the engine's two commands:
1. start_game - draws a target and returns the session value
2. make_guess - evaluates a guess for a caller-held session value

All state is held by the caller. Nothing is stored between requests.
"""

from .schemas import (
    # Requests
    MakeGuessRequest,
    # Responses
    StartGameResponse,
    MakeGuessResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    GameStateInfo,
    SessionStatus,
    VerdictValue,
    ErrorCode,
)
from .service import APIService
from ..engine_core.validation import validate_guess
from .app import create_app

__all__ = [
    # Requests
    "MakeGuessRequest",
    # Responses
    "StartGameResponse",
    "MakeGuessResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "GameStateInfo",
    "SessionStatus",
    "VerdictValue",
    "ErrorCode",
    # Service
    "APIService",
    "validate_guess",
    "create_app",
]
