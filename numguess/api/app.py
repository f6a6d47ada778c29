"""
FastAPI Application - REST API for the guessing game.

Endpoints:
    POST   /api/v1/start_game     Start a game, returns the session to hold
    POST   /api/v1/make_guess     Evaluate a guess for a held session
    GET    /health                Health check

Round-trip Flow:
    1. POST /start_game returns `state`
    2. POST /make_guess with {state, guess} returns a new `state`
    3. Repeat step 2 with the newest `state` until verdict is `correct`
    4. A `won` state is rejected; call /start_game for a new game

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ALLOWED_ORIGINS, NUMGUESS_ENV, NUMGUESS_SEED, configure_logging
from ..engine_core.errors import GameError
from ..engine_core.rng import RandomNumberGenerator
from ..session import SessionLifecycle
from ..engine_core.validation import INVALID_GUESS_MESSAGE
from .service import APIService
from .schemas import (
    MakeGuessRequest,
    StartGameResponse,
    MakeGuessResponse,
    ErrorResponse,
    HealthResponse,
    ErrorCode,
)


logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE = {
    ErrorCode.ENTROPY_UNAVAILABLE: 503,
    ErrorCode.INVALID_GUESS: 422,
    ErrorCode.NO_ACTIVE_SESSION: 409,
    ErrorCode.SESSION_COMPLETE: 409,
}


def make_error_response(
    error_code: ErrorCode,
    message: str,
    status_code: int = 400,
    details: Optional[dict] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            )
        ),
    )


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title="Number Guessing API",
        description="""
Single-player number guessing. The caller holds the session between calls.

## Error Codes

| Code | Description |
|------|-------------|
| `ENTROPY_UNAVAILABLE` | No target could be drawn |
| `INVALID_GUESS` | Guess is not an integer between 1 and 100 |
| `NO_ACTIVE_SESSION` | No game was started |
| `SESSION_COMPLETE` | The game is already won |
| `VALIDATION_ERROR` | Request body is malformed |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        lifecycle=SessionLifecycle(rng=RandomNumberGenerator(seed=NUMGUESS_SEED))
    )
    app.state.service = api_service

    # =========================================================================
    # Error handlers
    # =========================================================================

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
        error_code = ErrorCode.__members__.get(exc.error_code, ErrorCode.INTERNAL_ERROR)
        status_code = STATUS_BY_ERROR_CODE.get(error_code, 400)
        if status_code >= 500:
            logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
        else:
            logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
        return make_error_response(error_code, exc.message, status_code, exc.details or None)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        # A bad guess is the caller's retry case, everything else is a malformed body
        if any("guess" in err.get("loc", ()) for err in errors):
            return make_error_response(
                ErrorCode.INVALID_GUESS,
                INVALID_GUESS_MESSAGE,
                status_code=422,
                details={"errors": jsonable_encoder(errors)},
            )
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request body",
            status_code=422,
            details={"errors": jsonable_encoder(errors)},
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/start_game",
        response_model=StartGameResponse,
        responses={503: {"model": ErrorResponse, "description": "Entropy unavailable"}},
        tags=["Game"],
        summary="Start a new game",
    )
    async def start_game() -> StartGameResponse:
        """
        Start a new game.

        Keep the returned `state` and send it with every guess.
        """
        return api_service.start_game()

    @app.post(
        "/api/v1/make_guess",
        response_model=MakeGuessResponse,
        responses={
            409: {"model": ErrorResponse, "description": "No game started, or game already won"},
            422: {"model": ErrorResponse, "description": "Invalid guess or body"},
        },
        tags=["Game"],
        summary="Evaluate a guess",
    )
    async def make_guess(request: MakeGuessRequest) -> MakeGuessResponse:
        """
        Evaluate a guess against the session in the request.

        The response `state` replaces the one the caller held.
        """
        return api_service.make_guess(request)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="numguess",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Number Guessing API",
            "version": __version__,
            "environment": NUMGUESS_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn numguess.api.app:app
app = create_app()
