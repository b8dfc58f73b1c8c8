"""
FastAPI Application - REST API for game front-ends.

Endpoints:
    POST   /api/v1/sessions                  Start a game
    GET    /api/v1/sessions                  List active sessions
    GET    /api/v1/sessions/{id}             Get session status
    DELETE /api/v1/sessions/{id}             End session
    POST   /api/v1/sessions/{id}/guesses     Make a guess

The target number stays server-side; clients only hold the session id.
All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging

from ..config import ALLOWED_ORIGINS, GUESSR_ENV, GUESSR_SESSION_MAX_AGE, GameConfig
from .. import __version__

logger = logging.getLogger(__name__)


def create_app(service=None, session_max_age: int = GUESSR_SESSION_MAX_AGE):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        session_max_age: Idle seconds after which sessions are dropped;
            stale sessions are swept whenever a new game starts

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Body, Query, Request
        from fastapi.encoders import jsonable_encoder
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .models import (
        StartGameRequest as ServiceStartRequest,
        MakeGuessRequest,
        ErrorResponse as ServiceErrorResponse,
    )
    from ..session import SessionManager
    from .schemas import (
        # Request models
        StartGameRequest,
        GuessRequest,
        # Response models
        StartGameResponse,
        SessionResponse,
        GuessResponse,
        ErrorResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="Guessr API",
        description="""
Number guessing game - guess the hidden number between 1 and 100.

## Flow

1. `POST /api/v1/sessions` returns a `session_id`
2. `POST /api/v1/sessions/{session_id}/guesses` with `{"guess": 50}`
3. Repeat until `outcome` is `correct`; later guesses return `already_won`

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist (start a new game first) |
| `INVALID_GUESS` | Guess rejected by strict range checking |
| `VALIDATION_ERROR` | Request body or parameters malformed (HTTP 422) |
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
        session_manager=SessionManager(config=GameConfig.from_env())
    )
    app.state.service = api_service
    logger.info("Guessr API created (env=%s)", GUESSR_ENV)

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Render request validation failures as a structured error."""
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    def service_error(response: ServiceErrorResponse) -> JSONResponse:
        """Render a service-level error with the matching HTTP status."""
        error_code = ErrorCode(response.error_code)
        status_code = 404 if error_code == ErrorCode.SESSION_NOT_FOUND else 400
        return make_error_response(error_code, response.error, status_code, response.details)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=StartGameResponse,
        status_code=201,
        tags=["Sessions"],
        summary="Start a new game",
    )
    async def start_game(
        body: Optional[StartGameRequest] = Body(default=None),
    ) -> StartGameResponse:
        """
        Start a new game and return its session id.

        Pass `previous_session_id` to discard the game being replaced.
        """
        api_service.cleanup(session_max_age)
        request = ServiceStartRequest(
            previous_session_id=body.previous_session_id if body else None,
        )
        response = api_service.start_game(request)
        return StartGameResponse(
            session_id=response.session_id,
            status=response.status.value,
            attempts=response.attempts,
            min_value=response.min_value,
            max_value=response.max_value,
            message=response.message,
            created_at=response.created_at,
        )

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List the ids of games not yet won."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the current status of a game session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ServiceErrorResponse):
            return service_error(response)
        return SessionResponse(
            session_id=response.session_id,
            status=response.status.value,
            attempts=response.attempts,
            min_value=response.min_value,
            max_value=response.max_value,
            created_at=response.created_at,
            updated_at=response.updated_at,
        )

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: str = Query(default="user_ended", description="Reason for ending"),
    ) -> EndSessionResponse:
        """End a game session and release it."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(
            success=success,
            session_id=session_id,
            message="Session ended" if success else "Session not found",
        )

    # =========================================================================
    # Guess Endpoint
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/guesses",
        response_model=GuessResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Guess rejected"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game"],
        summary="Make a guess",
    )
    async def make_guess(
        session_id: str,
        body: GuessRequest,
    ) -> Union[GuessResponse, JSONResponse]:
        """
        Evaluate a guess.

        **Request Body:**
        ```json
        {"guess": 42}
        ```
        """
        response = api_service.make_guess(
            MakeGuessRequest(session_id=session_id, guess=body.guess)
        )
        if isinstance(response, ServiceErrorResponse):
            return service_error(response)
        return GuessResponse(
            session_id=response.session_id,
            message=response.message,
            attempts=response.attempts,
            outcome=response.outcome.value,
            status=response.status.value,
        )

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
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="guessr", version=__version__)

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Guessr API",
            "version": __version__,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app
