"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from board.config import Settings
from board.interface.api.routes import auth, comments, health, subjects, votes
from board.interface.error import InterfaceError
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


async def interface_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render interface errors with their HTTP status code."""
    status_code = getattr(exc, "status_code", 400)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one built over in-memory repositories.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Board API",
        description="Backend API for a discussion board with subjects, threaded comments and like/dislike votes",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(InterfaceError, interface_error_handler)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(subjects.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)

    return app_instance
