# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Resource API.
# It configures the FastAPI application with logging, middleware, exception
# handlers and routers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.passwords import PasswordHasher
from app.auth.tokens import TokenService
from app.config import Settings
from app.exceptions import ApiError, api_exception_handler, unexpected_exception_handler
from app.responses import respond
from app.routers import front, health
from core.models.envelope import STATUS_PHRASES

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging.

    Logs go to stderr, and are also appended to LOG_FILE when it is set.
    The file handler is attached even if the root logger already has
    handlers (basicConfig is a no-op then), but only once per path.
    """
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if not settings.LOG_FILE:
        return

    root = logging.getLogger()
    path = os.path.abspath(settings.LOG_FILE)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return

    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log the environment
    - Shutdown: drop the store client
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting Resource API in {settings.ENVIRONMENT} mode")

    yield

    logger.info("Shutting down Resource API")
    app.state.supabase = None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework-level HTTP errors (unknown path, unsupported verb) in an envelope."""
    status_code = exc.status_code if exc.status_code in STATUS_PHRASES else 500
    return respond(status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted.
            Loading fails if SECRET_KEY is not set.

    Returns:
        The configured application
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(
        title="Resource API",
        description="JSON CRUD API behind a single front controller (`/?route=<resource>/<id>`).",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.token_service = TokenService(settings)
    app.state.password_hasher = PasswordHasher()
    app.state.supabase = None

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, tags=["Health"])
    app.include_router(front.router, tags=["Resources"])

    return app


# ASGI entrypoint for uvicorn
app = create_app()
