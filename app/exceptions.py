# =============================================================================
# app/exceptions.py - API Exceptions and Handlers
# =============================================================================
# Centralized error taxonomy for the API:
# - ClientError (400/404/405/422): bad route, missing resource, wrong verb, bad payload
# - AuthError   (401): missing/malformed/expired/invalid token, bad credentials
# - ServerError (500): store failure, unexpected exception
#
# Handlers raise these at the point of detection; the exception handlers
# below turn them into envelopes. Anything else is logged with its traceback
# and answered with a generic 500 that never exposes the exception text.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.responses import respond

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Base exception for the API.

    All custom exceptions inherit from this class. `message` is what the
    client sees, so it must never carry internal details.
    """

    status_code: int = 500

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or "")
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> JSONResponse:
        """Convert exception to an envelope response."""
        return respond(self.status_code, self.message)


# =============================================================================
# Client Errors
# =============================================================================

class ClientError(ApiError):
    """Raised for requests the client has to fix."""

    status_code = 400


class BadRequestError(ClientError):
    """Raised when the route or payload is structurally wrong."""

    status_code = 400


class NotFoundError(ClientError):
    """Raised when a resource or record does not exist."""

    status_code = 404


class MethodNotAllowedError(ClientError):
    """Raised when a resource does not accept the HTTP verb."""

    status_code = 405


class UnprocessableEntityError(ClientError):
    """Raised when the payload fails validation."""

    status_code = 422


# =============================================================================
# Auth Errors
# =============================================================================

class AuthError(ApiError):
    """Raised when a request is not (or not validly) authenticated."""

    status_code = 401


# =============================================================================
# Server Errors
# =============================================================================

class ServerError(ApiError):
    """Raised when the store or another collaborator fails."""

    status_code = 500


# =============================================================================
# Exception Handlers
# =============================================================================

async def api_exception_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Convert ApiError to an envelope response."""
    return exc.to_response()


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Full details go to the log; the client only gets the generic message.
    """
    logger.exception(f"Unexpected error on {request.method} {request.url}: {exc}")
    return respond(500)
