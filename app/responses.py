# =============================================================================
# app/responses.py - Envelope Responses
# =============================================================================
# Builds the JSONResponse for an Envelope. Error envelopes (>= 400) are
# logged here so every rejected request leaves a trace in the log file.
#
# Usage:
#   return respond(200, "User found.", data=user)
#   return respond(404, "User not found.")
# =============================================================================

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.models.envelope import Envelope

logger = logging.getLogger(__name__)

# Distinguishes "no data attached" from an attached None / empty list
_NO_DATA: Any = object()


def respond(status_code: int, message: str | None = None, *, data: Any = _NO_DATA) -> JSONResponse:
    """
    Build a JSON envelope response.

    Args:
        status_code: HTTP status code (must be one the API knows)
        message: Human-readable message; defaults to the code's standard text
        data: Payload to attach; omitted from the body when not given

    Returns:
        JSONResponse with the envelope as body
    """
    attached = data is not _NO_DATA
    envelope = Envelope.for_status(
        status_code,
        message,
        data=data if attached else None,
        has_data=attached,
    )

    if status_code >= 500:
        logger.error(f"API Response Error -> Status: {envelope.status} | Message: {envelope.message}")
    elif status_code >= 400:
        logger.warning(f"API Response Error -> Status: {envelope.status} | Message: {envelope.message}")

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope.to_body()),
    )
