# =============================================================================
# core/models/envelope.py - Response Envelope Schema
# =============================================================================
# Every response produced by the front controller is one Envelope:
#
#   {"status": "Ok", "message": "User found.", "data": {...}}
#
# `data` is only serialized when a payload was explicitly attached.
# =============================================================================

from typing import Any

from pydantic import BaseModel


# Reason phrase and default message for each status code the API emits.
# 403 and 503 are part of the vocabulary but no handler produces them yet.
STATUS_PHRASES: dict[int, str] = {
    200: "Ok",
    201: "Created",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}

DEFAULT_MESSAGES: dict[int, str] = {
    200: "Operation completed successfully",
    201: "Resource created successfully",
    400: "Bad request",
    401: "Unauthorized. Authentication is required",
    403: "Forbidden. You do not have access to this resource",
    404: "Resource not found",
    405: "Method not allowed",
    422: "Unprocessable entity. The submitted data is invalid",
    500: "Internal server error",
    503: "Service unavailable",
}


class Envelope(BaseModel):
    """
    Uniform response body.

    Built through `Envelope.for_status()` so the status phrase always
    matches the HTTP code.
    """
    status: str
    message: str
    data: Any = None

    # Set when `data` was explicitly attached (even if it is None or empty)
    has_data: bool = False

    @classmethod
    def for_status(
        cls,
        status_code: int,
        message: str | None = None,
        *,
        data: Any = None,
        has_data: bool | None = None,
    ) -> "Envelope":
        """Build the envelope for an HTTP status code."""
        if status_code not in STATUS_PHRASES:
            raise ValueError(f"Unsupported status code: {status_code}")
        return cls(
            status=STATUS_PHRASES[status_code],
            message=message or DEFAULT_MESSAGES[status_code],
            data=data,
            has_data=(data is not None) if has_data is None else has_data,
        )

    def to_body(self) -> dict[str, Any]:
        """Serialize for the wire, leaving `data` out unless attached."""
        body: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.has_data:
            body["data"] = self.data
        return body
