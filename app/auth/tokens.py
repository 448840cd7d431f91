# =============================================================================
# app/auth/tokens.py - Token Issuance and Validation
# =============================================================================
# Issues and validates HS256-signed JWTs. Tokens are stateless: nothing is
# stored server-side, each request is validated on its own.
#
# Token layout:
#   {"iat": <issued-at>, "exp": <issued-at + ttl>, "data": {<claims>}}
#
# Usage:
#   tokens = TokenService(settings)
#   token = tokens.issue({"user_id": 1})
#   claims = tokens.validate(request.headers)   # -> {"user_id": 1}
# =============================================================================

import hmac
import logging
import time
from enum import Enum
from typing import Any, Mapping

from jose import jwt, ExpiredSignatureError, JWTError
from jose.exceptions import JWTClaimsError

from app.config import Settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 3600
AUTH_HEADER = "Authorization"
AUTH_SCHEME = "Bearer"


class TokenFailure(str, Enum):
    """
    Classification of a rejected token.

    - missing_header: no Authorization header, or it is empty
    - malformed_header: not "Bearer <token>"
    - expired: signature valid but exp has passed
    - invalid_signature: signed with a different key, or tampered with
    - malformed: not a parseable JWT, or its claims are invalid
    """
    MISSING_HEADER = "missing_header"
    MALFORMED_HEADER = "malformed_header"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED = "malformed"


FAILURE_MESSAGES: dict[TokenFailure, str] = {
    TokenFailure.MISSING_HEADER: "Authorization header is missing.",
    TokenFailure.MALFORMED_HEADER: "Authorization header must be 'Bearer <token>'.",
    TokenFailure.EXPIRED: "Token has expired. Please log in again.",
    TokenFailure.INVALID_SIGNATURE: "Token signature is invalid.",
    TokenFailure.MALFORMED: "Token is malformed.",
}


class TokenValidationError(Exception):
    """Raised by TokenService.validate() with the failure kind."""

    def __init__(self, failure: TokenFailure, detail: str | None = None):
        super().__init__(detail or failure.value)
        self.failure = failure
        self.detail = detail

    @property
    def message(self) -> str:
        """Client-safe message for this failure."""
        return FAILURE_MESSAGES[self.failure]


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look a header up by name, ignoring case."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


class TokenService:
    """
    Issues and validates signed, time-limited tokens.

    The signing secret comes from the Settings object passed in at
    construction; an empty secret is rejected on every call.
    """

    def __init__(self, settings: Settings):
        self._secret = settings.SECRET_KEY
        self.default_ttl = settings.TOKEN_TTL_SECONDS

    @staticmethod
    def encode(secret: str, claims: Mapping[str, Any], ttl_seconds: int = DEFAULT_TTL_SECONDS) -> str:
        """
        Sign `claims` into a token with `secret`.

        Args:
            secret: HMAC key
            claims: Payload map embedded under "data"
            ttl_seconds: Seconds until expiry (negative yields an expired token)

        Raises:
            ValueError: If secret or claims are empty
        """
        if not secret:
            raise ValueError("Secret key must not be empty")
        if not claims:
            raise ValueError("Token claims must not be empty")

        now = int(time.time())
        payload = {
            "iat": now,
            "exp": now + ttl_seconds,
            "data": dict(claims),
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    @staticmethod
    def decode(secret: str, token: str) -> dict[str, Any]:
        """
        Verify a raw token and return its claims.

        Raises:
            TokenValidationError: EXPIRED, INVALID_SIGNATURE or MALFORMED
        """
        if not secret:
            raise ValueError("Secret key must not be empty")

        # Anything that can't even be parsed is malformed, whatever the key
        try:
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise TokenValidationError(TokenFailure.MALFORMED, str(e)) from e

        try:
            payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError as e:
            raise TokenValidationError(TokenFailure.EXPIRED, str(e)) from e
        except JWTClaimsError as e:
            raise TokenValidationError(TokenFailure.MALFORMED, str(e)) from e
        except JWTError as e:
            raise TokenValidationError(TokenFailure.INVALID_SIGNATURE, str(e)) from e

        claims = payload.get("data")
        if not isinstance(claims, dict):
            raise TokenValidationError(TokenFailure.MALFORMED, "Token has no claims map")
        return claims

    def issue(self, claims: Mapping[str, Any], ttl_seconds: int | None = None) -> str:
        """Issue a token for `claims` using the configured secret."""
        ttl = self.default_ttl if ttl_seconds is None else ttl_seconds
        return self.encode(self._secret, claims, ttl)

    def validate(self, headers: Mapping[str, str]) -> dict[str, Any]:
        """
        Extract and validate the bearer token from request headers.

        Steps:
        1. Read the Authorization header (missing/empty -> MISSING_HEADER)
        2. Require exactly "Bearer <token>" (otherwise MALFORMED_HEADER)
        3. Verify signature and expiry

        Returns:
            The claims map embedded at issuance

        Raises:
            TokenValidationError: With the failure kind
        """
        header = _get_header(headers, AUTH_HEADER)
        if not header or not header.strip():
            logger.warning("Security error: 'Authorization' header not found")
            raise TokenValidationError(TokenFailure.MISSING_HEADER)

        parts = header.strip().split(" ")
        if (
            len(parts) != 2
            or not hmac.compare_digest(parts[0].encode(), AUTH_SCHEME.encode())
            or not parts[1]
        ):
            logger.warning("Security error: malformed 'Authorization' header")
            raise TokenValidationError(TokenFailure.MALFORMED_HEADER)

        try:
            return self.decode(self._secret, parts[1])
        except TokenValidationError as e:
            if e.failure is TokenFailure.EXPIRED:
                logger.info(f"Token expired: {e.detail}")
            else:
                logger.warning(f"Token validation failed ({e.failure.value}): {e.detail}")
            raise
