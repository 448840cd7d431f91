# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides HS256 JWT issuance/validation and password hashing.
#
# Usage:
#   from app.auth import TokenService, TokenValidationError
#
#   claims = tokens.validate(request.headers)
# =============================================================================

from app.auth.passwords import PasswordHasher
from app.auth.tokens import (
    TokenFailure,
    TokenService,
    TokenValidationError,
)

__all__ = [
    "PasswordHasher",
    "TokenFailure",
    "TokenService",
    "TokenValidationError",
]
