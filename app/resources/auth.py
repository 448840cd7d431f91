# =============================================================================
# app/resources/auth.py - Authentication Resource
# =============================================================================
# ?route=auth          POST {correo, password} -> issue a token
# ?route=auth/verify   POST with "Authorization: Bearer <token>" -> claims
#
# Unknown users and wrong passwords get the same 401 so the endpoint can't
# be used to probe which emails are registered.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.exceptions import AuthError, NotFoundError, ServerError
from app.resources.base import ResourceHandler
from app.responses import respond
from core.models.results import StoreOutcome
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


class LoginRequest(BaseModel):
    """Body of POST ?route=auth."""
    correo: str
    password: str


class AuthHandler(ResourceHandler):
    """Handler for the `auth` resource (POST only)."""

    def post(self) -> JSONResponse:
        sub_path = self.ctx.route.sub_path
        if not sub_path:
            return self.login()
        if sub_path == ("verify",):
            return self.verify()
        raise NotFoundError()

    def login(self) -> JSONResponse:
        credentials = self.parse_body(
            LoginRequest,
            self.ctx.body,
            "Incomplete data. 'correo' and 'password' are required.",
        )

        result = UserService(self.ctx.client).find_credentials(credentials.correo)
        if result.outcome is StoreOutcome.STORE_ERROR:
            raise ServerError("Error reading user data.")
        if result.outcome is StoreOutcome.NOT_FOUND:
            logger.info("Login rejected: unknown email")
            raise AuthError(INVALID_CREDENTIALS)

        user = result.data
        if not self.ctx.passwords.verify(user.get("password") or "", credentials.password):
            logger.info(f"Login rejected: wrong password for user {user.get('id_usuario')}")
            raise AuthError(INVALID_CREDENTIALS)

        claims = {"user_id": user["id_usuario"], "rol": user.get("rol")}
        token = self.ctx.tokens.issue(claims)
        logger.info(f"Issued token for user {user['id_usuario']}")
        return respond(
            200,
            "Login successful.",
            data={
                "token": token,
                "token_type": "Bearer",
                "expires_in": self.ctx.tokens.default_ttl,
            },
        )

    def verify(self) -> JSONResponse:
        claims = self.require_claims()
        return respond(200, "Token validated successfully.", data={"claims": claims})
