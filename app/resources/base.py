# =============================================================================
# app/resources/base.py - Resource Handler Base Classes
# =============================================================================
# A resource handler serves exactly one request: dispatch() picks the method
# for the HTTP verb, which validates the payload, calls the data service and
# returns one envelope response. There are no transitions between verbs.
#
# Validation failures are raised as ApiError subclasses at the point of
# detection; the front controller turns them into envelopes.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from supabase import Client

from app.auth.passwords import PasswordHasher
from app.auth.tokens import TokenService, TokenValidationError
from app.exceptions import (
    AuthError,
    BadRequestError,
    MethodNotAllowedError,
    ServerError,
    UnprocessableEntityError,
)
from app.responses import respond
from core.models.results import StoreOutcome, StoreResult
from core.routing import ResolvedRoute

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Everything a handler needs for one request."""
    route: ResolvedRoute
    body: Any
    headers: Mapping[str, str]
    client: Client
    tokens: TokenService
    passwords: PasswordHasher = field(default_factory=PasswordHasher)


class ResourceHandler:
    """
    Base class for resource handlers.

    Subclasses override the verb methods they support; any other verb
    answers 405. The front controller already rejects verbs outside the
    route table, so the fallback only guards against table/handler drift.
    """

    def __init__(self, ctx: RequestContext):
        self.ctx = ctx

    def dispatch(self) -> JSONResponse:
        verbs: dict[str, Callable[[], JSONResponse]] = {
            "GET": self.get,
            "POST": self.post,
            "PUT": self.put,
            "DELETE": self.delete,
        }
        handler = verbs.get(self.ctx.route.method)
        if handler is None:
            raise MethodNotAllowedError()
        return handler()

    def get(self) -> JSONResponse:
        raise MethodNotAllowedError()

    def post(self) -> JSONResponse:
        raise MethodNotAllowedError()

    def put(self) -> JSONResponse:
        raise MethodNotAllowedError()

    def delete(self) -> JSONResponse:
        raise MethodNotAllowedError()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def require_claims(self) -> dict[str, Any]:
        """
        Validate the bearer token of this request.

        Raises:
            AuthError: For any token failure, with a failure-specific message
        """
        try:
            return self.ctx.tokens.validate(self.ctx.headers)
        except TokenValidationError as e:
            raise AuthError(e.message) from e

    @staticmethod
    def parse_body(model: type[BaseModel], body: Any, message: str) -> BaseModel:
        """
        Validate a JSON body against `model`.

        Raises:
            UnprocessableEntityError: If the body is not an object or fails validation
        """
        if not isinstance(body, dict) or not body:
            raise UnprocessableEntityError(message)
        try:
            return model.model_validate(body)
        except ValidationError as e:
            logger.info(f"Rejected payload for {model.__name__}: {e.error_count()} error(s)")
            raise UnprocessableEntityError(message) from e


class CrudHandler(ResourceHandler):
    """
    GET/POST/PUT/DELETE over one table.

    Subclasses set the models, the service factory and the messages, and may
    override prepare_create()/prepare_update() to transform rows before they
    are written.
    """

    label: str = "Record"
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    required_fields_message: str = "Incomplete data."

    def __init__(self, ctx: RequestContext):
        super().__init__(ctx)
        self.service = self.build_service(ctx.client)

    def build_service(self, client: Client) -> Any:
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def prepare_create(self, payload: BaseModel) -> dict[str, Any]:
        return payload.model_dump()

    def prepare_update(self, payload: BaseModel) -> dict[str, Any]:
        return payload.changes()

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    def get(self) -> JSONResponse:
        record_id = self.record_id()

        if record_id is None:
            result = self.service.get_all()
            self.raise_for_store_error(result)
            return respond(200, f"{self.label} list retrieved.", data=result.data)

        result = self.service.find(record_id)
        self.raise_for_store_error(result)
        if result.outcome is StoreOutcome.NOT_FOUND:
            return respond(404, f"{self.label} not found.")
        return respond(200, f"{self.label} found.", data=result.data)

    def post(self) -> JSONResponse:
        payload = self.parse_body(self.create_model, self.ctx.body, self.required_fields_message)

        result = self.service.create(self.prepare_create(payload))
        if not result.ok:
            return respond(500, f"Error creating {self.label.lower()}.")
        return respond(201, f"{self.label} created successfully.", data=result.data)

    def put(self) -> JSONResponse:
        record_id = self.record_id()
        if record_id is None or not self.ctx.body:
            raise BadRequestError(f"{self.label} ID and data to update are required.")
        if not isinstance(self.ctx.body, dict):
            raise BadRequestError("Update data must be a JSON object.")

        try:
            payload = self.update_model.model_validate(self.ctx.body)
        except ValidationError as e:
            raise UnprocessableEntityError(f"Invalid data for {self.label.lower()} update.") from e

        # A missing row is answered like a failed write
        result = self.service.update(record_id, self.prepare_update(payload))
        if not result.ok:
            return respond(500, f"Error updating {self.label.lower()} or no changes found.")
        return respond(200, f"{self.label} updated successfully.")

    def delete(self) -> JSONResponse:
        record_id = self.record_id()
        if record_id is None:
            raise BadRequestError(f"{self.label} ID to delete is required.")

        result = self.service.delete(record_id)
        self.raise_for_store_error(result)
        if result.outcome is StoreOutcome.NOT_FOUND:
            return respond(404, f"{self.label} not found.")
        return respond(200, f"{self.label} deleted successfully.")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def record_id(self) -> int | None:
        """
        The integer id from the second route segment, if any.

        Raises:
            BadRequestError: If the segment is present but not an integer
        """
        raw = self.ctx.route.record_id
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            raise BadRequestError(f"{self.label} ID must be an integer.")

    def raise_for_store_error(self, result: StoreResult) -> None:
        if result.outcome is StoreOutcome.STORE_ERROR:
            raise ServerError(f"Error reading or writing {self.label.lower()} data.")
