# =============================================================================
# app/routers/front.py - Front Controller
# =============================================================================
# Single entry point for every resource request:
#
#   GET    /?route=user        -> list users
#   GET    /?route=user/7      -> one user
#   POST   /?route=auth        -> log in
#
# The route is validated before anything else is resolved (400 empty route,
# 404 unknown resource, 405 verb not allowed), then the matching resource
# handler serves the request. Any exception a handler doesn't convert into
# an envelope is logged here and answered with a generic 500.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.dependencies import (
    JsonBodyDep,
    PasswordHasherDep,
    SupabaseDep,
    TokenServiceDep,
)
from app.exceptions import ApiError, BadRequestError, MethodNotAllowedError, NotFoundError
from app.resources import HANDLERS, RequestContext
from app.responses import respond
from core.routing import ResolvedRoute, RouteError, RouteProblem, resolve_route

logger = logging.getLogger(__name__)

router = APIRouter()

# Verbs the endpoint accepts; the route table decides which are allowed
ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def get_resolved_route(
    request: Request,
    route: Annotated[str | None, Query(description="Logical route, e.g. user/123")] = None,
) -> ResolvedRoute:
    """
    Validate the requested route against the route table.

    Declared first on the endpoint so a bad route is rejected before the
    store client or the body are touched.

    Raises:
        BadRequestError: No route given
        NotFoundError: Unknown resource
        MethodNotAllowedError: Verb not allowed for the resource
    """
    try:
        return resolve_route(request.method, route)
    except RouteError as e:
        if e.problem is RouteProblem.EMPTY_ROUTE:
            raise BadRequestError("Bad request. No route was specified.")
        if e.problem is RouteProblem.UNKNOWN_RESOURCE:
            raise NotFoundError("The requested resource does not exist.")
        raise MethodNotAllowedError("Method not allowed for this resource.")


ResolvedRouteDep = Annotated[ResolvedRoute, Depends(get_resolved_route)]


@router.api_route("/", methods=ACCEPTED_METHODS, response_model=None)
def front_controller(
    route: ResolvedRouteDep,
    request: Request,
    body: JsonBodyDep,
    client: SupabaseDep,
    tokens: TokenServiceDep,
    passwords: PasswordHasherDep,
) -> JSONResponse:
    """
    Dispatch a validated route to its resource handler.

    Returns the handler's envelope response.
    """
    handler_cls = HANDLERS.get(route.resource)
    if handler_cls is None:
        # Route table lists a resource with no handler
        logger.error(f"No handler registered for resource '{route.resource}'")
        return respond(500)

    ctx = RequestContext(
        route=route,
        body=body,
        headers=request.headers,
        client=client,
        tokens=tokens,
        passwords=passwords,
    )

    logger.debug(f"Dispatching {route.method} {'/'.join(route.segments)}")
    try:
        return handler_cls(ctx).dispatch()
    except ApiError as e:
        return e.to_response()
    except Exception as e:
        logger.exception(f"Unhandled error serving {route.method} {'/'.join(route.segments)}: {e}")
        return respond(500)
