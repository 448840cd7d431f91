# =============================================================================
# core/routing.py - Route Table and Route Parsing
# =============================================================================
# The front controller receives the logical route in a query parameter:
#
#   GET /?route=user/123   ->  resource "user", segments ["user", "123"]
#
# resolve_route() applies the validation chain in a fixed order, first
# failure wins:
#   1. no non-empty segment       -> RouteProblem.EMPTY_ROUTE        (400)
#   2. resource not in the table  -> RouteProblem.UNKNOWN_RESOURCE   (404)
#   3. verb not allowed           -> RouteProblem.METHOD_NOT_ALLOWED (405)
#
# This module is framework-agnostic so the chain can be tested without HTTP.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# Resource name -> allowed HTTP verbs
ROUTES: Mapping[str, frozenset[str]] = MappingProxyType({
    "user": frozenset({"GET", "POST", "PUT", "DELETE"}),
    "auth": frozenset({"POST"}),
    "product": frozenset({"GET", "POST", "PUT", "DELETE"}),
})


class RouteProblem(str, Enum):
    """Why a route was rejected before reaching a handler."""
    EMPTY_ROUTE = "empty_route"
    UNKNOWN_RESOURCE = "unknown_resource"
    METHOD_NOT_ALLOWED = "method_not_allowed"


class RouteError(Exception):
    """Raised by resolve_route() with the first problem found."""

    def __init__(self, problem: RouteProblem, resource: str | None = None, method: str | None = None):
        super().__init__(problem.value)
        self.problem = problem
        self.resource = resource
        self.method = method


@dataclass(frozen=True)
class ResolvedRoute:
    """A route that passed every check."""
    method: str
    resource: str
    segments: tuple[str, ...]

    @property
    def record_id(self) -> str | None:
        """The second segment (record id), if present and non-empty."""
        if len(self.segments) > 1 and self.segments[1] != "":
            return self.segments[1]
        return None

    @property
    def sub_path(self) -> tuple[str, ...]:
        """Segments after the resource name."""
        return self.segments[1:]


def split_route(route: str | None) -> list[str]:
    """
    Split a raw route string into segments.

    Trailing slashes are stripped before splitting; a missing or empty
    route yields an empty list.

    Example:
        split_route("user/123/") -> ["user", "123"]
    """
    if not route:
        return []
    trimmed = route.strip().rstrip("/")
    if not trimmed:
        return []
    return trimmed.split("/")


def resolve_route(
    method: str,
    route: str | None,
    routes: Mapping[str, frozenset[str]] = ROUTES,
) -> ResolvedRoute:
    """
    Validate a method + raw route against the route table.

    Raises:
        RouteError: with the first failing check
    """
    method = method.upper()
    segments = split_route(route)

    if not any(segments):
        raise RouteError(RouteProblem.EMPTY_ROUTE, method=method)

    resource = segments[0]
    if resource not in routes:
        raise RouteError(RouteProblem.UNKNOWN_RESOURCE, resource=resource, method=method)

    if method not in routes[resource]:
        raise RouteError(RouteProblem.METHOD_NOT_ALLOWED, resource=resource, method=method)

    return ResolvedRoute(method=method, resource=resource, segments=tuple(segments))
