# =============================================================================
# app/resources/ - Resource Handlers
# =============================================================================
# One handler class per resource in the route table (core/routing.py):
# - user.py: users CRUD
# - product.py: products CRUD (writes require a token)
# - auth.py: login and token verification
# =============================================================================

from app.resources.auth import AuthHandler
from app.resources.base import CrudHandler, RequestContext, ResourceHandler
from app.resources.product import ProductHandler
from app.resources.user import UserHandler

# Resource name -> handler class
HANDLERS: dict[str, type[ResourceHandler]] = {
    "user": UserHandler,
    "auth": AuthHandler,
    "product": ProductHandler,
}

__all__ = [
    "HANDLERS",
    "AuthHandler",
    "CrudHandler",
    "ProductHandler",
    "RequestContext",
    "ResourceHandler",
    "UserHandler",
]
