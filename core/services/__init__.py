# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "ProductService",
    "UserService",
]
