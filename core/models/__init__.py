# =============================================================================
# core/models/ - Data Models
# =============================================================================
# - envelope.py: Response envelope
# - results.py: Tagged result of data-access calls
# - user.py / product.py: Resource payload schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .envelope import DEFAULT_MESSAGES, STATUS_PHRASES, Envelope
from .product import ProductCreate, ProductUpdate
from .results import StoreOutcome, StoreResult
from .user import UserCreate, UserUpdate

__all__ = [
    "DEFAULT_MESSAGES",
    "STATUS_PHRASES",
    "Envelope",
    "ProductCreate",
    "ProductUpdate",
    "StoreOutcome",
    "StoreResult",
    "UserCreate",
    "UserUpdate",
]
