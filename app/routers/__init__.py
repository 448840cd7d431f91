# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - front.py: Front controller serving every resource via ?route=
# - health.py: Health check endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import front
from . import health

__all__ = [
    "front",
    "health",
]
