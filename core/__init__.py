# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the resource logic behind the HTTP layer:
# - routing.py: Route table and route validation chain
# - models/: Pydantic schemas and result types
# - services/: Thin data access per resource
#
# Code in this package should NOT import from FastAPI. routing.py and
# models/ depend on nothing outside core; services/ reach the store
# through lib.supabase_client.
# =============================================================================
