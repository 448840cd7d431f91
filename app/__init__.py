# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging, middleware, error handlers
# - config.py: Environment variable loading and settings
# - routers/: Front controller and health endpoint
# - resources/: Per-resource handlers (dispatch by HTTP verb)
# - auth/: Tokens and password hashing
#
# The app layer is thin - it handles HTTP concerns and delegates
# data access to the core/ package.
# =============================================================================
