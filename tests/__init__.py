# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Resource API:
# - test_routing.py: Route table and validation chain
# - test_tokens.py: Token issuance and validation
# - test_front_controller.py: Dispatch, envelopes, generic 500
# - test_users.py / test_products.py / test_auth.py: Resource handlers
# - test_store.py: Table store and data services
# - test_models.py: Pydantic model validation
#
# Run tests with: pytest
# =============================================================================
