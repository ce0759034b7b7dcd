# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the salon's business logic:
# - models/: Pydantic schemas for request validation
# - services/: One service per entity, talking to the record store
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable without an HTTP client.
# =============================================================================
