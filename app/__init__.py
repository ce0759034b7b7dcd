# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# - main.py: Application entry point (middleware, handlers, routers)
# - config.py: Settings loaded from environment / .env
# - exceptions.py: Error taxonomy and JSON exception handlers
# - routers/: HTTP endpoints grouped by resource
# =============================================================================
