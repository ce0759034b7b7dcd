# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Password-check login and admin account endpoints.
#
# Usage:
#   from app.auth import routes as auth_routes
#   app.include_router(auth_routes.router)
# =============================================================================

from app.auth import routes

__all__ = [
    "routes",
]
