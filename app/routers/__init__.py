# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - clients.py: /clientes CRUD and search
# - appointments.py: /agendamentos CRUD, today's list, mark paid
# - catalog.py: /services CRUD, popular and by-category lists
# - dashboard.py: /dashboard aggregates
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import clients
from . import appointments
from . import catalog
from . import dashboard

__all__ = [
    "health",
    "clients",
    "appointments",
    "catalog",
    "dashboard",
]
