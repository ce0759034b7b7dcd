# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .appointment_service import AppointmentService
from .catalog_service import CatalogService
from .client_service import ClientService
from .dashboard_service import DashboardService
from .user_service import UserService

__all__ = [
    "AppointmentService",
    "CatalogService",
    "ClientService",
    "DashboardService",
    "UserService",
]
