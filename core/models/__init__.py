# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for request validation:
# - client.py: Client create/update body
# - service.py: Service body and the category enum
# - appointment.py: Appointment create/update body
# - user.py: Login and admin account bodies
# =============================================================================

from .appointment import AppointmentPayload
from .client import ClientPayload
from .service import ServiceCategory, ServicePayload
from .user import (
    ChangePasswordRequest,
    CreateAdminRequest,
    LoginRequest,
    UserIdentity,
)

__all__ = [
    # Clients
    "ClientPayload",
    # Services
    "ServiceCategory",
    "ServicePayload",
    # Appointments
    "AppointmentPayload",
    # Users
    "ChangePasswordRequest",
    "CreateAdminRequest",
    "LoginRequest",
    "UserIdentity",
]
