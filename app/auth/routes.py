# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Password check and admin account management.
#
# Note: no token or session is issued. A successful login echoes the
# account's id and username; the front-end keeps its own session state.
# =============================================================================

import logging

from fastapi import APIRouter

from core.models.user import ChangePasswordRequest, CreateAdminRequest, LoginRequest
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
def login(request: LoginRequest) -> dict:
    """
    Check username and password.

    Raises:
        400: If either field is missing
        401: If the credentials don't match (same message for unknown user)
    """
    user = UserService.login(request)
    return {
        "message": "Login realizado com sucesso",
        "usuario": user.model_dump(),
    }


@router.post("/usuarios/criar-admin", status_code=201)
def create_admin(request: CreateAdminRequest) -> dict:
    """
    Create an admin account.

    Raises:
        400: If either field is missing
        409: If the username is taken
    """
    user = UserService.create_admin(request)
    return {
        "message": "Usuário admin criado com sucesso",
        "usuario": user.model_dump(),
    }


@router.put("/usuarios/alterar-senha")
def change_password(request: ChangePasswordRequest) -> dict:
    """
    Change a password after checking the current one.

    Raises:
        400: If a field is missing
        401: If the current password is wrong
        404: If the account doesn't exist
    """
    user = UserService.change_password(request)
    return {
        "message": "Senha alterada com sucesso",
        "usuario": user.model_dump(),
    }
