# =============================================================================
# core/models/user.py - Admin Account Schemas
# =============================================================================

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for POST /login."""
    usuario: str | None = Field(default=None, examples=["admin"])
    senha: str | None = Field(default=None, examples=["********"])


class CreateAdminRequest(BaseModel):
    """Body for POST /usuarios/criar-admin."""
    usuario: str | None = Field(default=None, examples=["admin"])
    senha: str | None = Field(default=None, examples=["********"])


class ChangePasswordRequest(BaseModel):
    """Body for PUT /usuarios/alterar-senha."""
    usuario: str | None = Field(default=None, examples=["admin"])
    senha_atual: str | None = Field(default=None)
    senha_nova: str | None = Field(default=None)


class UserIdentity(BaseModel):
    """
    Minimal identity echoed back after login.

    No token is issued; the front-end keeps its own session state.
    """
    id: int
    usuario: str
