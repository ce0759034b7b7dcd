# =============================================================================
# core/services/user_service.py - Admin Account Logic
# =============================================================================
# Password check against the `usuarios` table. No token or session is
# issued: a successful login only echoes the account's id and username.
# =============================================================================

import logging
from typing import Any

from app.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from core.models.user import (
    ChangePasswordRequest,
    CreateAdminRequest,
    LoginRequest,
    UserIdentity,
)
from core.services.common import store_failure
from lib.security import dummy_verify, hash_password, verify_password
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import is_blank, utc_now_iso

logger = logging.getLogger(__name__)

TABLE = "usuarios"


class UserService:
    """Service for admin account operations."""

    @staticmethod
    def _find_by_username(usuario: str) -> dict[str, Any] | None:
        """Exact-match lookup by username."""
        return SupabaseClient.fetch_one(TABLE, filters=[("eq", "usuario", usuario)])

    @staticmethod
    def login(request: LoginRequest) -> UserIdentity:
        """
        Check a username/password pair.

        Unknown user and wrong password raise the same AuthError.

        Raises:
            ValidationError: If either field is missing
            AuthError: If the credentials don't match
        """
        if is_blank(request.usuario) or is_blank(request.senha):
            raise ValidationError("Usuário e senha são obrigatórios")

        try:
            user = UserService._find_by_username(request.usuario)
        except SupabaseClientError as e:
            raise store_failure(e, "Erro no servidor") from e

        if not user:
            dummy_verify()
            logger.info("Login failed: unknown user")
            raise AuthError()

        if not verify_password(request.senha, user.get("senha")):
            logger.info(f"Login failed for user id {user['id']}")
            raise AuthError()

        logger.info(f"Login succeeded for user id {user['id']}")
        return UserIdentity(id=user["id"], usuario=user["usuario"])

    @staticmethod
    def create_admin(request: CreateAdminRequest) -> UserIdentity:
        """
        Create an admin account with a bcrypt-hashed password.

        Raises:
            ValidationError: If either field is missing
            ConflictError: If the username is taken
        """
        if is_blank(request.usuario) or is_blank(request.senha):
            raise ValidationError("Usuário e senha são obrigatórios")

        try:
            if UserService._find_by_username(request.usuario):
                raise ConflictError("Usuário já existe", details={"usuario": request.usuario})

            user = SupabaseClient.insert_row(TABLE, {
                "usuario": request.usuario,
                "senha": hash_password(request.senha),
                "criado_em": utc_now_iso(),
            })
        except SupabaseClientError as e:
            if e.is_unique_violation:
                raise ConflictError("Usuário já existe", details={"usuario": request.usuario}) from e
            raise store_failure(e, "Erro ao criar usuário") from e

        logger.info(f"Created admin user id {user['id']}")
        return UserIdentity(id=user["id"], usuario=user["usuario"])

    @staticmethod
    def change_password(request: ChangePasswordRequest) -> UserIdentity:
        """
        Replace a password after checking the current one.

        Raises:
            ValidationError: If any field is missing
            NotFoundError: If the account doesn't exist
            AuthError: If the current password is wrong
        """
        if any(is_blank(value) for value in (request.usuario, request.senha_atual, request.senha_nova)):
            raise ValidationError("Todos os campos são obrigatórios")

        try:
            user = UserService._find_by_username(request.usuario)
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao alterar senha") from e

        if not user:
            raise NotFoundError("Usuário não encontrado")

        if not verify_password(request.senha_atual, user.get("senha")):
            raise AuthError("Senha atual incorreta")

        try:
            updated = SupabaseClient.update_rows(
                TABLE,
                {"senha": hash_password(request.senha_nova), "atualizado_em": utc_now_iso()},
                filters=[("eq", "id", user["id"])],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao alterar senha") from e

        if not updated:
            raise NotFoundError("Usuário não encontrado")

        logger.info(f"Password changed for user id {user['id']}")
        return UserIdentity(id=updated[0]["id"], usuario=updated[0]["usuario"])

    @staticmethod
    def set_admin_password(usuario: str, senha: str) -> tuple[dict[str, Any], bool]:
        """
        Create the account or overwrite its password, without checking the old one.

        Used by scripts/create_admin.py for first setup and recovery.

        Returns:
            (user row, True if the account was created)

        Raises:
            SupabaseClientError: If the store fails
        """
        senha_hash = hash_password(senha)
        user = UserService._find_by_username(usuario)

        if user is None:
            created = SupabaseClient.insert_row(TABLE, {
                "usuario": usuario,
                "senha": senha_hash,
                "criado_em": utc_now_iso(),
            })
            return created, True

        updated = SupabaseClient.update_rows(
            TABLE,
            {"senha": senha_hash, "atualizado_em": utc_now_iso()},
            filters=[("eq", "id", user["id"])],
        )
        return (updated[0] if updated else user), False
