# =============================================================================
# core/services/client_service.py - Client Business Logic
# =============================================================================
# Handles client CRUD operations and search.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from app.exceptions import NotFoundError, ReferentialConflictError, ValidationError
from core.models.client import ClientPayload
from core.services.common import require_id, store_failure
from lib.supabase_client import SupabaseClient, SupabaseClientError, clean_search_term
from lib.utils import is_blank, parse_date

logger = logging.getLogger(__name__)

TABLE = "clientes"
ID_COLUMN = "id_cliente"
LIST_COLUMNS = "id_cliente, nome, telefone, email, aniversario, observacoes, created_at"
SEARCH_COLUMNS = ("nome", "telefone", "email")
SEARCH_LIMIT = 20

NOT_FOUND_MESSAGE = "Cliente não encontrado"


class ClientService:
    """
    Service for client management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _build_row(payload: ClientPayload) -> dict[str, Any]:
        """
        Validate a client body and build the row to store.

        Missing text fields are stored as "" and a missing birth date as null.

        Raises:
            ValidationError: If the name is blank or the birth date is malformed
        """
        if is_blank(payload.nome):
            raise ValidationError("Nome é obrigatório")

        aniversario = None
        if not is_blank(payload.aniversario):
            birthday = parse_date(payload.aniversario)
            if birthday is None:
                raise ValidationError(
                    "Data de aniversário inválida. Use o formato AAAA-MM-DD",
                    details={"aniversario": payload.aniversario},
                )
            aniversario = birthday.isoformat()

        return {
            "nome": payload.nome.strip(),
            "telefone": payload.telefone or "",
            "email": payload.email or "",
            "aniversario": aniversario,
            "observacoes": payload.observacoes or "",
        }

    @staticmethod
    def list_clients() -> list[dict[str, Any]]:
        """List every client ordered by name."""
        try:
            return SupabaseClient.fetch_rows(TABLE, columns=LIST_COLUMNS, order_by=["nome"])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar os clientes") from e

    @staticmethod
    def get_client(client_id: Any) -> dict[str, Any]:
        """
        Get a client by id.

        Raises:
            ValidationError: If the id isn't numeric
            NotFoundError: If no client has this id
        """
        row_id = require_id(client_id)

        try:
            client = SupabaseClient.fetch_one(TABLE, filters=[("eq", ID_COLUMN, row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar cliente") from e

        if not client:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})
        return client

    @staticmethod
    def search_clients(term: str) -> list[dict[str, Any]]:
        """
        Case-insensitive substring search over name, phone and e-mail.

        Returns at most 20 clients ordered by name. A term with nothing left
        after dropping PostgREST syntax characters matches no one.
        """
        if not clean_search_term(term):
            return []

        try:
            return SupabaseClient.fetch_rows(
                TABLE,
                search=(SEARCH_COLUMNS, term),
                order_by=["nome"],
                limit=SEARCH_LIMIT,
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro na busca") from e

    @staticmethod
    def create_client(payload: ClientPayload) -> dict[str, Any]:
        """
        Create a client.

        Returns:
            The stored row, including the generated id_cliente
        """
        row = ClientService._build_row(payload)

        try:
            client = SupabaseClient.insert_row(TABLE, row)
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao criar o cliente") from e

        logger.info(f"Created client: {client.get(ID_COLUMN)}")
        return client

    @staticmethod
    def update_client(client_id: Any, payload: ClientPayload) -> dict[str, Any]:
        """
        Replace a client's fields.

        Raises:
            ValidationError: If the id or body is invalid
            NotFoundError: If no client has this id
        """
        row_id = require_id(client_id)
        row = ClientService._build_row(payload)

        try:
            updated = SupabaseClient.update_rows(TABLE, row, filters=[("eq", ID_COLUMN, row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao atualizar dados do cliente") from e

        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Updated client: {row_id}")
        return updated[0]

    @staticmethod
    def delete_client(client_id: Any) -> None:
        """
        Delete a client.

        Raises:
            NotFoundError: If no client has this id
            ReferentialConflictError: If appointments still reference the client
        """
        row_id = require_id(client_id)

        try:
            deleted = SupabaseClient.delete_rows(TABLE, filters=[("eq", ID_COLUMN, row_id)])
        except SupabaseClientError as e:
            if e.is_foreign_key_violation:
                raise ReferentialConflictError(
                    "Não é possível excluir cliente com agendamentos ativos",
                    details={"id": row_id},
                ) from e
            raise store_failure(e, "Erro ao deletar cliente") from e

        if not deleted:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Deleted client: {row_id}")
