# =============================================================================
# core/services/catalog_service.py - Service Catalog Business Logic
# =============================================================================
# CRUD over the salon's service catalog (the `servicos` table), plus the
# "popular" and by-category listings shown on the booking page.
# =============================================================================

import logging
from typing import Any

from app.exceptions import NotFoundError, ReferentialConflictError, ValidationError
from core.models.service import ServiceCategory, ServicePayload
from core.services.common import require_id, store_failure
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import coerce_bool, is_blank

logger = logging.getLogger(__name__)

TABLE = "servicos"

NOT_FOUND_MESSAGE = "Serviço não encontrado"


def validate_category(categoria: str) -> str:
    """
    Check a category against the allowed set.

    Raises:
        ValidationError: Naming the allowed values
    """
    allowed = ServiceCategory.values()
    if categoria not in allowed:
        raise ValidationError(
            f"Categoria inválida. Use: {', '.join(allowed)}",
            details={"categoria": categoria, "allowed": allowed},
        )
    return categoria


class CatalogService:
    """Service for the salon's service catalog."""

    @staticmethod
    def _build_row(payload: ServicePayload) -> dict[str, Any]:
        """
        Validate a service body and build the row to store.

        Raises:
            ValidationError: If a required field is missing or the category is unknown
        """
        missing = [
            field
            for field in ("nome", "descricao", "preco", "duracao_minutos", "categoria")
            if is_blank(getattr(payload, field))
        ]
        if missing:
            raise ValidationError(
                "Nome, descrição, preço, duração e categoria são obrigatórios",
                details={"missing": missing},
            )

        return {
            "nome": payload.nome.strip(),
            "descricao": payload.descricao.strip(),
            "preco": payload.preco,
            "duracao_minutos": payload.duracao_minutos,
            "categoria": validate_category(payload.categoria),
            "popular": coerce_bool(payload.popular),
        }

    @staticmethod
    def list_services() -> list[dict[str, Any]]:
        """List every service ordered by name."""
        try:
            return SupabaseClient.fetch_rows(TABLE, order_by=["nome"])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar os serviços") from e

    @staticmethod
    def list_popular() -> list[dict[str, Any]]:
        """List services flagged as popular, ordered by name."""
        try:
            return SupabaseClient.fetch_rows(
                TABLE,
                filters=[("eq", "popular", True)],
                order_by=["nome"],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar serviços populares") from e

    @staticmethod
    def list_by_category(categoria: str) -> list[dict[str, Any]]:
        """
        List services in one category, ordered by name.

        Raises:
            ValidationError: If the category is unknown
        """
        validate_category(categoria)

        try:
            return SupabaseClient.fetch_rows(
                TABLE,
                filters=[("eq", "categoria", categoria)],
                order_by=["nome"],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar serviços") from e

    @staticmethod
    def get_service(service_id: Any) -> dict[str, Any]:
        """
        Get a service by id.

        Raises:
            ValidationError: If the id isn't numeric
            NotFoundError: If no service has this id
        """
        row_id = require_id(service_id)

        try:
            service = SupabaseClient.fetch_one(TABLE, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar o serviço") from e

        if not service:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})
        return service

    @staticmethod
    def create_service(payload: ServicePayload) -> dict[str, Any]:
        """Create a service and return the stored row."""
        row = CatalogService._build_row(payload)

        try:
            service = SupabaseClient.insert_row(TABLE, row)
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao cadastrar o serviço") from e

        logger.info(f"Created service: {service.get('id')} ({service.get('nome')})")
        return service

    @staticmethod
    def update_service(service_id: Any, payload: ServicePayload) -> dict[str, Any]:
        """
        Replace a service's fields.

        Raises:
            ValidationError: If the id or body is invalid
            NotFoundError: If no service has this id
        """
        row_id = require_id(service_id)
        row = CatalogService._build_row(payload)

        try:
            updated = SupabaseClient.update_rows(TABLE, row, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao atualizar o serviço") from e

        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Updated service: {row_id}")
        return updated[0]

    @staticmethod
    def delete_service(service_id: Any) -> None:
        """
        Delete a service.

        Appointments reference services by name, so the store only blocks
        this delete if a foreign key was added to the schema.

        Raises:
            NotFoundError: If no service has this id
            ReferentialConflictError: If dependent rows block the delete
        """
        row_id = require_id(service_id)

        try:
            deleted = SupabaseClient.delete_rows(TABLE, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            if e.is_foreign_key_violation:
                raise ReferentialConflictError(
                    "Não é possível excluir serviço com agendamentos ativos",
                    details={"id": row_id},
                ) from e
            raise store_failure(e, "Erro ao deletar o serviço") from e

        if not deleted:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Deleted service: {row_id}")
