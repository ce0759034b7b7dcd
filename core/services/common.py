# =============================================================================
# core/services/common.py - Helpers Shared by Services
# =============================================================================

import logging
from typing import Any

from app.exceptions import StoreError, ValidationError
from lib.supabase_client import SupabaseClientError
from lib.utils import parse_id

logger = logging.getLogger(__name__)


def require_id(value: Any) -> int:
    """
    Parse a row id from a path parameter.

    Raises:
        ValidationError: If the value isn't a positive integer
    """
    row_id = parse_id(value)
    if row_id is None:
        raise ValidationError("ID inválido", details={"id": str(value)})
    return row_id


def store_failure(error: SupabaseClientError, message: str) -> StoreError:
    """
    Log an unclassified store error and build the StoreError to raise.

    Usage:
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar clientes") from e
    """
    logger.error(f"{message}: {error}")
    return StoreError(message)
