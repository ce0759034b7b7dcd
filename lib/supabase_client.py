# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase table operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes generic, table-oriented methods:
# - fetch_rows / fetch_one: filtered reads with ordering and limit
# - count_rows: exact row counts
# - insert_row / update_rows / delete_rows: writes returning the touched rows
#
# Every failure is raised as SupabaseClientError whose `code` is the
# PostgREST/Postgres error code when the server sent one, so callers can tell
# "not found", "unique violation" and "foreign key violation" apart.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   rows = SupabaseClient.fetch_rows("clientes", order_by=["nome"])
# =============================================================================

from __future__ import annotations

import logging
import re
import time
from collections.abc import Sequence
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client, ClientOptions

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST / Postgres error codes we care about
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# A filter is (operator, column, value). "not_null" ignores the value.
Filter = tuple[str, str, Any]

_FILTER_OPERATORS = {"eq", "neq", "gt", "gte", "lt", "lte", "ilike", "not_null"}

# Characters with meaning inside a PostgREST or=(...) expression
_SEARCH_UNSAFE = re.compile(r"[,()%*\\]")


def clean_search_term(term: str) -> str:
    """Drop characters that would break out of an or=() expression."""
    return _SEARCH_UNSAFE.sub(" ", term).strip()


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    `code` carries the PostgREST/Postgres error code (e.g. "23505") when the
    server reported one, otherwise one of our own codes.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result

    @property
    def is_unique_violation(self) -> bool:
        return self.code == UNIQUE_VIOLATION

    @property
    def is_foreign_key_violation(self) -> bool:
        return self.code == FOREIGN_KEY_VIOLATION


class SupabaseClient:
    """
    Typed wrapper for Supabase table operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Today's appointments ordered by time
        rows = SupabaseClient.fetch_rows(
            "agendamentos",
            filters=[("eq", "data", "2024-01-10")],
            order_by=["horario"],
        )

        # Insert returns the stored row
        client = SupabaseClient.insert_row("clientes", {"nome": "Ana"})
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY,
                    options=ClientOptions(
                        postgrest_client_timeout=settings.SUPABASE_TIMEOUT_SECONDS,
                    ),
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Query Helpers
    # -------------------------------------------------------------------------

    @classmethod
    def _apply_filters(cls, query: Any, filters: Sequence[Filter] | None) -> Any:
        """Chain (operator, column, value) filters onto a query builder."""
        for operator, column, value in filters or ():
            if operator not in _FILTER_OPERATORS:
                raise ValueError(f"Unsupported filter operator: {operator}")
            if operator == "not_null":
                query = query.not_.is_(column, "null")
            else:
                query = getattr(query, operator)(column, value)
        return query

    @classmethod
    def _search_expression(cls, columns: Sequence[str], term: str) -> str:
        """
        Build a PostgREST or=() expression matching `term` in any column.

        Example: (["nome", "email"], "ana") -> "nome.ilike.%ana%,email.ilike.%ana%"
        """
        clean = clean_search_term(term)
        return ",".join(f"{column}.ilike.%{clean}%" for column in columns)

    @classmethod
    def _execute(
        cls,
        query: Any,
        operation: str,
        table: str,
        retry: bool = True,
    ) -> Any:
        """
        Execute a built query, translating failures to SupabaseClientError.

        Transport failures (timeouts, dropped connections) are retried with
        exponential backoff when `retry` is set. Errors reported by the server
        are never retried.
        """
        attempts = settings.SUPABASE_MAX_RETRIES + 1 if retry else 1

        for attempt in range(attempts):
            try:
                return query.execute()

            except APIError as e:
                raise SupabaseClientError(
                    message=f"Failed to {operation} {table}: {e.message}",
                    code=e.code or "SUPABASE_ERROR",
                    details={"table": table, "hint": e.hint, "details": e.details},
                )

            except httpx.TransportError as e:
                if attempt + 1 >= attempts:
                    raise SupabaseClientError(
                        message=f"Failed to {operation} {table}: {e}",
                        code="STORE_UNAVAILABLE",
                        suggestion="Check network access to SUPABASE_URL",
                        details={"table": table, "attempts": attempt + 1},
                    )
                delay = settings.SUPABASE_RETRY_DELAY_SECONDS * (2 ** attempt)
                logger.warning(
                    f"Transient error on {operation} {table} "
                    f"(attempt {attempt + 1}/{attempts}), retrying in {delay:.2f}s: {e}"
                )
                time.sleep(delay)

            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to {operation} {table}: {e}",
                    details={"table": table},
                )

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        columns: str = "*",
        filters: Sequence[Filter] | None = None,
        search: tuple[Sequence[str], str] | None = None,
        order_by: Sequence[str] = (),
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name
            columns: PostgREST select expression (may embed related tables)
            filters: (operator, column, value) tuples, all of which must match
            search: (columns, term) case-insensitive substring match on any column
            order_by: Columns to sort by, in priority order
            limit: Maximum number of rows

        Returns:
            List of row dicts (empty when nothing matches)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        query = client.table(table).select(columns)
        query = cls._apply_filters(query, filters)
        if search:
            query = query.or_(cls._search_expression(*search))
        for column in order_by:
            query = query.order(column)
        if limit is not None:
            query = query.limit(limit)

        response = cls._execute(query, "fetch", table)
        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {table}")
        return rows

    @classmethod
    def fetch_one(
        cls,
        table: str,
        filters: Sequence[Filter],
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch the first row matching `filters`, or None if there is none.
        """
        rows = cls.fetch_rows(table, columns=columns, filters=filters, limit=1)
        return rows[0] if rows else None

    @classmethod
    def count_rows(
        cls,
        table: str,
        filters: Sequence[Filter] | None = None,
    ) -> int:
        """Count rows matching `filters` without transferring them."""
        client = cls.get_client()

        query = client.table(table).select("*", count="exact", head=True)
        query = cls._apply_filters(query, filters)

        response = cls._execute(query, "count", table)
        return response.count or 0

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, values: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it as stored (with generated id).

        Inserts are not retried: a retry after a lost response could
        store the row twice.

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        response = cls._execute(
            client.table(table).insert(values),
            "insert into",
            table,
            retry=False,
        )

        if response.data:
            return response.data[0]
        raise SupabaseClientError(
            message=f"Insert into {table} returned no data",
            code="INSERT_NO_DATA",
            details={"table": table},
        )

    @classmethod
    def update_rows(
        cls,
        table: str,
        values: dict[str, Any],
        filters: Sequence[Filter],
    ) -> list[dict[str, Any]]:
        """
        Update rows matching `filters` and return them after the update.

        An empty list means no row matched.
        """
        client = cls.get_client()

        query = cls._apply_filters(client.table(table).update(values), filters)
        response = cls._execute(query, "update", table)
        return response.data or []

    @classmethod
    def delete_rows(
        cls,
        table: str,
        filters: Sequence[Filter],
    ) -> list[dict[str, Any]]:
        """
        Delete rows matching `filters` and return the deleted rows.

        An empty list means no row matched.
        """
        client = cls.get_client()

        query = cls._apply_filters(client.table(table).delete(), filters)
        response = cls._execute(query, "delete from", table)
        return response.data or []
