# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - InMemoryStore: a stand-in for the Supabase tables that enforces the same
#   unique and foreign-key constraints and reports the same error codes
# - `api` fixture: FastAPI TestClient wired to the in-memory store
# =============================================================================

import copy
import os
from datetime import date

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SALON_TIMEZONE", "UTC")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    SupabaseClient,
    SupabaseClientError,
)

FIXED_TODAY = date(2024, 1, 10)


# =============================================================================
# In-memory store
# =============================================================================

class InMemoryStore:
    """
    Dict-backed tables with the constraints of supabase/schema.sql.

    Implements the primitives of SupabaseClient (fetch_rows, count_rows,
    insert_row, update_rows, delete_rows) with the same signatures.
    Column projections are ignored: rows always come back whole.
    """

    PRIMARY_KEYS = {
        "clientes": "id_cliente",
        "servicos": "id",
        "agendamentos": "id",
        "usuarios": "id",
    }

    UNIQUE = {
        "agendamentos": [("data", "horario")],
        "usuarios": [("usuario",)],
    }

    # (table, column) -> (referenced table, referenced column)
    FOREIGN_KEYS = {
        ("agendamentos", "cliente_id"): ("clientes", "id_cliente"),
    }

    def __init__(self):
        self.tables: dict[str, list[dict]] = {name: [] for name in self.PRIMARY_KEYS}
        self._next_id = {name: 1 for name in self.PRIMARY_KEYS}
        self.error: SupabaseClientError | None = None
        self.calls: list[str] = []

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def seed(self, table: str, **values) -> dict:
        """Insert a row directly, bypassing constraints."""
        row = dict(values)
        pk = self.PRIMARY_KEYS[table]
        if pk not in row:
            row[pk] = self._next_id[table]
        self._next_id[table] = max(self._next_id[table], row[pk] + 1)
        self.tables[table].append(row)
        return copy.deepcopy(row)

    def _check_error(self, operation: str) -> None:
        self.calls.append(operation)
        if self.error is not None:
            raise self.error

    @staticmethod
    def _matches(row: dict, filters) -> bool:
        for operator, column, value in filters or ():
            current = row.get(column)
            if operator == "eq" and current != value:
                return False
            if operator == "neq" and current == value:
                return False
            if operator == "not_null" and current is None:
                return False
        return True

    def _check_constraints(self, table: str, row: dict, ignore_pk=None) -> None:
        pk = self.PRIMARY_KEYS[table]
        for columns in self.UNIQUE.get(table, []):
            key = tuple(row.get(c) for c in columns)
            for other in self.tables[table]:
                if other[pk] == ignore_pk:
                    continue
                if tuple(other.get(c) for c in columns) == key:
                    raise SupabaseClientError(
                        message=f"duplicate key value violates unique constraint on {table}",
                        code=UNIQUE_VIOLATION,
                    )
        for (fk_table, column), (ref_table, ref_column) in self.FOREIGN_KEYS.items():
            if fk_table != table or row.get(column) is None:
                continue
            if not any(r.get(ref_column) == row[column] for r in self.tables[ref_table]):
                raise SupabaseClientError(
                    message=f"insert or update on {table} violates foreign key constraint",
                    code=FOREIGN_KEY_VIOLATION,
                )

    def _embed(self, table: str, row: dict, columns: str) -> dict:
        if table == "agendamentos" and "clientes (" in columns:
            client = next(
                (c for c in self.tables["clientes"] if c["id_cliente"] == row.get("cliente_id")),
                None,
            )
            row["clientes"] = (
                {"nome": client["nome"], "telefone": client.get("telefone")} if client else None
            )
        return row

    # -------------------------------------------------------------------------
    # SupabaseClient primitives
    # -------------------------------------------------------------------------

    def fetch_rows(self, table, columns="*", filters=None, search=None,
                   order_by=(), limit=None):
        self._check_error("fetch")
        rows = [r for r in self.tables[table] if self._matches(r, filters)]
        if search:
            search_columns, term = search
            needle = term.lower()
            rows = [
                r for r in rows
                if any(needle in str(r.get(c) or "").lower() for c in search_columns)
            ]
        if order_by:
            rows = sorted(
                rows,
                key=lambda r: tuple(str(r.get(c) or "") for c in order_by),
            )
        if limit is not None:
            rows = rows[:limit]
        return [self._embed(table, copy.deepcopy(r), columns) for r in rows]

    def count_rows(self, table, filters=None):
        self._check_error("count")
        return sum(1 for r in self.tables[table] if self._matches(r, filters))

    def insert_row(self, table, values):
        self._check_error("insert")
        row = dict(values)
        self._check_constraints(table, row)
        pk = self.PRIMARY_KEYS[table]
        row[pk] = self._next_id[table]
        self._next_id[table] += 1
        self.tables[table].append(row)
        return copy.deepcopy(row)

    def update_rows(self, table, values, filters):
        self._check_error("update")
        pk = self.PRIMARY_KEYS[table]
        targets = [r for r in self.tables[table] if self._matches(r, filters)]
        for row in targets:
            self._check_constraints(table, {**row, **values}, ignore_pk=row[pk])
        for row in targets:
            row.update(values)
        return copy.deepcopy(targets)

    def delete_rows(self, table, filters):
        self._check_error("delete")
        pk = self.PRIMARY_KEYS[table]
        targets = [r for r in self.tables[table] if self._matches(r, filters)]
        for row in targets:
            for (fk_table, column), (ref_table, ref_column) in self.FOREIGN_KEYS.items():
                if ref_table != table:
                    continue
                if any(r.get(column) == row.get(ref_column) for r in self.tables[fk_table]):
                    raise SupabaseClientError(
                        message=f"update or delete on {table} violates foreign key constraint",
                        code=FOREIGN_KEY_VIOLATION,
                    )
        doomed = {row[pk] for row in targets}
        self.tables[table] = [r for r in self.tables[table] if r[pk] not in doomed]
        return copy.deepcopy(targets)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store(monkeypatch):
    """Replace the SupabaseClient primitives with an in-memory store."""
    fake = InMemoryStore()
    for name in ("fetch_rows", "count_rows", "insert_row", "update_rows", "delete_rows"):
        monkeypatch.setattr(SupabaseClient, name, getattr(fake, name))
    return fake


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin "today" to 2024-01-10 for the services that depend on it."""
    monkeypatch.setattr("core.services.appointment_service.today", lambda: FIXED_TODAY)
    monkeypatch.setattr("core.services.dashboard_service.today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def api(store):
    """FastAPI TestClient backed by the in-memory store."""
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_client(store):
    """A stored client."""
    return store.seed(
        "clientes",
        nome="Ana Souza",
        telefone="(11) 98888-7777",
        email="ana@example.com",
        aniversario="1990-01-10",
        observacoes="",
    )


@pytest.fixture
def sample_services(store):
    """A small catalog across all three categories."""
    return [
        store.seed("servicos", nome="Corte feminino", descricao="Corte e finalização",
                   preco=80.0, duracao_minutos=60, categoria="cabelo", popular=True),
        store.seed("servicos", nome="Manicure", descricao="Mãos",
                   preco=35.5, duracao_minutos=40, categoria="unhas", popular=False),
        store.seed("servicos", nome="Limpeza de pele", descricao="Facial",
                   preco=120.0, duracao_minutos=90, categoria="estetica", popular=True),
    ]
