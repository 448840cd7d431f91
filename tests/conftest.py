# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - In-memory stand-in for the Supabase client (no network, no database)
# - A fresh app + TestClient per test with the fake store injected
# =============================================================================

import os
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds the module-level app (and its Settings) at import time

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_supabase_client
from app.main import create_app


TEST_SECRET = "test-secret-key"


# =============================================================================
# Fake Supabase client
# =============================================================================
# Implements the slice of the postgrest query builder the services use:
#   client.table(t).select(cols).eq(col, v).limit(n).execute()
#   client.table(t).insert(row).execute()
#   client.table(t).update(values).eq(col, v).execute()
#   client.table(t).delete().eq(col, v).execute()

class FakeResponse:
    def __init__(self, data: list[dict[str, Any]]):
        self.data = data


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.action = "select"
        self.columns = "*"
        self.payload: dict[str, Any] | None = None
        self.filters: list[tuple[str, Any]] = []
        self.max_rows: int | None = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self.action = "select"
        self.columns = columns
        return self

    def insert(self, row: dict[str, Any]) -> "FakeQuery":
        self.action = "insert"
        self.payload = row
        return self

    def update(self, values: dict[str, Any]) -> "FakeQuery":
        self.action = "update"
        self.payload = values
        return self

    def delete(self) -> "FakeQuery":
        self.action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.max_rows = count
        return self

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table, self.action))
        if self.db.fail:
            raise RuntimeError("connection refused: store is down")

        rows = self.db.tables.setdefault(self.table, [])
        matched = [r for r in rows if all(str(r.get(c)) == str(v) for c, v in self.filters)]

        if self.action == "select":
            found = [self._project(r) for r in matched]
            return FakeResponse(found[: self.max_rows] if self.max_rows else found)

        if self.action == "insert":
            id_column = self.db.id_columns[self.table]
            self.db.next_id[self.table] = self.db.next_id.get(self.table, 0) + 1
            row = deepcopy(self.payload)
            row[id_column] = self.db.next_id[self.table]
            row.setdefault("fecha", datetime.now(timezone.utc).isoformat())
            rows.append(row)
            return FakeResponse([deepcopy(row)])

        if self.action == "update":
            for r in matched:
                r.update(self.payload)
            return FakeResponse([deepcopy(r) for r in matched])

        # delete
        self.db.tables[self.table] = [r for r in rows if r not in matched]
        return FakeResponse([deepcopy(r) for r in matched])

    def _project(self, row: dict[str, Any]) -> dict[str, Any]:
        if self.columns.strip() == "*":
            return deepcopy(row)
        names = [c.strip() for c in self.columns.split(",")]
        return {n: row.get(n) for n in names}


class FakeSupabase:
    """In-memory tables keyed by name; set `fail = True` to make every query raise."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.id_columns = {"usuario": "id_usuario", "productos": "id_productos"}
        self.next_id: dict[str, int] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail = False

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(SECRET_KEY=TEST_SECRET, TOKEN_TTL_SECONDS=3600)


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def app(settings, fake_db):
    """Fresh application with the fake store injected."""
    application = create_app(settings)
    application.dependency_overrides[get_supabase_client] = lambda: fake_db
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def token_service(app):
    return app.state.token_service


@pytest.fixture
def auth_headers(token_service) -> dict[str, str]:
    """Authorization header carrying a valid token for user 1."""
    token = token_service.issue({"user_id": 1})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Complete payload for POST ?route=user."""
    return {
        "nombre": "Ada Lovelace",
        "dni": "12345678A",
        "correo": "ada@example.com",
        "rol": 1,
        "password": "analytical-engine",
    }


@pytest.fixture
def sample_product() -> dict[str, Any]:
    """Complete payload for POST ?route=product."""
    return {
        "name": "Desk Lamp",
        "description": "LED lamp with adjustable arm",
        "stock": 12,
        "url": "https://example.com/lamp",
        "imageName": "lamp.png",
    }
