# =============================================================================
# tests/test_store.py - Table Store and Service Tests
# =============================================================================
# Tests for lib/supabase_client.TableStore and the data services:
# - Tagged results (success / not_found / store_error)
# - Store exceptions are logged, never raised
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import Settings
from core.models.results import StoreOutcome
from core.services.product_service import ProductService
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClientError, TableStore, create_supabase_client


@pytest.fixture
def store(fake_db):
    return TableStore(fake_db, "usuario", "id_usuario")


class TestTableStore:
    """Test TableStore results."""

    def test_fetch_all_empty(self, store):
        result = store.fetch_all()

        assert result.outcome is StoreOutcome.SUCCESS
        assert result.data == []

    def test_insert_returns_generated_id(self, store):
        result = store.insert({"nombre": "a"})

        assert result.ok
        assert result.data["id_usuario"] == 1

    def test_fetch_one_not_found(self, store):
        assert store.fetch_one(9).outcome is StoreOutcome.NOT_FOUND

    def test_fetch_one_projects_columns(self, store):
        store.insert({"nombre": "a", "password": "hash"})

        result = store.fetch_one(1, "id_usuario, nombre")

        assert result.data == {"id_usuario": 1, "nombre": "a"}

    def test_update_not_found(self, store):
        assert store.update(5, {"nombre": "b"}).outcome is StoreOutcome.NOT_FOUND

    def test_update_without_values_is_error(self, store, fake_db):
        result = store.update(1, {})

        assert result.outcome is StoreOutcome.STORE_ERROR
        assert fake_db.calls == []

    def test_delete_then_not_found(self, store):
        store.insert({"nombre": "a"})

        assert store.delete(1).ok
        assert store.delete(1).outcome is StoreOutcome.NOT_FOUND

    def test_exceptions_become_store_error(self, store, fake_db, caplog):
        fake_db.fail = True

        result = store.fetch_all()

        assert result.outcome is StoreOutcome.STORE_ERROR
        assert "connection refused" in result.error
        assert any("fetch_all failed" in r.getMessage() for r in caplog.records)

    def test_insert_without_data_is_error(self):
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.return_value.data = []

        result = TableStore(client, "usuario", "id_usuario").insert({"nombre": "a"})

        assert result.outcome is StoreOutcome.STORE_ERROR


class TestServices:
    """Test the thin data services."""

    def test_user_create_reads_back_public_fields(self, fake_db):
        users = UserService(fake_db)

        result = users.create({"nombre": "a", "correo": "a@b.c", "rol": 2, "password": "hash"})

        assert result.ok
        assert "password" not in result.data
        assert result.data["rol"] == 2

    def test_user_find_credentials(self, fake_db):
        users = UserService(fake_db)
        users.create({"nombre": "a", "correo": "a@b.c", "rol": 2, "password": "hash"})

        assert users.find_credentials("a@b.c").data["password"] == "hash"
        assert users.find_credentials("x@b.c").outcome is StoreOutcome.NOT_FOUND

    def test_product_service_table(self, fake_db):
        products = ProductService(fake_db)
        products.create({"name": "lamp"})

        assert "productos" in fake_db.tables
        assert products.find(1).data["name"] == "lamp"


class TestClientFactory:
    """Test create_supabase_client()."""

    def test_wraps_creation_errors(self):
        settings = Settings(SECRET_KEY="s", SUPABASE_URL="https://x.supabase.co", SUPABASE_SERVICE_KEY="k")

        with patch("lib.supabase_client.create_client", side_effect=Exception("bad key")):
            with pytest.raises(SupabaseClientError) as exc:
                create_supabase_client(settings)

        assert "bad key" in str(exc.value)
        assert "SUPABASE_SERVICE_KEY" in str(exc.value)
