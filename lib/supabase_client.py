# =============================================================================
# lib/supabase_client.py - Supabase Table Access
# =============================================================================
# This module wraps a Supabase client for the CRUD calls the data services
# make. All filters go through PostgREST query parameters, so user input is
# never concatenated into SQL.
#
# One Client is created per application (see app/dependencies.py) and passed
# in explicitly; there is no module-level singleton.
#
# Store failures are logged and turned into StoreResult.store_error(); they
# are never raised to the handlers.
#
# Usage:
#   store = TableStore(client, "usuario", "id_usuario")
#   result = store.fetch_one(7, columns="id_usuario, nombre")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import Settings
from core.models.results import StoreResult

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while creating the Supabase client.

    Raised only at client construction; query failures are reported through
    StoreResult instead.
    """

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = self.message
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client from settings.

    Uses the service_role key, which bypasses Row Level Security (RLS).
    This is appropriate for server-side operations.

    Raises:
        SupabaseClientError: If client creation fails
    """
    try:
        client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
    except Exception as e:
        raise SupabaseClientError(
            f"Failed to create Supabase client: {e}",
            suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
        ) from e
    logger.info("Supabase client initialized successfully")
    return client


class TableStore:
    """
    CRUD access to one table keyed by an integer primary key.

    Every method returns a StoreResult:
    - fetch_all: success with a (possibly empty) list
    - fetch_one / insert / update / delete: success with the row, or
      not_found when no row matched
    """

    def __init__(self, client: Client, table: str, id_column: str):
        self.client = client
        self.table = table
        self.id_column = id_column

    def fetch_all(self, columns: str = "*") -> StoreResult:
        try:
            response = self.client.table(self.table).select(columns).execute()
        except Exception as e:
            return self._failed("fetch_all", e)
        return StoreResult.success(response.data or [])

    def fetch_one(self, record_id: int, columns: str = "*") -> StoreResult:
        try:
            response = (
                self.client.table(self.table)
                .select(columns)
                .eq(self.id_column, record_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            return self._failed("fetch_one", e, record_id)
        return self._first_row(response.data)

    def fetch_by(self, column: str, value: Any, columns: str = "*") -> StoreResult:
        """Fetch the first row where `column` equals `value`."""
        try:
            response = (
                self.client.table(self.table)
                .select(columns)
                .eq(column, value)
                .limit(1)
                .execute()
            )
        except Exception as e:
            return self._failed("fetch_by", e)
        return self._first_row(response.data)

    def insert(self, row: dict[str, Any]) -> StoreResult:
        """Insert a row and return it as stored (including its generated id)."""
        try:
            response = self.client.table(self.table).insert(row).execute()
        except Exception as e:
            return self._failed("insert", e)

        if not response.data:
            return StoreResult.store_error("Insert returned no data")
        logger.info(f"Inserted into {self.table}: {response.data[0].get(self.id_column)}")
        return StoreResult.success(response.data[0])

    def update(self, record_id: int, values: dict[str, Any]) -> StoreResult:
        if not values:
            return StoreResult.store_error("No fields to update")
        try:
            response = (
                self.client.table(self.table)
                .update(values)
                .eq(self.id_column, record_id)
                .execute()
            )
        except Exception as e:
            return self._failed("update", e, record_id)
        return self._first_row(response.data)

    def delete(self, record_id: int) -> StoreResult:
        try:
            response = (
                self.client.table(self.table)
                .delete()
                .eq(self.id_column, record_id)
                .execute()
            )
        except Exception as e:
            return self._failed("delete", e, record_id)
        return self._first_row(response.data)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _first_row(rows: list[dict[str, Any]] | None) -> StoreResult:
        if not rows:
            return StoreResult.not_found()
        return StoreResult.success(rows[0])

    def _failed(self, operation: str, error: Exception, record_id: int | None = None) -> StoreResult:
        target = f"{self.table}/{record_id}" if record_id is not None else self.table
        logger.error(f"Store {operation} failed on {target}: {error}")
        return StoreResult.store_error(str(error))
