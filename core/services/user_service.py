# =============================================================================
# core/services/user_service.py - User Data Access
# =============================================================================
# Thin data access for the `usuario` table. Separates HTTP concerns from
# database calls: handlers validate and hash, this service only reads and
# writes rows.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from lib.supabase_client import TableStore
from core.models.results import StoreResult
from core.models.user import (
    USER_DETAIL_COLUMNS,
    USER_ID_COLUMN,
    USER_LIST_COLUMNS,
    USER_TABLE,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user records.

    Provides a clean interface between resource handlers and the store.
    """

    def __init__(self, client: Client):
        self.store = TableStore(client, USER_TABLE, USER_ID_COLUMN)

    def get_all(self) -> StoreResult:
        """List every user (without role or password)."""
        return self.store.fetch_all(USER_LIST_COLUMNS)

    def find(self, user_id: int) -> StoreResult:
        """Fetch one user's public fields."""
        return self.store.fetch_one(user_id, USER_DETAIL_COLUMNS)

    def find_credentials(self, email: str) -> StoreResult:
        """
        Fetch id, role and password hash for a login email.

        Only the auth handler uses this; the hash never leaves the server.
        """
        return self.store.fetch_by("correo", email, "id_usuario, correo, rol, password")

    def create(self, data: dict[str, Any]) -> StoreResult:
        """
        Insert a user and return its public fields.

        Args:
            data: Validated row; the password must already be hashed
        """
        result = self.store.insert(data)
        if not result.ok:
            return result

        new_id = result.data.get(USER_ID_COLUMN)
        logger.info(f"Created user: {new_id}")
        created = self.find(new_id)
        if created.ok:
            return created
        # Row was written but can't be read back
        return StoreResult.store_error(f"Created user {new_id} could not be fetched")

    def update(self, user_id: int, changes: dict[str, Any]) -> StoreResult:
        """Apply a partial update; not_found when no row has `user_id`."""
        return self.store.update(user_id, changes)

    def delete(self, user_id: int) -> StoreResult:
        """Delete a user; not_found when no row was removed."""
        return self.store.delete(user_id)
