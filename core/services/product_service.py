# =============================================================================
# core/services/product_service.py - Product Data Access
# =============================================================================
# Thin data access for the `productos` table.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from lib.supabase_client import TableStore
from core.models.results import StoreResult
from core.models.product import PRODUCT_COLUMNS, PRODUCT_ID_COLUMN, PRODUCT_TABLE

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product records."""

    def __init__(self, client: Client):
        self.store = TableStore(client, PRODUCT_TABLE, PRODUCT_ID_COLUMN)

    def get_all(self) -> StoreResult:
        return self.store.fetch_all(PRODUCT_COLUMNS)

    def find(self, product_id: int) -> StoreResult:
        return self.store.fetch_one(product_id, PRODUCT_COLUMNS)

    def create(self, data: dict[str, Any]) -> StoreResult:
        result = self.store.insert(data)
        if result.ok:
            logger.info(f"Created product: {result.data.get(PRODUCT_ID_COLUMN)}")
        return result

    def update(self, product_id: int, changes: dict[str, Any]) -> StoreResult:
        return self.store.update(product_id, changes)

    def delete(self, product_id: int) -> StoreResult:
        return self.store.delete(product_id)
