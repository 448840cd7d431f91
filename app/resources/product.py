# =============================================================================
# app/resources/product.py - Product Resource
# =============================================================================
# ?route=product          GET (list), POST (create)
# ?route=product/{id}     GET (one), PUT (partial update), DELETE
#
# Reads are public. Writes require a valid bearer token; the token's
# user_id is recorded in IDtoken when the client doesn't send one.
# =============================================================================

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from supabase import Client

from app.resources.base import CrudHandler
from core.models.product import ProductCreate, ProductUpdate
from core.services.product_service import ProductService


class ProductHandler(CrudHandler):
    """Handler for the `product` resource."""

    label = "Product"
    create_model = ProductCreate
    update_model = ProductUpdate
    required_fields_message = (
        "Incomplete data. 'name', 'description', 'stock', 'url' and 'imageName' are required."
    )

    def build_service(self, client: Client) -> ProductService:
        return ProductService(client)

    def post(self) -> JSONResponse:
        self.claims = self.require_claims()
        return super().post()

    def put(self) -> JSONResponse:
        self.require_claims()
        return super().put()

    def delete(self) -> JSONResponse:
        self.require_claims()
        return super().delete()

    def prepare_create(self, payload: BaseModel) -> dict[str, Any]:
        row = payload.to_row()
        if row.get("IDtoken") is None and self.claims.get("user_id") is not None:
            row["IDtoken"] = str(self.claims["user_id"])
        return row
