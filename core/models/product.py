# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for the `product` resource:
# - ProductCreate: Body of POST ?route=product
# - ProductUpdate: Body of PUT ?route=product/{id}
#
# The `productos` table uses camelCase columns for two fields; the models
# expose snake_case attributes and keep the column names as aliases.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


PRODUCT_TABLE = "productos"
PRODUCT_ID_COLUMN = "id_productos"
PRODUCT_COLUMNS = "id_productos, name, description, stock, url, imageName"


class ProductCreate(BaseModel):
    """
    Schema for creating a product.

    `IDtoken` records who created the product; when omitted the handler
    fills it from the caller's token.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    name: str
    description: str
    stock: int = Field(..., ge=0)
    url: str
    image_name: str = Field(..., alias="imageName")
    id_token: str | None = Field(default=None, alias="IDtoken")

    def to_row(self) -> dict:
        return self.model_dump(by_alias=True)


class ProductUpdate(BaseModel):
    """Schema for a partial product update."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    name: str | None = None
    description: str | None = None
    stock: int | None = Field(default=None, ge=0)
    url: str | None = None
    image_name: str | None = Field(default=None, alias="imageName")
    id_token: str | None = Field(default=None, alias="IDtoken")

    def changes(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
