# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for the `user` resource:
# - UserCreate: Body of POST ?route=user (every field required)
# - UserUpdate: Body of PUT ?route=user/{id} (partial, fixed field set)
#
# Field names match the columns of the `usuario` table. Keys that are not
# part of a model are ignored, so clients can't write arbitrary columns.
# Numbers sent for text columns (a numeric dni) are stored as strings.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


USER_TABLE = "usuario"
USER_ID_COLUMN = "id_usuario"

# Columns returned when listing users / fetching a single user.
# The password hash is never selected.
USER_LIST_COLUMNS = "id_usuario, nombre, correo, fecha"
USER_DETAIL_COLUMNS = "id_usuario, nombre, correo, rol, fecha"


class UserCreate(BaseModel):
    """
    Schema for creating a user.

    Example:
        {
            "nombre": "Ada Lovelace",
            "dni": "12345678A",
            "correo": "ada@example.com",
            "rol": 1,
            "password": "s3cret"
        }
    """
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    nombre: str = Field(..., description="Full name")
    dni: str = Field(..., description="National identity document number")
    correo: str = Field(..., description="Email address, used to log in")
    rol: int = Field(..., description="Role identifier")
    password: str = Field(..., description="Plain-text password (hashed before storage)")


class UserUpdate(BaseModel):
    """Schema for a partial user update. Only set fields are written."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    nombre: str | None = None
    dni: str | None = None
    correo: str | None = None
    rol: int | None = None
    password: str | None = None

    def changes(self) -> dict:
        """Fields the client actually sent with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
