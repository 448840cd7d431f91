# =============================================================================
# app/resources/user.py - User Resource
# =============================================================================
# ?route=user          GET (list), POST (create)
# ?route=user/{id}     GET (one), PUT (partial update), DELETE
#
# Passwords are hashed on create and re-hashed whenever an update sends one.
# =============================================================================

from typing import Any

from pydantic import BaseModel
from supabase import Client

from app.resources.base import CrudHandler
from core.models.user import UserCreate, UserUpdate
from core.services.user_service import UserService


class UserHandler(CrudHandler):
    """Handler for the `user` resource."""

    label = "User"
    create_model = UserCreate
    update_model = UserUpdate
    required_fields_message = (
        "Incomplete data. 'nombre', 'dni', 'correo', 'rol' and 'password' are required."
    )

    def build_service(self, client: Client) -> UserService:
        return UserService(client)

    def prepare_create(self, payload: BaseModel) -> dict[str, Any]:
        row = payload.model_dump()
        row["password"] = self.ctx.passwords.hash(row["password"])
        return row

    def prepare_update(self, payload: BaseModel) -> dict[str, Any]:
        changes = payload.changes()
        if "password" in changes:
            changes["password"] = self.ctx.passwords.hash(changes["password"])
        return changes
