# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Settings and the TokenService are built in create_app() and kept on
# app.state; the Supabase client is created on first use and cached there.
# Tests swap any of them with app.dependency_overrides.
# =============================================================================

import json
import logging
from typing import Annotated, Any

from fastapi import Depends, Request
from supabase import Client

from app.auth.passwords import PasswordHasher
from app.auth.tokens import TokenService
from app.config import Settings
from lib.supabase_client import create_supabase_client

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    """Token service bound to the application's secret."""
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_supabase_client(request: Request) -> Client:
    """
    Get the application's Supabase client.

    Created once per application on the first request that needs it.
    """
    client = getattr(request.app.state, "supabase", None)
    if client is None:
        client = create_supabase_client(request.app.state.settings)
        request.app.state.supabase = client
    return client


async def get_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Returns None for an empty body or one that isn't valid JSON; handlers
    treat both as "no data".
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.info(f"Ignoring request body that is not valid JSON: {e}")
        return None


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]
SupabaseDep = Annotated[Client, Depends(get_supabase_client)]
JsonBodyDep = Annotated[Any, Depends(get_json_body)]
