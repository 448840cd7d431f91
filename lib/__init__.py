# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# - supabase_client.py: Supabase client factory and table access
# =============================================================================

from lib.supabase_client import SupabaseClientError, TableStore, create_supabase_client

__all__ = [
    "SupabaseClientError",
    "TableStore",
    "create_supabase_client",
]
