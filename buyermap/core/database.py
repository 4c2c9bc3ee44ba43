"""
Database client and utilities
"""

from typing import Optional
from supabase import create_client, Client
from .config import Config


_supabase_client: Optional[Client] = None


def get_supabase_client(config: Optional[Config] = None) -> Client:
    """
    Get or create Supabase client (singleton pattern)

    Args:
        config: Settings to build the client from (defaults to the environment)

    Returns:
        Supabase client instance
    """
    global _supabase_client

    if _supabase_client is None:
        config = config or Config.from_env()
        config.validate_supabase()
        _supabase_client = create_client(
            config.supabase_url,
            config.supabase_key
        )

    return _supabase_client


def reset_supabase_client():
    """Reset the Supabase client (useful for testing)"""
    global _supabase_client
    _supabase_client = None
