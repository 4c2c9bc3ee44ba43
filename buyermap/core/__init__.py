"""
Core module - Configuration, database client, and observability
"""

from .config import Config, get_config
from .database import get_supabase_client

__all__ = ['Config', 'get_config', 'get_supabase_client']
