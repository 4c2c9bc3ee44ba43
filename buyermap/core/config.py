"""
Configuration management for BuyerMap
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env(name: str) -> Optional[str]:
    """Read an environment variable, treating empty strings as unset."""
    value = os.getenv(name)
    return value if value else None


@dataclass(frozen=True)
class Config:
    """
    Application configuration.

    Built from the process environment at the time it is needed and passed
    explicitly to handlers and services. Nothing here is mutated after
    construction.
    """

    # Beta gate
    beta_access_password: Optional[str] = None

    # Slack
    slack_webhook_url: Optional[str] = None

    # Supabase
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_service_key: Optional[str] = None

    # API
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a Config from the current process environment."""
        origins = _env("CORS_ORIGINS") or "*"
        return cls(
            beta_access_password=_env("BETA_ACCESS_PASSWORD"),
            slack_webhook_url=_env("SLACK_WEBHOOK_URL"),
            supabase_url=_env("SUPABASE_URL"),
            supabase_anon_key=_env("SUPABASE_ANON_KEY"),
            supabase_service_key=_env("SUPABASE_SERVICE_KEY"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def supabase_key(self) -> Optional[str]:
        """Service key when available, otherwise the public anon key."""
        return self.supabase_service_key or self.supabase_anon_key

    def validate_supabase(self) -> bool:
        """Validate required Supabase configuration"""
        required = {
            'SUPABASE_URL': self.supabase_url,
            'SUPABASE_SERVICE_KEY or SUPABASE_ANON_KEY': self.supabase_key,
        }

        missing = [k for k, v in required.items() if not v]

        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        return True

    def summary(self) -> dict:
        """Which settings are present, without exposing their values."""
        return {
            'BETA_ACCESS_PASSWORD': self.beta_access_password is not None,
            'SLACK_WEBHOOK_URL': self.slack_webhook_url is not None,
            'SUPABASE_URL': self.supabase_url is not None,
            'SUPABASE_ANON_KEY': self.supabase_anon_key is not None,
            'SUPABASE_SERVICE_KEY': self.supabase_service_key is not None,
        }


def get_config() -> Config:
    """
    Read configuration for the current request.

    Used as a FastAPI dependency; tests replace it through
    ``app.dependency_overrides``.
    """
    return Config.from_env()
