"""Environment-backed configuration for the investor interest service."""

import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel

from dotenv import load_dotenv

# Load environment variables from .env file (for local development)
load_dotenv()


DEFAULT_NOTIFY_EMAIL = "mike@hodgen.ai"
DEFAULT_FROM_EMAIL = "Listwell <invest@listwell.ai>"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Runtime settings, read once from the environment."""
    resend_api_key: Optional[str] = None
    audience_id: Optional[str] = None
    notify_email: str = DEFAULT_NOTIFY_EMAIL
    notify_email_is_default: bool = True
    from_email: str = DEFAULT_FROM_EMAIL
    allowed_origin: str = "*"
    port: int = DEFAULT_PORT
    public_dir: str = "public"
    rate_limit_max_requests: int = 5
    rate_limit_window_seconds: float = 3600.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, treating empty values as unset."""
        def _env(key: str) -> Optional[str]:
            value = os.environ.get(key, "").strip()
            return value or None

        notify_email = _env("NOTIFY_EMAIL")
        return cls(
            resend_api_key=_env("RESEND_API_KEY"),
            audience_id=_env("RESEND_AUDIENCE_ID"),
            notify_email=notify_email or DEFAULT_NOTIFY_EMAIL,
            notify_email_is_default=notify_email is None,
            from_email=_env("FROM_EMAIL") or DEFAULT_FROM_EMAIL,
            allowed_origin=_env("ALLOWED_ORIGIN") or "*",
            port=int(_env("PORT") or DEFAULT_PORT),
            public_dir=_env("PUBLIC_DIR") or "public",
            rate_limit_max_requests=int(_env("RATE_LIMIT_MAX_REQUESTS") or 5),
            rate_limit_window_seconds=float(_env("RATE_LIMIT_WINDOW_SECONDS") or 3600),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return Settings.from_env()
