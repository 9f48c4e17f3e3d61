# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - SUPABASE_URL
      - SUPABASE_KEY (anon key; reads run as the calling admin, so RLS applies)
      - SUPABASE_JWT_SECRET (JWT signing secret from Supabase project settings)

    Optional:
      - AUTH_WAIT_TIMEOUT_MS (how long reports wait for an auth principal)
      - CURRENCY_SYMBOL (prefix for formatted money values)
    """

    PROJECT_NAME: str = "Storefront Admin API"
    API_V1_STR: str = "/api/v1"

    # Supabase config
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # JWT verification (backend-side)
    SUPABASE_JWT_SECRET: str
    SUPABASE_JWT_ALG: str = "HS256"

    # Reports wait this long for the identity provider before giving up
    AUTH_WAIT_TIMEOUT_MS: int = 4000

    CURRENCY_SYMBOL: str = "RM"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:3001",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def auth_wait_timeout(self) -> float:
        """Auth wait timeout in seconds."""
        return self.AUTH_WAIT_TIMEOUT_MS / 1000


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
