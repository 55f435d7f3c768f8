"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Remote content store (Supabase / PostgREST)
    content_store_url: str = ""  # https://<project>.supabase.co
    content_store_key: str = ""
    http_timeout: float = 15.0

    # Localization
    default_locale: str = "pt-BR"
    supported_locales: list[str] = ["pt-BR", "en", "es"]

    # Reading time (average adult reading speed)
    words_per_minute: int = Field(default=200, gt=0)

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
