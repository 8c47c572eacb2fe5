"""
keyword-extraction-service - Application Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix KWX_ for keyword-extraction-service

Anti-Patterns Avoided:
- Settings re-read from the environment on every request (cached accessor)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with KWX_ prefix.
    Example: KWX_PORT=8090, KWX_YAKE_NGRAM=2
    """

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8090

    # Application metadata
    service_name: str = "keyword-extraction-service"
    version: str = "0.1.0"
    environment: str = "development"

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    # YAKE defaults (used when a request does not override them)
    yake_threshold: float = Field(default=0.85, gt=0.0, le=1.0)
    yake_ngram: int = Field(default=3, ge=1)
    yake_window_size: int = Field(default=2, ge=1)
    yake_top_n: int = Field(default=20, ge=0)

    # Stopwords: optional JSON file merged into (or replacing) the English table
    stopwords_path: str | None = None
    merge_stopwords: bool = True

    model_config = SettingsConfigDict(
        env_prefix="KWX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
