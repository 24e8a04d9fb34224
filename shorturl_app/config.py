from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False  # True swaps the generic 500 body for a traceback page
    log_level: str = "INFO"

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Database (URL records)
    database_url: str = "sqlite:///./url_shortener.db"

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8000"
    short_url_length: int = 7  # Max 7 characters for short identifiers

    # Short code generation strategy
    short_code_strategy: str = "base62"  # Options: "base62", "direct"

    # Cache settings
    cache_backend: str = "redis"  # Options: "redis", "memory", "null"
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl: int = Field(default=3600, gt=0)  # Cache TTL in seconds (1 hour)

    # Access log settings (analytics database)
    access_log_backend: str = "sqlite"  # Options: "sqlite", "memory"
    access_log_sqlite_path: str = "analytics.db"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
