"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # STORAGE
    # ===================
    data_file: str = Field(
        default="dynamicConfig.json",
        description="JSON document holding all stored mappings"
    )
    retention_days: float = Field(
        default=1,
        gt=0,
        description="Mappings at least this many days old are purged"
    )
    max_body_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Largest accepted request body in bytes"
    )
    key_length: int = Field(
        default=11,
        ge=4,
        le=64,
        description="Length of generated keys"
    )

    # ===================
    # REQUEST LOGS
    # ===================
    access_log_file: str = Field(
        default="logger.txt",
        description="Plain-text access log (one line per request)"
    )
    performance_log_file: str = Field(
        default="performance.txt",
        description="Plain-text performance log (status and latency)"
    )
    error_log_file: str = Field(
        default="errorLogger.txt",
        description="Plain-text log of internal errors with tracebacks"
    )
    access_log_queue_size: int = Field(
        default=1000,
        ge=1,
        description="Pending log lines kept before new ones are dropped"
    )

    # ===================
    # STATIC FILES
    # ===================
    public_dir: str = Field(
        default="public",
        description="Directory served for GET / and GET /{filename}"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "API_PORT"),
        description="API port"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
