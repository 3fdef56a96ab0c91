"""Application settings loaded from environment variables and .env files.

Hey future me - every section is its own BaseSettings with an env prefix, so
HTTP_TIMEOUT=10 or STORAGE_IMAGE_PATH=/config/images just work. The top-level
Settings composes them. Use get_settings() everywhere - it's cached!
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HttpSettings(BaseSettings):
    """Shared HTTP client pool settings."""

    model_config = SettingsConfigDict(
        env_prefix="HTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: float = Field(default=30.0, gt=0)
    max_keepalive: int = Field(default=20, ge=0)
    max_connections: int = Field(default=50, ge=1)
    # Listen - only enable if the h2 extra is installed (httpx[http2])
    http2: bool = False
    user_agent: str = "tvspot/0.1"


class StorageSettings(BaseSettings):
    """Where downloaded program images end up."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    image_path: Path = Path("./images")


class ObservabilitySettings(BaseSettings):
    """Logging output settings."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVABILITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_json_format: bool = False


class Settings(BaseSettings):
    """Main settings class that combines all settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "tvspot"
    log_level: str = "INFO"

    http: HttpSettings = Field(default_factory=HttpSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize log level and reject unknown names."""
        level = value.upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{value}': must be one of {', '.join(_VALID_LOG_LEVELS)}"
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Tests that change env vars must call get_settings.cache_clear().
    """
    return Settings()
