"""Configuration management for authcore.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once at process
startup and passed explicitly to the components that need it.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables (prefixed with
    ``AUTHCORE_``) and .env files. All values are validated at startup and
    the instance is frozen afterwards.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTHCORE_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "authcore"
    environment: Literal["development", "production", "testing"] = "development"

    # Token Settings
    secret_key: SecretStr = Field(
        ...,
        description="Secret key for token signing (required, never logged)",
    )
    token_expire_minutes: int = Field(default=120, gt=0)
    token_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    token_issuer: str = "authcore"

    # Password Hashing Settings
    password_hash_cost: int = Field(
        default=10,
        ge=1,
        description="Argon2 time cost (number of iterations)",
    )
    password_hash_memory_cost: int = Field(
        default=65536,
        ge=32,
        description="Argon2 memory cost in KiB",
    )

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./authcore.db"
    db_echo: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: SecretStr) -> SecretStr:
        """Reject blank signing secrets."""
        if not v.get_secret_value().strip():
            raise ValueError("secret_key must not be blank")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Intended for process entrypoints only. Library code receives a
    ``Settings`` instance explicitly.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
