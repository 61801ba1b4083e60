"""Configuration management for Storefront.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once at
application startup and passed explicitly to the services that need it.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Ecommerce"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Token Settings
    secret_key: str = Field(
        default="change-me-in-production-use-openssl-rand-hex-32",
        description="Secret key for JWT token signing",
    )
    token_expire_minutes: int = 30
    auth_cookie_name: str = "authToken"

    # Upload Settings
    upload_dir: str = "public/img"

    # Email Settings
    email: str = Field(default="", description="Account used to send transactional email")
    email_password: str = Field(default="", description="Password for the email account")
    email_from_name: str = "Ecommerce"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    smtp_use_ssl: bool = False
    smtp_timeout: int = 10

    # Fake Data Settings
    faker_locale: str = "es_MX"
    mock_products_count: int = 100

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("token_expire_minutes")
    @classmethod
    def validate_token_expire_minutes(cls, v: int) -> int:
        """Reject non-positive token lifetimes."""
        if v <= 0:
            raise ValueError("token_expire_minutes must be greater than zero")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

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

    Settings are loaded once at startup and reused for the lifetime
    of the process.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
