"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MYBUDGET_",
    )

    app_name: str = "myBudget"
    app_version: str = "0.1.0"

    database_url: str = "sqlite:///./mybudget.db"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    log_sql: bool = False

    # Bearer token settings
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    auth_header_name: str = "Authorization"

    cors_allow_origins: list[str] = ["*"]

    # Resource policies
    enforce_owner_binding: bool = False
    orphan_policy: Literal["ignore", "cascade", "forbid"] = "ignore"
    validate_transaction_updates: bool = False


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and scripts)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
