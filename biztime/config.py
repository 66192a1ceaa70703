"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "BizTime"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Relational store (any SQLAlchemy URL; postgresql+psycopg://... in production)
    database_url: str = "sqlite:///./biztime.db"
    database_echo: bool = False
    create_schema: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
