"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Application
    # ==========================================================================
    app_name: str = Field(default="u-tools", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    env: str = Field(default="local", description="Environment name")
    api_prefix: str = Field(default="", description="Prefix mounted before /tools")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://localhost:8501"],
        description="Allowed CORS origins",
    )

    # ==========================================================================
    # Network ping tool
    # ==========================================================================
    ping_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="Timeout for a single ICMP echo, in milliseconds",
    )
    ping_binary: str = Field(
        default="ping",
        description="System ping executable used to issue ICMP echoes",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
