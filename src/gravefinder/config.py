from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gravefinder.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "Gravefinder"
    env: str = "development"
    debug: bool = False
    port: int = 8000
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"


class DataConfig(BaseModel):
    """Burial dataset configuration values."""

    # Local GeoJSON FeatureCollection of burials; no dataset is loaded when unset
    burials_path: Optional[str] = None
    # Default cap on search results returned to a client (0 disables the cap)
    max_results: int = Field(default=100, ge=0)


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="GRAVEFINDER_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    data: DataConfig = DataConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only.

    Raises `ConfigError` when a value fails validation.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid Gravefinder settings: {exc}") from exc
