"""Application settings using pydantic-settings"""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server configuration settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SLEEPER_MCP_",
        case_sensitive=False,
        extra="ignore"
    )

    # Server metadata advertised during MCP initialization
    app_name: str = "sleeper-mcp"
    app_version: str = "0.2.0"

    # Upstream Sleeper API
    base_url: str = "https://api.sleeper.app/v1"
    request_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds before an upstream request is abandoned"
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


# Global settings instance
settings = Settings()
