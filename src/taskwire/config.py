"""Runtime configuration management."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TASKWIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level name")
    LOG_FORMAT: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging format string",
    )

    # Discovery
    AGENT_CARD_PATH: str = Field(
        default="/.well-known/agent.json", description="Path the agent card is served at"
    )

    # Request handling
    MAX_PAYLOAD_BYTES: int = Field(
        default=1024 * 1024, gt=0, description="Largest JSON-RPC payload accepted"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {value!r}")
        return level

    @field_validator("AGENT_CARD_PATH")
    @classmethod
    def validate_agent_card_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("AGENT_CARD_PATH must start with '/'")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
