"""Application configuration.

Settings are read from environment variables prefixed with `JSON_FORMATTER_`
(e.g. `JSON_FORMATTER_SERVER_PORT=8080`). They only affect how the page is
launched and the form's initial values; the core functions take explicit
arguments.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import TYPE_OPTIONS

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JSON_FORMATTER_",
        env_file=None,
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Server
    server_name: str = Field(default="127.0.0.1")
    server_port: int = Field(default=7860, ge=1, le=65535)

    # Form defaults
    default_section_title: str = Field(default="Inspection List")
    default_type: str = Field(default="number_type2")
    default_is_mandatory: bool = Field(default=False)
    section_id_length: int = Field(default=10, ge=1, le=32)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("default_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value not in TYPE_OPTIONS:
            raise ValueError(f"default_type must be one of {', '.join(TYPE_OPTIONS)}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
