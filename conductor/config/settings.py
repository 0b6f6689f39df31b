"""Environment settings loaded from the process environment and an optional .env file."""

from __future__ import annotations

import os
from typing import Literal

from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigurationError

LogLevel = Literal["debug", "info", "warn", "error"]


class LLMSettings(BaseModel):
    api_key: str | None = Field(None, description="OPENAI_API_KEY")
    model: str = Field("gpt-4o-mini", description="OPENAI_MODEL")
    organization: str | None = Field(None, description="OPENAI_ORG")


class LoggingSettings(BaseModel):
    level: LogLevel = Field("info", description="LOG_LEVEL")


class Settings(BaseModel):
    openai: LLMSettings = Field(default_factory=LLMSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings(env_file: str | None = None, environ: dict[str, str] | None = None) -> Settings:
    """Build a fresh Settings object.

    Values from ``env_file`` (or ``.env`` in the working directory) are
    overridden by the real environment.
    """
    values = {k: v for k, v in dotenv_values(env_file or ".env").items() if v is not None}
    values.update(os.environ if environ is None else environ)

    raw = {
        "openai": {
            "api_key": values.get("OPENAI_API_KEY") or None,
            "model": values.get("OPENAI_MODEL") or "gpt-4o-mini",
            "organization": values.get("OPENAI_ORG") or None,
        },
        "logging": {"level": (values.get("LOG_LEVEL") or "info").lower()},
    }
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
