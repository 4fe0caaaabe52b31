"""Application settings via Pydantic BaseSettings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from locatorgen.exceptions import ConfigError
from locatorgen.types import Language


class Settings(BaseSettings):
    model_config = {"env_prefix": "LOCATORGEN_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Generation defaults used by the CLI
    default_language: Language = Language.JAVASCRIPT
    tolerant: bool = False  # Return the selector unchanged when it cannot be translated


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    settings = Settings()
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        msg = f"Unknown log level: {settings.log_level}"
        raise ConfigError(msg)
    return settings
