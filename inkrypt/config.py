"""
Runtime settings for inkrypt tooling.

Settings come from the environment, optionally populated from a .env file.
The library modules never read them; scripts call configure_logging().
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator


DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    """Environment-driven settings."""
    log_level: str = Field("WARNING", description="Python logging level name")
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="logging format string")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings() -> Settings:
    """
    Load settings from the environment (and a .env found from the working directory).

    Returns:
        Settings built from INKRYPT_LOG_LEVEL and INKRYPT_LOG_FORMAT
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=os.getenv('INKRYPT_LOG_LEVEL', 'WARNING'),
        log_format=os.getenv('INKRYPT_LOG_FORMAT', DEFAULT_LOG_FORMAT),
    )


def configure_logging(settings: Optional[Settings] = None) -> Settings:
    """Apply the logging settings to the root logger."""
    if settings is None:
        settings = load_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    return settings
