"""Environment-backed runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from streamdemo.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL_ENV = "STREAMDEMO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime settings for one CLI invocation."""

    log_level: int = DEFAULT_LOG_LEVEL


def parse_log_level(value: str) -> int:
    """
    Convert a logging level name or number into its numeric value.

    Parameters:
        value (str): Level name such as ``debug`` or ``INFO``, or a numeric level.

    Returns:
        int: The numeric logging level.

    Raises:
        ConfigurationError: If the value names no known logging level.
    """
    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)

    level = logging.getLevelNamesMapping().get(candidate.upper())
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_ENV} has unknown logging level: {value!r}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ

    raw_level = environ.get(LOG_LEVEL_ENV)
    if not raw_level:
        return Settings()
    return Settings(log_level=parse_log_level(raw_level))
