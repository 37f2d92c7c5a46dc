"""Settings loaded from the environment (and an optional ``.env`` file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_logging_configured = False


@dataclass(frozen=True, slots=True)
class Settings:
    user_agent: str = "Mozilla/5.0"
    timeout: float = 15.0
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Read ``JSONLD_USER_AGENT``, ``JSONLD_TIMEOUT`` and ``JSONLD_LOG_LEVEL``."""
    load_dotenv()
    defaults = Settings()

    raw_timeout = os.environ.get("JSONLD_TIMEOUT")
    timeout = defaults.timeout
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(f"JSONLD_TIMEOUT is not a number: {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ConfigurationError(f"JSONLD_TIMEOUT must be positive: {raw_timeout!r}")

    return Settings(
        user_agent=os.environ.get("JSONLD_USER_AGENT", defaults.user_agent),
        timeout=timeout,
        log_level=os.environ.get("JSONLD_LOG_LEVEL", defaults.log_level).upper(),
    )


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Set up root logging once; later calls only change the level."""
    global _logging_configured
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"unknown log level: {name!r}")
    if not _logging_configured:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _logging_configured = True
    else:
        logging.getLogger().setLevel(level)
