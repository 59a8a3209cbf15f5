"""
Environment variable loading for service loggers.

- LOG_LEVEL: minimum level to emit (crit | error | warn | info | debug; default: info)
- LOG_DISABLE_JSON: 1/true/yes/on to log plain lines instead of JSON in production
- APP_ENV: production for structured logs; anything else is development (default)
- Loads .env from the current directory (or a parent) when available.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from service_logger.levels import DEFAULT_LEVEL, LEVELS, severity

PRODUCTION = "production"
DEVELOPMENT = "development"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LoggerConfig:
    """Resolved logger options. Immutable once a logger is built from it."""

    level: str = DEFAULT_LEVEL
    disable_json: bool = False
    environment: str = DEVELOPMENT

    def __post_init__(self) -> None:
        severity(self.level)

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION


def load_logger_env() -> None:
    """Load .env found from the working directory. Existing variables win."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv: bool = True,
) -> LoggerConfig:
    """
    Build a LoggerConfig from environment variables.

    With no environ, reads os.environ (after loading .env when dotenv is True).
    An explicit mapping is read as is. Unknown LOG_LEVEL values fall back to info.
    """
    if environ is None:
        if dotenv:
            load_logger_env()
        environ = os.environ

    level = (environ.get("LOG_LEVEL") or DEFAULT_LEVEL).strip().lower()
    if level not in LEVELS:
        level = DEFAULT_LEVEL
    disable_json = (environ.get("LOG_DISABLE_JSON") or "").strip().lower() in _TRUTHY
    environment = (environ.get("APP_ENV") or DEVELOPMENT).strip().lower()
    return LoggerConfig(level=level, disable_json=disable_json, environment=environment)
