"""
structlog processor chains, one per output strategy.

- production + JSON: ISO timestamp, level/service renamed to severity/component,
  one JSON object per line (for aggregation, e.g. Cloud Logging, Datadog).
- production, JSON disabled: "<timestamp> <service>:<level> <message>", no colors.
- development: "<HH:MM:SS> <bold service:level> <message>", colored per level.

Processors use the standard structlog signature (logger, method_name, event_dict).
Loggers pass the level and message as explicit "level" and "message" fields,
so method_name is unused and structlog's "event" key is an ordinary field.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

import structlog
from colorama import Style

from service_logger.config.env import LoggerConfig
from service_logger.levels import level_style

# Top-level keys renamed in JSON records
FIELD_RENAMES: Mapping[str, str] = MappingProxyType({
    "level": "severity",
    "service": "component",
})

DEV_TIME_FORMAT = "%H:%M:%S"


def rename_fields(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Apply FIELD_RENAMES to top-level keys; nested values are left alone.

    A renamed field replaces a caller field that already uses the target name.
    """
    renamed = {key: value for key, value in event_dict.items() if key not in FIELD_RENAMES}
    for old, new in FIELD_RENAMES.items():
        if old in event_dict:
            renamed[new] = event_dict[old]
    return renamed


def _json_default(value: Any) -> Any:
    """Fallback for values json cannot encode (e.g. the error of exception())."""
    if isinstance(value, BaseException):
        return {"type": type(value).__name__, "message": str(value)}
    return repr(value)


def render_plain_line(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> str:
    """Render timestamp, service, level and message; other fields are dropped."""
    return (
        f"{event_dict.get('timestamp')} "
        f"{event_dict.get('service')}:{event_dict.get('level')} "
        f"{event_dict.get('message')}"
    )


class DevLineRenderer:
    """Colorized one-line renderer for local development."""

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> str:
        level = event_dict.get("level")
        label = f"{event_dict.get('service')}:{level}"
        # Tab before the message lines messages up across label widths
        line = (
            f"{event_dict.get('timestamp')} "
            f"{Style.BRIGHT}{label}{Style.NORMAL} \t{event_dict.get('message')}"
        )
        style = level_style(level) if isinstance(level, str) else ""
        return f"{style}{line}{Style.RESET_ALL}"


def _shared_processors() -> list[Any]:
    return [structlog.processors.format_exc_info]


def build_processors(config: LoggerConfig) -> list[Any]:
    """Return the processor chain for the output strategy selected by config."""
    if not config.is_production:
        return [
            *_shared_processors(),
            structlog.processors.TimeStamper(fmt=DEV_TIME_FORMAT, utc=False),
            DevLineRenderer(),
        ]
    processors: list[Any] = [
        *_shared_processors(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if config.disable_json:
        processors.append(render_plain_line)
    else:
        processors.append(rename_fields)
        processors.append(structlog.processors.JSONRenderer(default=_json_default))
    return processors
