"""
Logger bound to an (app, service) pair.

Each Logger wraps its own structlog PrintLogger with a processor chain picked
from its LoggerConfig, so loggers are independent of each other and of the
global structlog configuration.
"""

from __future__ import annotations

import sys
import traceback
from typing import Any, Mapping, TextIO

import colorama
import structlog

from service_logger.config.env import LoggerConfig, config_from_env
from service_logger.core.formatting import d
from service_logger.core.processors import build_processors
from service_logger.levels import DEFAULT_COLORS, add_colors, severity


def _exception_message(error: Any) -> str:
    """Formatted traceback when the error has one, else its string form."""
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return str(error)
    return "".join(traceback.format_exception(type(error), error, tb)).rstrip("\n")


class Logger:
    """Level methods crit/error/warn/info/debug plus exception() and d()."""

    def __init__(
        self,
        app: str,
        service: str,
        config: LoggerConfig,
        *,
        file: TextIO | None = None,
        processors: list[Any] | None = None,
    ) -> None:
        self._app = app
        self._service = service
        self._config = config
        self._threshold = severity(config.level)
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=file if file is not None else sys.stdout),
            processors=processors if processors is not None else build_processors(config),
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            app=app,
            service=service,
        ).bind()

    @property
    def app(self) -> str:
        return self._app

    @property
    def service(self) -> str:
        return self._service

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def is_enabled(self, level: str) -> bool:
        """True when records at level pass the configured minimum level."""
        return severity(level) <= self._threshold

    def log(
        self,
        level: str,
        message: Any,
        meta: Mapping[str, Any] | None = None,
        /,
        **fields: Any,
    ) -> None:
        """
        Emit message at level with extra fields; no-op below the minimum level.

        message and level always come from the call, overriding same-named
        fields. Any other field, "event" included, is passed through.
        """
        if not self.is_enabled(level):
            return
        record = {**(meta or {}), **fields}
        record["message"] = message
        record["level"] = level
        target = self._logger
        if "event" in record:
            # msg() takes the event positionally; bind it as a plain field instead
            target = target.bind(event=record.pop("event"))
        target.msg(**record)

    def crit(self, message: Any, meta: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        self.log("crit", message, meta, **fields)

    def error(self, message: Any, meta: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        self.log("error", message, meta, **fields)

    def warn(self, message: Any, meta: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        self.log("warn", message, meta, **fields)

    def info(self, message: Any, meta: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        self.log("info", message, meta, **fields)

    def debug(self, message: Any, meta: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        self.log("debug", message, meta, **fields)

    def exception(self, error: Any, level: str = "error") -> None:
        """
        Log an error value at level (default error).

        The message is the traceback if the exception was raised, otherwise
        str(error). The original value is attached as the "error" field.
        """
        self.log(level, _exception_message(error), error=error)

    @staticmethod
    def d(template: Any, *values: Any) -> str:
        return d(template, *values)

    def __repr__(self) -> str:
        return f"Logger(app={self._app!r}, service={self._service!r}, level={self._config.level!r})"


def create_logger(
    app: str,
    service: str,
    config: LoggerConfig | None = None,
    *,
    file: TextIO | None = None,
) -> Logger:
    """
    Create a logger for an app and one of its services.

    config defaults to config_from_env(). Output goes to file (default stdout).
        log = create_logger("billing", "invoices")
        log.warn("retrying charge", attempt=2)
    """
    if config is None:
        config = config_from_env()
    add_colors(DEFAULT_COLORS)
    if not config.is_production:
        # no-op outside Windows consoles
        colorama.just_fix_windows_console()
    return Logger(app, service, config, file=file)
