"""
Configuration for service loggers.

Resolves the minimum level, the JSON switch and the environment mode into an
immutable LoggerConfig. Environment reading lives here only; the logger core
takes a LoggerConfig value.
"""

from service_logger.config.env import LoggerConfig, config_from_env  # noqa: F401

__all__ = ["LoggerConfig", "config_from_env"]
