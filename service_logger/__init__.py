"""
service-logger: structured logging for apps and their services.

Wraps structlog with a fixed set of levels (crit, error, warn, info, debug),
colorized human-readable output in development and JSON (or plain lines)
in production. Use create_logger() once per (app, service) pair:

    from service_logger import create_logger

    log = create_logger("billing", "invoices")
    log.info("invoice created", invoice_id=42)
"""

from service_logger.config import LoggerConfig, config_from_env
from service_logger.core import Logger, create_logger, d

__version__ = "0.1.0"

__all__ = ["Logger", "LoggerConfig", "config_from_env", "create_logger", "d"]
