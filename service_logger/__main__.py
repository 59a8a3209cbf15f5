"""
Demo: log one record per level, two exceptions and a d() rendering.

Env: LOG_LEVEL, LOG_DISABLE_JSON, APP_ENV (flags override them).

    python -m service_logger --level debug
    APP_ENV=production python -m service_logger
"""

from __future__ import annotations

import argparse
import dataclasses

from service_logger.config import config_from_env
from service_logger.core import create_logger
from service_logger.levels import LEVELS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print sample records in the configured format")
    parser.add_argument("--level", choices=list(LEVELS), help="Minimum level (default: LOG_LEVEL or info)")
    parser.add_argument("--env", dest="environment", help="Environment mode, e.g. production (default: APP_ENV)")
    parser.add_argument("--disable-json", action="store_true", help="Plain lines instead of JSON in production")
    args = parser.parse_args(argv)

    config = config_from_env()
    overrides = {}
    if args.level:
        overrides["level"] = args.level
    if args.environment:
        overrides["environment"] = args.environment
    if args.disable_json:
        overrides["disable_json"] = True
    config = dataclasses.replace(config, **overrides)

    startup = create_logger("logger", "log", config)
    startup.info(f"environment: {config.environment}")
    startup.debug(f"log level: {config.level}")

    log = create_logger("logger", "demo", config)
    log.debug("Debug or trace information.")
    log.info("Routine information, such as ongoing status or performance.")
    log.warn("Warning events might cause problems.")
    log.error("Error events are likely to cause problems.")
    try:
        raise RuntimeError("something went wrong!")
    except RuntimeError as exc:
        log.exception(exc)
    log.crit("Critical events cause more severe problems or outages.")
    log.exception(RuntimeError("fatal error"), "crit")

    obj = {"hello": "world", "works": True}
    log.debug(log.d("testing the template: {} - {} {}", obj, "it works", 100))


if __name__ == "__main__":
    main()
