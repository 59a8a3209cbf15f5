"""Logger factory, output strategies and the d() template formatter."""

from service_logger.core.formatting import d
from service_logger.core.logger import Logger, create_logger
from service_logger.core.processors import FIELD_RENAMES, build_processors, rename_fields

__all__ = ["FIELD_RENAMES", "Logger", "build_processors", "create_logger", "d", "rename_fields"]
