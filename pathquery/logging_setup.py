"""Logging setup for the pathquery console front-end.

Library modules only create loggers; handlers are attached here, once,
by the application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import ObservabilityConfig
from .domain.errors import ConfigurationError

LOGGER_NAME = "pathquery"


def configure_logging(
    config: ObservabilityConfig,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        config: Observability settings (level and format).
        level: Optional level name overriding ``config.level``.
        stream: Destination stream, stderr by default.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    level_name = (level or config.level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Unknown log level: {level_name}", setting_name="level"
        )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
