"""Structured logging for skelgen.

Provides consistent stderr logging that keeps stdout clean for generated
output. Designed for minimal noise by default (WARNING level).
"""

from __future__ import annotations

import logging
import os
import sys

# Cache configured loggers
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Logs to stderr with format: [skelgen:{name}] {level}: {message}
    Default level is WARNING; override with SKELGEN_LOG_LEVEL env var.

    Args:
        name: Logger name (typically the module name).

    Returns:
        Configured logger instance.
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(f"skelgen.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(f"[skelgen:{name}] %(levelname)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        level_name = os.environ.get("SKELGEN_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
        logger.setLevel(level)

    _loggers[name] = logger
    return logger
