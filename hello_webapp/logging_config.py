"""Structured logging for Hello WebApp.

The root logger gets two handlers: a rotating JSON file under the configured
log directory and a plain-text console stream. Level and directory come from
``Settings`` (``LOG_LEVEL``, ``LOG_DIR``).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pythonjsonlogger import jsonlogger

if TYPE_CHECKING:
    from hello_webapp.config import Settings

LOG_FILE_NAME = "hello_webapp.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_file_handler(log_dir: Path) -> RotatingFileHandler:
    """JSON lines file handler; records every level regardless of LOG_LEVEL."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT, timestamp=True))
    handler.setLevel(logging.DEBUG)
    return handler


def build_console_handler(level: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(settings: "Settings") -> logging.Logger:
    """Replace the root logger's handlers with the file and console handlers.

    Args:
        settings: Settings instance providing ``log_level`` and ``log_dir``

    Returns:
        Configured root logger instance
    """
    level = logging.getLevelName(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(build_file_handler(settings.log_dir))
    root_logger.addHandler(build_console_handler(level))

    # log_requests already writes one record per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Fields added to the JSON record (e.g., method, url, event_type)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
