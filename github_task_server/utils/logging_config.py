"""Logging configuration for the MCP server."""

import logging
import sys
from typing import Optional, Union


# Log level constants
DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_log_level(log_level: Union[int, str, None]) -> int:
    """Turn a level name such as "debug" into its numeric value."""
    if log_level is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(log_level.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def setup_logging(
    log_level: Union[int, str, None] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure logging for the MCP server.

    stdout carries the MCP protocol stream, so diagnostics go to stderr
    and, optionally, to a log file.

    Args:
        log_level: Logging level, numeric or by name (DEBUG, INFO, ...)
        log_file: Optional file path to also write logs to
    """
    level = resolve_log_level(log_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers
    root_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            root_logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    # Set specific loggers to WARNING to minimize noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__ from module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
