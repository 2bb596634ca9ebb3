# configbridge/core/utils/logger.py

"""
Logging configuration and utilities for configbridge.

This module provides centralized logging configuration and utility functions
so the config store, the file router and the CLI all report in one format.

The logging system is designed to provide:
- Consistent log formatting across all modules
- Console output with an optional log file
- Structured error reporting with context
- Configuration change and file operation logging

Key Features:
- Global logger instance with lazy initialization
- Standardized ``[MODULE] message | Context: ...`` messages
- Level and file taken from the environment when not given explicitly
"""

import logging
import sys
from typing import Any

from configbridge.core.utils.paths import default_log_file, default_log_level

# Global logger instance for singleton pattern
# This ensures all modules use the same logger configuration
_logger: logging.Logger | None = None

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for configbridge.

    This function initializes the global logging system with console and
    optional file output. Calling it again replaces the handlers of the
    previous configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls
               back to $CONFIGBRIDGE_LOG_LEVEL, then INFO.
        log_file: Path to log file (optional). Falls back to
                  $CONFIGBRIDGE_LOG_FILE.
        format_string: Custom log format string (optional).

    Returns:
        Configured logger instance
    """
    global _logger

    level = (level or default_log_level()).upper()
    log_file = log_file or default_log_file()

    logger = logging.getLogger("configbridge")
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logger.level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it will be set up with the
    default configuration.
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include stack trace (optional)
    """
    logger = get_logger()
    message = _format(module, error, context)
    if exception:
        logger.error(message, exc_info=exception)
    else:
        logger.error(message)


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_configuration_change(setting: str, old_value: Any, new_value: Any) -> None:
    """
    Log a configuration change.

    Args:
        setting: Name of the setting that changed
        old_value: Previous value of the setting (None when unset)
        new_value: New value of the setting
    """
    logger = get_logger()
    logger.info(f"Configuration changed: {setting} = {old_value} -> {new_value}")


def log_file_operation(
    operation: str, file_path: str, success: bool, error: str | None = None
) -> None:
    """
    Log a file operation.

    Args:
        operation: Type of operation (read, write, export, ...)
        file_path: Path to the file being operated on
        success: Whether the operation was successful
        error: Error message if the operation failed (optional)
    """
    logger = get_logger()
    if success:
        logger.debug(f"File {operation}: {file_path}")
    else:
        logger.error(f"File {operation} failed: {file_path} - {error}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger("configbridge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None
