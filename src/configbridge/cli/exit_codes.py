"""
Standardized exit codes for configbridge CLI commands.

This module provides consistent exit code handling across all CLI commands,
so scripts can tell a bad argument from an unresolvable configuration.
"""

import functools
from typing import Callable, Optional

import typer

from configbridge.core.utils.logger import log_error
from configbridge.errors import ConfigBridgeError, ParseError, ResolutionError

# Exit code constants
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


class CliExit(typer.Exit):
    """
    Standardized CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.success()  # Success
        raise CliExit.error("Operation failed")  # Error with message
        raise CliExit.config_error("Unable to resolve config home")
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            print(message)

    @classmethod
    def success(cls, message: Optional[str] = None) -> "CliExit":
        """Create a success exit."""
        return cls(EXIT_SUCCESS, message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """Create an error exit."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)


def exit_code_for(error: ConfigBridgeError) -> int:
    if isinstance(error, (ResolutionError, ParseError)):
        return EXIT_CONFIG_ERROR
    return EXIT_ERROR


def handle_errors(command: Callable) -> Callable:
    """Turn configbridge errors raised by a command into a CliExit."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except ConfigBridgeError as exc:
            log_error("cli", f"{command.__name__} failed", str(exc))
            raise CliExit(exit_code_for(exc), f"Error: {exc}") from exc

    return wrapper
