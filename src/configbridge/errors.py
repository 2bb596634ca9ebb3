"""
Error kinds for configbridge.

Every failure in the configuration store, the file router and the export
writer is raised as a subclass of ``ConfigBridgeError``. ``str(error)`` is
the plain descriptive message shown to the user; the ``category`` attribute
lets command handlers branch without parsing the message.
"""

from enum import Enum


class ErrorCategory(Enum):
    """Error categories for better organization."""

    VALIDATION = "VALIDATION"
    PROCESSING = "PROCESSING"
    RESOURCE = "RESOURCE"
    NETWORK = "NETWORK"
    UNKNOWN = "UNKNOWN"


class ConfigBridgeError(Exception):
    """Base class for all configbridge errors."""

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigIOError(ConfigBridgeError):
    """Filesystem access failed (read, write or directory creation)."""

    category = ErrorCategory.RESOURCE


class ParseError(ConfigBridgeError):
    """The configuration document is not well-formed TOML."""

    category = ErrorCategory.VALIDATION


class ValidationError(ConfigBridgeError):
    """An empty, deprecated or otherwise invalid key, address or path."""

    category = ErrorCategory.VALIDATION


class DecodeError(ConfigBridgeError):
    """A remote reply did not match the expected response shape."""

    category = ErrorCategory.PROCESSING


class TransportError(ConfigBridgeError):
    """Raised by remote channels when a round trip fails."""

    category = ErrorCategory.NETWORK


class ResolutionError(ConfigBridgeError):
    """No configuration root (or workspace) could be resolved where one was required."""

    category = ErrorCategory.RESOURCE
