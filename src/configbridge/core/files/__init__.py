"""Addressed text-file operations and their local/remote routing."""

from .export import write_export
from .local import LocalFileCore
from .models import TextFileResponse
from .policy import FileAddress, FileKind, FileScope
from .router import ExecutionMode, FileRouter

__all__ = [
    "ExecutionMode",
    "FileAddress",
    "FileKind",
    "FileRouter",
    "FileScope",
    "LocalFileCore",
    "TextFileResponse",
    "write_export",
]
