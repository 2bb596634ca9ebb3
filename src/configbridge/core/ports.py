"""Ports (interfaces) for configbridge collaborators.

These protocols define the boundaries between the core and the pieces it
does not own: home-directory resolution, the local file-core, the remote
transport and the decision of whether a session is remote. They are kept
small so tests can substitute plain fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .files.models import TextFileResponse
    from .files.policy import FileKind, FileScope


@runtime_checkable
class HomeResolver(Protocol):
    """Resolve the default configuration root."""

    def __call__(self) -> Path | None:
        """Return the configuration root, or None when no home is configured."""


@runtime_checkable
class LocalFileOps(Protocol):
    """Local reads and writes of addressed text files."""

    def read(
        self, scope: "FileScope", kind: "FileKind", workspace_id: str | None
    ) -> "TextFileResponse":
        """Read the file at the logical address."""

    def write(
        self,
        scope: "FileScope",
        kind: "FileKind",
        workspace_id: str | None,
        content: str,
    ) -> None:
        """Overwrite the file at the logical address."""


@runtime_checkable
class RemoteChannel(Protocol):
    """Opaque request/response channel to a remote backend."""

    def call_remote(self, operation: str, payload: dict[str, Any]) -> Any:
        """Send a JSON payload under an operation name and return the decoded reply."""


@runtime_checkable
class ModeDetector(Protocol):
    """Decides whether a session should be served remotely."""

    def is_remote_mode(self, session: Any) -> bool:
        """Return True when file operations for this session go to the remote backend."""
