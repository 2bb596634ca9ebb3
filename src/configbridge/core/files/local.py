"""
Local file-core: reads and writes addressed text files on this machine.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from configbridge.core.config.home import resolve_default_config_home
from configbridge.core.files.models import TextFileResponse
from configbridge.core.files.policy import FileAddress, FileKind, FileScope, resolve_file_path
from configbridge.core.ports import HomeResolver
from configbridge.core.utils.artifact_writer import write_text
from configbridge.core.utils.logger import log_file_operation
from configbridge.core.utils.paths import MAX_TEXT_FILE_BYTES
from configbridge.errors import ConfigIOError


class LocalFileCore:
    """
    Serve (scope, kind, workspace id) addresses from the local filesystem.

    Global files live under the config home; workspace files live in the
    root directory registered for the workspace id.
    """

    def __init__(
        self,
        workspaces: Mapping[str, Path] | None = None,
        home_resolver: HomeResolver = resolve_default_config_home,
        max_bytes: int = MAX_TEXT_FILE_BYTES,
    ):
        self.workspaces = dict(workspaces or {})
        self.home_resolver = home_resolver
        self.max_bytes = max_bytes

    def resolve_path(
        self, scope: FileScope, kind: FileKind, workspace_id: str | None
    ) -> Path:
        address = FileAddress.of(scope, kind, workspace_id)
        home = self.home_resolver() if address.scope is FileScope.GLOBAL else None
        return resolve_file_path(address, home, self.workspaces)

    def read(
        self, scope: FileScope, kind: FileKind, workspace_id: str | None
    ) -> TextFileResponse:
        path = self.resolve_path(scope, kind, workspace_id)
        if not path.exists():
            return TextFileResponse.missing()
        try:
            with path.open("rb") as handle:
                data = handle.read(self.max_bytes + 1)
        except OSError as exc:
            log_file_operation("read", str(path), False, str(exc))
            raise ConfigIOError(f"Failed to read {path.name}: {exc}") from exc

        truncated = len(data) > self.max_bytes
        if truncated:
            data = data[: self.max_bytes]
        log_file_operation("read", str(path), True)
        return TextFileResponse(
            exists=True,
            content=data.decode("utf-8", errors="replace"),
            truncated=truncated,
        )

    def write(
        self,
        scope: FileScope,
        kind: FileKind,
        workspace_id: str | None,
        content: str,
    ) -> None:
        path = self.resolve_path(scope, kind, workspace_id)
        try:
            write_text(path, content)
        except OSError as exc:
            log_file_operation("write", str(path), False, str(exc))
            raise ConfigIOError(f"Failed to write {path.name}: {exc}") from exc
        log_file_operation("write", str(path), True)
