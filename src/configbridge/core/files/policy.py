"""Logical file addresses and where they live on the local filesystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from configbridge.core.utils.paths import AGENTS_FILE_NAME, CONFIG_FILE_NAME
from configbridge.errors import ResolutionError, ValidationError


class FileScope(str, Enum):
    WORKSPACE = "workspace"
    GLOBAL = "global"


class FileKind(str, Enum):
    AGENTS = "agents"
    CONFIG = "config"


_FILE_NAMES = {
    FileKind.AGENTS: AGENTS_FILE_NAME,
    FileKind.CONFIG: CONFIG_FILE_NAME,
}

# (scope, kind) pairs that may be read or written
ALLOWED_ADDRESSES = frozenset(
    {
        (FileScope.GLOBAL, FileKind.AGENTS),
        (FileScope.GLOBAL, FileKind.CONFIG),
        (FileScope.WORKSPACE, FileKind.AGENTS),
    }
)


@dataclass(frozen=True)
class FileAddress:
    scope: FileScope
    kind: FileKind
    workspace_id: str | None = None

    @classmethod
    def of(cls, scope: str, kind: str, workspace_id: str | None = None) -> "FileAddress":
        """Build an address from raw strings, rejecting unknown scopes and kinds."""
        try:
            parsed_scope = FileScope(scope)
        except ValueError as exc:
            raise ValidationError(f"Unknown file scope: {scope}") from exc
        try:
            parsed_kind = FileKind(kind)
        except ValueError as exc:
            raise ValidationError(f"Unknown file kind: {kind}") from exc
        return cls(parsed_scope, parsed_kind, workspace_id)

    def to_payload(self) -> dict[str, str | None]:
        return {
            "scope": self.scope.value,
            "kind": self.kind.value,
            "workspaceId": self.workspace_id,
        }


def resolve_file_path(
    address: FileAddress,
    home: Path | None,
    workspaces: Mapping[str, Path],
) -> Path:
    """
    Map a logical address to a path.

    Raises:
        ValidationError: the (scope, kind) pair is not allowed, or a
            workspace-scoped address has no workspace id
        ResolutionError: no config home, or the workspace id is unknown
    """
    if (address.scope, address.kind) not in ALLOWED_ADDRESSES:
        raise ValidationError(
            f"{address.kind.value} files are not available in {address.scope.value} scope"
        )
    file_name = _FILE_NAMES[address.kind]

    if address.scope is FileScope.GLOBAL:
        if home is None:
            raise ResolutionError("Unable to resolve config home")
        return Path(home) / file_name

    workspace_id = (address.workspace_id or "").strip()
    if not workspace_id:
        raise ValidationError("workspaceId is required for workspace files")
    root = workspaces.get(workspace_id)
    if root is None:
        raise ResolutionError(f"workspace not found: {workspace_id}")
    return Path(root) / file_name
