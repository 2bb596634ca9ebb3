"""
Local/remote dispatch for addressed text-file operations.

Command handlers call ``FileRouter.read`` / ``FileRouter.write`` with a
logical address and a session. The router is the only place that branches
on the execution mode: local sessions go straight to the file-core, remote
sessions are serialized and sent over the remote channel. Scope and kind
are transported, never interpreted, here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from configbridge.core.files.models import TextFileResponse
from configbridge.core.files.policy import FileAddress, FileKind, FileScope
from configbridge.core.ports import LocalFileOps, ModeDetector, RemoteChannel
from configbridge.core.utils.logger import log_debug, log_error
from configbridge.errors import DecodeError, TransportError

FILE_READ_OPERATION = "file_read"
FILE_WRITE_OPERATION = "file_write"


class ExecutionMode(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"


class FileRouter:
    """
    Route file reads and writes to the local file-core or a remote backend.

    ``session`` may be an explicit ``ExecutionMode``; any other value is
    handed to the mode detector, which is queried once per call. Without a
    detector every non-explicit session is local.

    There is no caching and no retry: a remote call is a single attempt and
    its failure reaches the caller unchanged.
    """

    def __init__(
        self,
        local_core: LocalFileOps,
        remote_channel: RemoteChannel | None = None,
        mode_detector: ModeDetector | None = None,
    ):
        self.local_core = local_core
        self.remote_channel = remote_channel
        self.mode_detector = mode_detector

    def execution_mode(self, session: Any) -> ExecutionMode:
        if isinstance(session, ExecutionMode):
            return session
        if self.mode_detector is not None and self.mode_detector.is_remote_mode(session):
            return ExecutionMode.REMOTE
        return ExecutionMode.LOCAL

    def read(
        self,
        scope: FileScope,
        kind: FileKind,
        workspace_id: str | None,
        session: Any = ExecutionMode.LOCAL,
    ) -> TextFileResponse:
        if self.execution_mode(session) is ExecutionMode.REMOTE:
            address = FileAddress.of(scope, kind, workspace_id)
            reply = self._call_remote(FILE_READ_OPERATION, address.to_payload())
            try:
                return TextFileResponse.model_validate(reply)
            except PydanticValidationError as exc:
                log_error("router", "Unexpected file_read reply", str(exc))
                raise DecodeError(f"Invalid file_read response: {exc}") from exc

        return self.local_core.read(scope, kind, workspace_id)

    def write(
        self,
        scope: FileScope,
        kind: FileKind,
        workspace_id: str | None,
        content: str,
        session: Any = ExecutionMode.LOCAL,
    ) -> None:
        if self.execution_mode(session) is ExecutionMode.REMOTE:
            address = FileAddress.of(scope, kind, workspace_id)
            payload = dict(address.to_payload(), content=content)
            self._call_remote(FILE_WRITE_OPERATION, payload)
            return

        self.local_core.write(scope, kind, workspace_id, content)

    def _call_remote(self, operation: str, payload: dict[str, Any]) -> Any:
        if self.remote_channel is None:
            raise TransportError("Remote backend is not connected")
        log_debug("router", f"Forwarding {operation} to remote backend", str(payload.get("scope")))
        return self.remote_channel.call_remote(operation, payload)
