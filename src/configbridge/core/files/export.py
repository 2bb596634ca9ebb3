"""Direct-path text export, independent of scope/kind addressing."""

from __future__ import annotations

from pathlib import Path

from configbridge.core.utils.logger import log_file_operation
from configbridge.errors import ConfigIOError, ValidationError


def write_export(path: str, content: str) -> Path:
    """
    Write ``content`` to a user-chosen path, creating missing directories.

    Always local, even when file operations are otherwise routed remotely.

    Raises:
        ValidationError: the path is empty after trimming
        ConfigIOError: the directory or file cannot be written
    """
    raw = (path or "").strip()
    if not raw:
        raise ValidationError("Path is required")
    target = Path(raw)

    if target.parent != Path("."):
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log_file_operation("export", raw, False, str(exc))
            raise ConfigIOError(f"Failed to create export directory: {exc}") from exc

    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        log_file_operation("export", raw, False, str(exc))
        raise ConfigIOError(f"Failed to write export file: {exc}") from exc
    log_file_operation("export", raw, True)
    return target
