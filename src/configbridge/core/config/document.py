"""Config document persistence.

The configuration lives in a single ``config.toml`` under the resolved root.
Each operation parses it fresh, mutates the ``TOMLDocument`` in memory and
writes the whole document back; there is no partial-field update path.
tomlkit keeps comments, ordering and untouched keys stable across the
round-trip.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

import tomlkit
from tomlkit import TOMLDocument
from tomlkit.exceptions import TOMLKitError

from configbridge.core.utils.artifact_writer import write_text
from configbridge.core.utils.logger import log_error, log_file_operation
from configbridge.core.utils.paths import CONFIG_FILE_NAME
from configbridge.errors import ConfigIOError, ParseError


def config_file_path(root: Path) -> Path:
    return Path(root) / CONFIG_FILE_NAME


def compute_document_identity(raw: bytes) -> str:
    """Identity token for a loaded document (hash of the bytes read)."""
    return f"sha256:{hashlib.sha256(raw).hexdigest()}"


def parse_document(text: str) -> TOMLDocument:
    try:
        return tomlkit.parse(text)
    except TOMLKitError as exc:
        raise ParseError(f"Failed to parse config.toml: {exc}") from exc


def load(root: Path) -> tuple[str, TOMLDocument]:
    """
    Load the configuration document under ``root``.

    A missing file loads as an empty document so the first write can
    create it.

    Returns:
        (identity, document)

    Raises:
        ConfigIOError: the file exists but cannot be read
        ParseError: the content is not valid UTF-8 TOML
    """
    path = config_file_path(root)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raw = b""
    except OSError as exc:
        log_file_operation("read", str(path), False, str(exc))
        raise ConfigIOError(f"Failed to read config.toml: {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Failed to parse config.toml: {exc}") from exc

    document = parse_document(text)
    log_file_operation("read", str(path), True)
    return compute_document_identity(raw), document


def persist(root: Path, document: TOMLDocument) -> None:
    """
    Serialize the full document and replace ``config.toml`` under ``root``.

    The root directory is created when missing. The file is written to a
    temporary sibling and swapped in, so readers never see a half-written
    document.

    Raises:
        ConfigIOError: the directory or file cannot be written
    """
    path = config_file_path(root)
    serialized = tomlkit.dumps(document)
    try:
        write_text(path, serialized)
    except OSError as exc:
        log_error("config", f"Failed to write {path}", exception=exc)
        raise ConfigIOError(f"Failed to write config.toml: {exc}") from exc
    log_file_operation("write", str(path), True)
