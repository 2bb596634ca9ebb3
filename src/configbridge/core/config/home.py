"""Default configuration home resolution."""

from __future__ import annotations

from pathlib import Path

from configbridge.core.utils.logger import log_debug
from configbridge.core.utils.paths import DEFAULT_HOME_DIRNAME, home_override


def resolve_default_config_home() -> Path | None:
    """
    Resolve the directory that holds ``config.toml``.

    ``$CONFIGBRIDGE_HOME`` wins when set; otherwise ``~/.configbridge``.
    Returns None when the user's home directory cannot be determined.
    """
    override = home_override()
    if override is not None:
        return override
    try:
        return Path.home() / DEFAULT_HOME_DIRNAME
    except RuntimeError as exc:
        log_debug("home", "No home directory available", str(exc))
        return None
