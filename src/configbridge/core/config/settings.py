"""Config entry points bound to the default config home.

Each call resolves the home once, loads ``config.toml`` fresh and, for
writes, persists the whole document again. When no home resolves, reads
return None and writes succeed without touching the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from configbridge.core.config import codec, document
from configbridge.core.config.codec import FeatureKey, Personality
from configbridge.core.config.home import resolve_default_config_home
from configbridge.core.utils.logger import log_configuration_change, log_debug
from configbridge.errors import ResolutionError

STEER_KEY = "steer"
COLLABORATION_MODES_KEY = "collaboration_modes"
UNIFIED_EXEC_KEY = "unified_exec"
APPS_KEY = "apps"


def read_feature_flag(key: str) -> bool | None:
    root = resolve_default_config_home()
    if root is None:
        return None
    _, doc = document.load(root)
    return codec.read_flag(doc, key)


def write_feature_enabled(key: str, enabled: bool) -> None:
    feature_key = FeatureKey.parse(key)
    root = resolve_default_config_home()
    if root is None:
        log_debug("config", f"No config home; skipping write of {feature_key}")
        return
    _, doc = document.load(root)
    previous = codec.read_flag(doc, feature_key)
    codec.write_flag(doc, feature_key, enabled)
    document.persist(root, doc)
    log_configuration_change(str(feature_key), previous, enabled)


def read_steer_enabled() -> bool | None:
    return read_feature_flag(STEER_KEY)


def write_steer_enabled(enabled: bool) -> None:
    write_feature_enabled(STEER_KEY, enabled)


def read_collaboration_modes_enabled() -> bool | None:
    return read_feature_flag(COLLABORATION_MODES_KEY)


def write_collaboration_modes_enabled(enabled: bool) -> None:
    write_feature_enabled(COLLABORATION_MODES_KEY, enabled)


def read_unified_exec_enabled() -> bool | None:
    return read_feature_flag(UNIFIED_EXEC_KEY)


def write_unified_exec_enabled(enabled: bool) -> None:
    write_feature_enabled(UNIFIED_EXEC_KEY, enabled)


def read_apps_enabled() -> bool | None:
    return read_feature_flag(APPS_KEY)


def write_apps_enabled(enabled: bool) -> None:
    write_feature_enabled(APPS_KEY, enabled)


def read_personality() -> Personality | None:
    root = resolve_default_config_home()
    if root is None:
        return None
    _, doc = document.load(root)
    return codec.read_personality(doc)


def write_personality(raw: str) -> None:
    """
    Persist a personality choice.

    Unrecognized values are not stored; the document is still written
    back unchanged.
    """
    root = resolve_default_config_home()
    if root is None:
        return
    _, doc = document.load(root)
    previous = codec.read_top_level_string(doc, codec.PERSONALITY_KEY)
    if codec.write_personality(doc, raw):
        log_configuration_change(
            codec.PERSONALITY_KEY,
            previous,
            codec.read_top_level_string(doc, codec.PERSONALITY_KEY),
        )
    else:
        log_debug("config", f"Ignoring unrecognized personality {raw!r}")
    document.persist(root, doc)


def config_toml_path() -> Path | None:
    root = resolve_default_config_home()
    return document.config_file_path(root) if root is not None else None


def read_config_model(home_override: Path | None = None) -> str | None:
    """
    Read the top-level ``model`` entry.

    Unlike the other entry points a root is mandatory here: the explicit
    override wins, then the default home.

    Raises:
        ResolutionError: neither the override nor the default home resolves
    """
    root = home_override if home_override is not None else resolve_default_config_home()
    if root is None:
        raise ResolutionError("Unable to resolve config home")
    _, doc = document.load(root)
    return codec.read_top_level_string(doc, codec.MODEL_KEY)
