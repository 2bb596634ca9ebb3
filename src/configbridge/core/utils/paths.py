import os
from pathlib import Path

# Allow override of the config home (e.g. tests, portable installs): CONFIGBRIDGE_HOME=/data/cfg
HOME_ENV_VAR = "CONFIGBRIDGE_HOME"
DEFAULT_HOME_DIRNAME = ".configbridge"

# Logging overrides, read when the logger is first set up.
LOG_LEVEL_ENV_VAR = "CONFIGBRIDGE_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CONFIGBRIDGE_LOG_FILE"

CONFIG_FILE_NAME = "config.toml"
AGENTS_FILE_NAME = "AGENTS.md"

# Reads of addressed text files stop after this many bytes.
MAX_TEXT_FILE_BYTES = 400_000


def home_override() -> Path | None:
    """Return the configured home override, or None when unset or blank."""
    raw = os.getenv(HOME_ENV_VAR, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV_VAR, "").strip() or "INFO"


def default_log_file() -> str | None:
    return os.getenv(LOG_FILE_ENV_VAR, "").strip() or None
