"""
Shared pytest fixtures and configuration for configbridge tests.

This module provides a throwaway config home, a fake remote channel and a
Typer test client.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

# Put `src/` first so `import configbridge` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from configbridge.core.utils.logger import reset_logging, setup_logging  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_logger():
    # bind handlers to pytest's stdout, not to a CliRunner stream that closes
    reset_logging()
    setup_logging()
    yield
    reset_logging()


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch) -> Path:
    """Point the default config home at an empty temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("CONFIGBRIDGE_HOME", str(home))
    return home


@pytest.fixture
def no_config_home(monkeypatch) -> None:
    """Make the default home resolver report that no home is configured."""
    from configbridge.core.config import settings

    monkeypatch.setattr(settings, "resolve_default_config_home", lambda: None)


@pytest.fixture
def write_config(config_home: Path):
    """Write raw TOML into the config home's config.toml."""

    def _write(text: str) -> Path:
        config_home.mkdir(parents=True, exist_ok=True)
        path = config_home / "config.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class FakeRemoteChannel:
    """Records remote calls and answers with a canned reply or error."""

    def __init__(self, reply: Any = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def call_remote(self, operation: str, payload: Dict[str, Any]) -> Any:
        self.calls.append((operation, payload))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_remote_channel():
    return FakeRemoteChannel


@pytest.fixture
def typer_test_client():
    """Typer test client for CLI testing."""
    from typer.testing import CliRunner

    return CliRunner()
