"""
Feature flag, personality and config-file CLI commands for configbridge.

Provides:
- flag get/set: read or toggle a top-level feature flag in config.toml
- personality get/set: read or choose the interaction style
- config path/model: show where config.toml lives and which model it selects
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from configbridge.core.config import settings
from configbridge.errors import ValidationError

from .exit_codes import CliExit, handle_errors

console = Console()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

flag_app = typer.Typer(name="flag", help="Feature flags in config.toml", no_args_is_help=True)
personality_app = typer.Typer(
    name="personality", help="Personality setting in config.toml", no_args_is_help=True
)
config_app = typer.Typer(name="config", help="Config file location and model", no_args_is_help=True)


def parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(f"Expected true or false, got {raw!r}")


def _format_optional(value) -> str:
    return "unset" if value is None else str(value).lower()


@flag_app.command("get")
@handle_errors
def flag_get(key: str = typer.Argument(..., help="Feature flag name, e.g. steer")) -> None:
    """Show a feature flag (true, false or unset)."""
    typer.echo(_format_optional(settings.read_feature_flag(key)))


@flag_app.command("set")
@handle_errors
def flag_set(
    key: str = typer.Argument(..., help="Feature flag name, e.g. steer"),
    value: str = typer.Argument(..., help="true/false (also on/off, yes/no, 1/0)"),
) -> None:
    """Enable or disable a feature flag."""
    enabled = parse_bool(value)
    settings.write_feature_enabled(key, enabled)
    console.print(f"[green]{key.strip()}[/green] = {str(enabled).lower()}")


@personality_app.command("get")
@handle_errors
def personality_get() -> None:
    """Show the stored personality (friendly, pragmatic or unset)."""
    personality = settings.read_personality()
    typer.echo("unset" if personality is None else personality.value)


@personality_app.command("set")
@handle_errors
def personality_set(
    value: str = typer.Argument(..., help="friendly or pragmatic"),
) -> None:
    """Choose the personality. Unrecognized values are ignored."""
    settings.write_personality(value)
    personality = settings.read_personality()
    console.print(f"personality = {'unset' if personality is None else personality.value}")


@config_app.command("path")
@handle_errors
def config_path() -> None:
    """Print the path of config.toml."""
    path = settings.config_toml_path()
    if path is None:
        raise CliExit.config_error("Unable to resolve config home")
    typer.echo(str(path))


@config_app.command("model")
@handle_errors
def config_model(
    home: Optional[Path] = typer.Option(None, "--home", help="Config home to read instead of the default"),
) -> None:
    """Print the model selected in config.toml."""
    model = settings.read_config_model(home)
    typer.echo(model if model is not None else "unset")
