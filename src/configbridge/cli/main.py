"""
Typer-based CLI for configbridge.

Exposes the configuration entry points and the file operations used by the
desktop app's command handlers:

- flag / personality: typed settings in config.toml
- config: config.toml location and selected model
- file: AGENTS.md and config.toml by scope and kind
- export: write text to an explicit path
"""

from typing import Optional

import typer

from configbridge.core.utils.logger import setup_logging

from .config_commands import config_app, flag_app, personality_app
from .file_commands import export, file_app

app = typer.Typer(
    name="configbridge",
    help="Shared config.toml settings and file routing",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(flag_app, name="flag", help="Feature flags in config.toml")
app.add_typer(personality_app, name="personality", help="Personality setting")
app.add_typer(config_app, name="config", help="Config file location and model")
app.add_typer(file_app, name="file", help="Addressed text files")
app.command("export")(export)


@app.callback()
def callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Shared config.toml settings and file routing."""
    if log_level:
        setup_logging(level=log_level)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
