"""
Addressed text-file and export CLI commands for configbridge.

The CLI runs against this machine, so the router is always in local mode
here; remote sessions are served by the desktop app's own channel.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from configbridge.core.files import ExecutionMode, FileAddress, FileRouter, LocalFileCore, write_export
from configbridge.errors import ValidationError

from .exit_codes import handle_errors

console = Console(stderr=True)

file_app = typer.Typer(name="file", help="Read and write AGENTS.md / config.toml by scope", no_args_is_help=True)


def parse_workspace_roots(entries: Optional[List[str]]) -> dict[str, Path]:
    roots: dict[str, Path] = {}
    for entry in entries or []:
        workspace_id, sep, raw_path = entry.partition("=")
        if not sep or not workspace_id.strip() or not raw_path.strip():
            raise ValidationError(f"Expected ID=PATH, got {entry!r}")
        roots[workspace_id.strip()] = Path(raw_path.strip()).expanduser()
    return roots


def _build_router(workspace_roots: Optional[List[str]]) -> FileRouter:
    return FileRouter(LocalFileCore(parse_workspace_roots(workspace_roots)))


def _content_or_stdin(content: Optional[str]) -> str:
    return content if content is not None else sys.stdin.read()


@file_app.command("read")
@handle_errors
def file_read(
    scope: str = typer.Argument(..., help="workspace or global"),
    kind: str = typer.Argument(..., help="agents or config"),
    workspace: Optional[str] = typer.Option(
        None, "--workspace", "-w", help="Workspace id for workspace-scoped files"
    ),
    workspace_root: Optional[List[str]] = typer.Option(
        None, "--workspace-root", help="Register a workspace as ID=PATH (repeatable)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full response as JSON"),
) -> None:
    """Print an addressed text file."""
    address = FileAddress.of(scope, kind, workspace)
    response = _build_router(workspace_root).read(
        address.scope, address.kind, address.workspace_id, ExecutionMode.LOCAL
    )
    if as_json:
        typer.echo(response.model_dump_json())
        return
    if not response.exists:
        console.print("[yellow]File does not exist yet[/yellow]")
        return
    typer.echo(response.content, nl=False)
    if response.truncated:
        console.print("[yellow]Output truncated[/yellow]")


@file_app.command("write")
@handle_errors
def file_write(
    scope: str = typer.Argument(..., help="workspace or global"),
    kind: str = typer.Argument(..., help="agents or config"),
    workspace: Optional[str] = typer.Option(
        None, "--workspace", "-w", help="Workspace id for workspace-scoped files"
    ),
    workspace_root: Optional[List[str]] = typer.Option(
        None, "--workspace-root", help="Register a workspace as ID=PATH (repeatable)"
    ),
    content: Optional[str] = typer.Option(None, "--content", help="Content to write (default: stdin)"),
) -> None:
    """Overwrite an addressed text file."""
    address = FileAddress.of(scope, kind, workspace)
    _build_router(workspace_root).write(
        address.scope,
        address.kind,
        address.workspace_id,
        _content_or_stdin(content),
        ExecutionMode.LOCAL,
    )
    console.print(f"[green]Wrote {address.scope.value} {address.kind.value} file[/green]")


@handle_errors
def export(
    path: str = typer.Argument(..., help="Target file path"),
    content: Optional[str] = typer.Option(None, "--content", help="Content to write (default: stdin)"),
) -> None:
    """Write text to an arbitrary path, creating missing directories."""
    target = write_export(path, _content_or_stdin(content))
    console.print(f"[green]Exported to {target}[/green]")
