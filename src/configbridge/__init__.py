"""
configbridge - Shared configuration and file routing for the desktop app

Manages the single human-editable ``config.toml`` shared by the application
and routes text-file operations either to the local filesystem or to a
remote backend, without callers needing to know which one is active.

Package Structure:
- core/config/: Document store, flag/setting codec and home-bound entry points
- core/files/: Scope/kind addressing, local file-core, router and export writer
- core/utils/: Logging, paths and atomic writes
- cli/: Typer command surface

"""

__version__ = "0.3"
