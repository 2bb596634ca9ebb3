"""
Core modules for configbridge.

- config: configuration document persistence and typed accessors
- files: local/remote file operation routing
- utils: logging, paths and atomic writes
"""
