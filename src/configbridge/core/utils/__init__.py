"""
Utils module for configbridge core functionality.

This module contains logging utilities, path configuration and the atomic
text writer shared by the config store and the file-core.
"""
