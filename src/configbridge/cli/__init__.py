"""Command-line interface for configbridge."""
