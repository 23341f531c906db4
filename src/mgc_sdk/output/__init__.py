"""Output formatting for CLI commands."""
