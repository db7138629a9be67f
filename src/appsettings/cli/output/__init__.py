"""Console output helpers for CLI commands."""
