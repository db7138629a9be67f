"""CLI commands."""

from .greeting import environment, greet

__all__ = ["environment", "greet"]
