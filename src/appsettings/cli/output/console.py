"""Console display functions for CLI."""

import click
import typer

from ...config.settings import Environment

GREETING = "Hello! Yippee! It worked!!"
CLOSE_PROMPT = "Press any key to close ..."


def display_greeting(environment: Environment) -> None:
    """Display the greeting and the resolved environment."""
    typer.secho(GREETING, fg=typer.colors.GREEN)
    typer.echo(f"environment is {environment}!")


def display_environment(environment: Environment) -> None:
    """Display only the environment name."""
    typer.echo(str(environment))


def display_fatal(error: Exception) -> None:
    """Display a fatal configuration error."""
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
    if error.__cause__ is not None:
        typer.secho(f"  Cause: {error.__cause__}", fg=typer.colors.RED, err=True)


def wait_for_keypress() -> None:
    """Block until a key is pressed.

    Returns immediately when stdin or stdout is not a terminal.
    """
    click.pause(info=CLOSE_PROMPT)
