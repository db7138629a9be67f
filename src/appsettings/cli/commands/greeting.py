"""Greeting and environment command implementations."""

import typer

from ..output.console import display_environment, display_greeting, wait_for_keypress
from ..state import CLIState


def greet(
    ctx: typer.Context,
    no_wait: bool = typer.Option(
        False, "--no-wait", help="Exit without waiting for a keypress"
    ),
) -> None:
    """Print a greeting with the resolved environment, then wait for a key.

    Examples:
        appsettings greet
        appsettings --config-file App.config greet --no-wait
    """
    state: CLIState = ctx.obj

    display_greeting(state.settings.environment)

    if no_wait or not state.settings.wait_for_key:
        return
    wait_for_keypress()


def environment(ctx: typer.Context) -> None:
    """Print the resolved environment name only.

    Examples:
        APPSETTINGS_ENVIRONMENT=staging appsettings environment
    """
    state: CLIState = ctx.obj
    display_environment(state.settings.environment)
