"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..config.reader import ConfigReader
from ..config.settings import LogLevel, Settings, build_settings
from ..config.sources import DEFAULT_ENV_PREFIX, create_source
from ..domain.exceptions import SourceUnavailableError
from ..infrastructure.logging import configure_logger, setup_logging
from .commands import environment, greet
from .output.console import display_fatal
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, reader: ConfigReader | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or reader override.

    Args:
        settings: Optional Settings override for testing; skips resolution
        reader: Optional ConfigReader override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="appsettings",
        help="Resolve the deployment environment from app configuration",
        invoke_without_command=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        config_file: Optional[Path] = typer.Option(
            None,
            "--config-file",
            "-c",
            help="App.config style XML file with an appSettings section",
        ),
        env_prefix: str = typer.Option(
            DEFAULT_ENV_PREFIX,
            "--env-prefix",
            help="Prefix for environment variable lookups",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            # Logging must honour --verbose while the reader resolves
            configure_logger(level=LogLevel.DEBUG if verbose else LogLevel.INFO)
            resolved_reader = reader
            if resolved_reader is None:
                resolved_reader = ConfigReader(
                    create_source(config_file=config_file, env_prefix=env_prefix)
                )
            try:
                resolved_settings = build_settings(
                    resolved_reader,
                    log_level=LogLevel.DEBUG if verbose else None,
                    config_file=config_file,
                )
            except SourceUnavailableError as e:
                display_fatal(e)
                raise typer.Exit(code=1)

        setup_logging(resolved_settings)
        ctx.obj = CLIState(resolved_settings)

        # Running without a command behaves like `greet`
        if ctx.invoked_subcommand is None:
            greet(ctx, no_wait=False)

    app.command()(greet)
    app.command()(environment)
    return app
