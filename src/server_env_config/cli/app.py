"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..app import DEFAULT_PORT
from ..config.environment import LogLevel
from ..infrastructure.logging import configure_logger
from .commands import check, show
from .state import CLIState


def create_cli_app(state: CLIState | None = None) -> typer.Typer:
    """Create CLI application with optional state override.

    Args:
        state: Optional CLIState override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="server-env-config",
        help="Resolve and validate server configuration from the environment",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        env_file: Optional[Path] = typer.Option(
            None,
            "--env-file",
            "-e",
            help=".env file filling in variables the environment does not set",
        ),
        default_port: int = typer.Option(
            DEFAULT_PORT,
            "--default-port",
            "-p",
            help="Port used when PORT is not set",
            min=1,
            max=65535,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        configure_logger(level=LogLevel.DEBUG if verbose else LogLevel.WARNING)

        if state is not None:
            ctx.obj = state
        else:
            ctx.obj = CLIState(default_port=default_port, env_file=env_file)

    app.command()(show)
    app.command()(check)

    return app
