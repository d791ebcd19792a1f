"""Display functions for CLI commands."""

import typer

from ...config.settings import Config
from ...domain.exceptions import ConfigError


def display_config(config: Config) -> None:
    typer.echo(config.to_env())


def display_config_ok(config: Config) -> None:
    """Display a one-line success summary.

    Args:
        config: Resolved configuration
    """
    typer.secho(
        f"✓ Configuration OK ({config.env}) - {config.server.url}",
        fg=typer.colors.GREEN,
    )


def display_config_error(error: ConfigError) -> None:
    """Display a configuration error.

    Args:
        error: The first resolution failure
    """
    typer.secho("✗ Invalid configuration", fg=typer.colors.RED)
    typer.secho(f"  Error: {error}", fg=typer.colors.RED)
