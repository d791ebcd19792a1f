"""Show command implementation."""

import typer

from ...domain.exceptions import ConfigError
from ..output.console import display_config, display_config_error
from ..state import CLIState


def show(ctx: typer.Context) -> None:
    """Print the resolved configuration in .env format.

    Examples:
        server-env-config show
        server-env-config --env-file .env.staging show
    """
    state: CLIState = ctx.obj

    try:
        config = state.load_config()
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    display_config(config)
