"""Check command implementation."""

import typer

from ...domain.exceptions import ConfigError
from ..output.console import display_config_error, display_config_ok
from ..state import CLIState


def check(ctx: typer.Context) -> None:
    """Validate the environment and exit non-zero if it is invalid.

    Examples:
        server-env-config check
        server-env-config --default-port 3000 check
    """
    state: CLIState = ctx.obj

    try:
        config = state.load_config()
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    display_config_ok(config)
