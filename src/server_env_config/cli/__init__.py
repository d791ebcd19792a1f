"""Command-line entry point for inspecting server configuration."""

from .app import create_cli_app

__all__ = ["create_cli_app", "cli"]


def cli() -> None:
    """Run ``server-env-config``: resolve the environment and report on it."""
    create_cli_app()()
