"""Shared fixtures for CLI tests."""

import pytest

from server_env_config.cli.app import create_cli_app
from server_env_config.cli.state import CLIState


@pytest.fixture
def cli_environ(production_environ):
    """Snapshot handed to the CLI instead of the process environment."""
    return dict(production_environ)


@pytest.fixture
def environ_loader(mocker, cli_environ):
    """Mocked environment loader returning the fixed snapshot."""
    return mocker.Mock(return_value=cli_environ)


@pytest.fixture
def cli_state(environ_loader):
    """CLIState reading from the mocked loader."""
    return CLIState(default_port=9999, environ_loader=environ_loader)


@pytest.fixture
def test_app(cli_state):
    """CLI app with the test state injected."""
    return create_cli_app(state=cli_state)


@pytest.fixture
def default_app():
    """Provide CLI app with default state."""
    return create_cli_app()
