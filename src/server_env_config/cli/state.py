"""CLI state container."""

import typing as t
from pathlib import Path

from ..app import DEFAULT_PORT
from ..config.resolver import Environ
from ..config.settings import Config
from ..config.sources import load_environ

EnvironLoader = t.Callable[[Path | None], Environ]


class CLIState:
    """Options shared by all commands.

    The environment loader is injectable so tests can hand in a fixed
    snapshot instead of the process environment.
    """

    def __init__(
        self,
        default_port: int = DEFAULT_PORT,
        env_file: Path | None = None,
        environ_loader: EnvironLoader = load_environ,
    ):
        self.default_port = default_port
        self.env_file = env_file
        self._environ_loader = environ_loader

    def load_config(self) -> Config:
        """Snapshot the environment and resolve a ``Config`` from it.

        Raises:
            ConfigError: If the env file is missing or any variable is invalid
        """
        environ = self._environ_loader(self.env_file)
        return Config.init(self.default_port, environ)
