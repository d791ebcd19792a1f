"""Typed, validated server configuration read from environment variables.

Example:
    >>> from server_env_config import Config
    >>> config = Config.init(8080)  # doctest: +SKIP
    >>> print(config)  # doctest: +SKIP
"""

from .app import App, create_app
from .config import (
    Config,
    DatabaseSettings,
    Environment,
    LogLevel,
    ServerSettings,
    load_environ,
    parse_env_text,
)
from .domain.exceptions import (
    ConfigError,
    EnvFileError,
    InvalidPoolRangeError,
    InvalidValueError,
    MissingVariableError,
)

__all__ = [
    "App",
    "Config",
    "ConfigError",
    "DatabaseSettings",
    "EnvFileError",
    "Environment",
    "InvalidPoolRangeError",
    "InvalidValueError",
    "LogLevel",
    "MissingVariableError",
    "ServerSettings",
    "create_app",
    "load_environ",
    "parse_env_text",
]
