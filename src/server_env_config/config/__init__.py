"""Configuration resolved from environment variables."""

from .database import DatabaseSettings
from .environment import Environment, LogLevel
from .resolver import Environ, env_bool, env_enum, env_int, env_str
from .server import ServerSettings
from .settings import Config
from .sources import load_environ, parse_env_text

__all__ = [
    "Config",
    "DatabaseSettings",
    "Environ",
    "Environment",
    "LogLevel",
    "ServerSettings",
    "env_bool",
    "env_enum",
    "env_int",
    "env_str",
    "load_environ",
    "parse_env_text",
]
