"""Deployment tiers and log levels."""

import enum

from .resolver import Environ, env_enum, parse_enum

APP_ENV = "APP_ENV"
LOG_LEVEL = "LOG_LEVEL"


class Environment(enum.StrEnum):
    """Deployment environment the application runs in.

    Read from ``APP_ENV``; ``LOCAL`` when the variable is not set.
    """

    LOCAL = "local"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def default(cls) -> "Environment":
        return cls.LOCAL

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Parse a tier name, ignoring case.

        Raises:
            InvalidValueError: If ``value`` is not a known tier
        """
        return parse_enum(APP_ENV, value, cls)

    @classmethod
    def from_environ(cls, environ: Environ) -> "Environment":
        """Resolve the tier from ``APP_ENV``."""
        return env_enum(environ, APP_ENV, cls, cls.default())


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging setup."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_environ(cls, environ: Environ) -> "LogLevel":
        return env_enum(environ, LOG_LEVEL, cls, cls.INFO)
