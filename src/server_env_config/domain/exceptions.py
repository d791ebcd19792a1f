"""Custom exceptions for environment configuration."""

from pathlib import Path


class ConfigError(Exception):
    """Base exception for configuration errors.

    Every resolution failure is a startup-fatal error: the embedding
    application is expected to report it and exit.
    """

    pass


class MissingVariableError(ConfigError):
    """Raised when a required environment variable is absent or empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must be set")


class InvalidValueError(ConfigError):
    """Raised when a variable is present but cannot be coerced.

    Covers numeric parse failures, out-of-range numbers, unknown enum
    variants and malformed booleans.
    """

    def __init__(self, name: str, raw: str, expected: str) -> None:
        self.name = name
        self.raw = raw
        self.expected = expected
        super().__init__(f'{name} invalid value "{raw}": expected {expected}')


class InvalidPoolRangeError(ConfigError):
    """Raised when the minimum pool size exceeds the maximum."""

    def __init__(self, min_connections: int, max_connections: int) -> None:
        self.min_connections = min_connections
        self.max_connections = max_connections
        message = (
            f"MIN_CONNECTIONS ({min_connections}) must not exceed "
            f"MAX_CONNECTIONS ({max_connections})"
        )
        super().__init__(message)


class EnvFileError(ConfigError):
    """Raised when an explicitly requested ``.env`` file cannot be read."""

    def __init__(self, path: Path, reason: str = "not found") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Env file {reason}: {path}")
