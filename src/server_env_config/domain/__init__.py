"""Domain layer - configuration exceptions."""

from .exceptions import (
    ConfigError,
    EnvFileError,
    InvalidPoolRangeError,
    InvalidValueError,
    MissingVariableError,
)

__all__ = [
    "ConfigError",
    "EnvFileError",
    "InvalidPoolRangeError",
    "InvalidValueError",
    "MissingVariableError",
]
