"""Logging setup built on loguru.

Modules obtain a logger with ``get_logger(__name__)``. The first call
configures loguru with defaults unless ``setup_logging`` or
``configure_logger`` ran before.
"""

import sys
import typing as t

from loguru import logger

from ..config.environment import Environment, LogLevel

if t.TYPE_CHECKING:
    import loguru

    from ..config.settings import Config

_HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.LOCAL,
) -> None:
    """Replace loguru sinks with a single stderr sink.

    Production emits one JSON document per record; every other tier gets a
    human-readable line.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "server_env_config"})
    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_HUMAN_FORMAT,
        )
    _configured = True


def setup_logging(config: "Config") -> None:
    """Configure logging from a resolved ``Config``."""
    configure_logger(level=config.log_level, environment=config.env)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all sinks so the next ``get_logger`` call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
