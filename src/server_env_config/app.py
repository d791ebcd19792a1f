from dataclasses import dataclass

from .config.resolver import Environ
from .config.settings import Config
from .infrastructure.logging import get_logger, setup_logging

DEFAULT_PORT = 8080


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the resolved ``Config``. The embedding application owns this
    object; nothing in the package keeps a global copy.
    """

    config: Config


def create_app(
    config: Config | None = None,
    default_port: int = DEFAULT_PORT,
    environ: Environ | None = None,
) -> App:
    """Create an ``App`` from an explicit ``Config`` or the environment.

    Logging is configured from the config's tier and log level.

    Raises:
        ConfigError: If no config is given and the environment is invalid
    """
    config = config or Config.init(default_port, environ)
    setup_logging(config)
    get_logger(__name__).debug(f"Resolved configuration:\n{config.to_env()}")
    return App(config=config)
