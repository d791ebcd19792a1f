"""HTTP server binding and the public URL derived from it."""

import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..domain.exceptions import InvalidValueError
from .resolver import Environ, env_int, env_str

HOST = "HOST"
PORT = "PORT"
APP_URI = "APP_URI"

DEFAULT_HOST: Final = "127.0.0.1"
MIN_PORT: Final = 1
MAX_PORT: Final = 65535

_REPEATED_SLASHES: Final = re.compile(r"/{2,}")
_FORBIDDEN_HOST_CHARS: Final = re.compile(r"[\s\"'#]")


def _normalize_uri(uri: str) -> str:
    """Strip surrounding slashes and collapse repeated inner ones.

    Examples:
        >>> _normalize_uri("/api//v1/")
        'api/v1'
        >>> _normalize_uri("/")
        ''
    """
    return _REPEATED_SLASHES.sub("/", uri.strip("/"))


class ServerSettings(BaseModel):
    """Basic configuration for an HTTP server.

    ``url`` is computed from the other fields and cannot be passed in.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(
        default=DEFAULT_HOST,
        min_length=1,
        description="Bind address, set with HOST",
    )
    port: int = Field(
        ge=MIN_PORT,
        le=MAX_PORT,
        description="Bind port, set with PORT",
    )
    uri: str = Field(
        default="",
        description='API base path (e.g. "api/v1"), set with APP_URI',
    )

    @computed_field  # type: ignore [prop-decorator]
    @property
    def url(self) -> str:
        """Public URL: ``http://{host}:{port}/{uri}/`` with single slashes."""
        path = _normalize_uri(self.uri)
        suffix = f"{path}/" if path else ""
        return f"http://{self.host}:{self.port}/{suffix}"

    @classmethod
    def from_environ(
        cls,
        environ: Environ,
        default_port: int,
        default_host: str = DEFAULT_HOST,
    ) -> "ServerSettings":
        """Resolve ``HOST``, ``PORT`` and ``APP_URI``.

        ``PORT`` falls back to ``default_port`` when unset; the fallback is
        range-checked only when it is actually used.

        ``HOST`` is rendered unquoted in ``.env`` output, so whitespace,
        quotes and ``#`` are rejected.

        Raises:
            InvalidValueError: If ``PORT`` (or the ``default_port`` it falls
                back to) is not a valid port, or ``HOST`` is empty or
                contains forbidden characters
        """
        if PORT not in environ and not MIN_PORT <= default_port <= MAX_PORT:
            raise InvalidValueError(
                PORT,
                str(default_port),
                f"an integer between {MIN_PORT} and {MAX_PORT}",
            )

        host = env_str(environ, HOST, default_host, allow_empty=False)
        if _FORBIDDEN_HOST_CHARS.search(host):
            raise InvalidValueError(
                HOST, host, "a host without whitespace, quotes or '#'"
            )
        port = env_int(environ, PORT, default_port, minimum=MIN_PORT, maximum=MAX_PORT)
        uri = env_str(environ, APP_URI, "")
        return cls(host=host, port=port, uri=uri)
