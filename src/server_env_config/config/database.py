"""Database connection and pool settings."""

from datetime import timedelta
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..domain.exceptions import InvalidPoolRangeError
from .environment import Environment
from .resolver import Environ, env_bool, env_int, env_str

DATABASE_URL = "DATABASE_URL"
MIN_CONNECTIONS = "MIN_CONNECTIONS"
MAX_CONNECTIONS = "MAX_CONNECTIONS"
ACQUIRE_TIMEOUT_MS = "ACQUIRE_TIMEOUT_MS"
IDLE_TIMEOUT_SEC = "IDLE_TIMEOUT_SEC"
TEST_BEFORE_ACQUIRE = "TEST_BEFORE_ACQUIRE"

U32_MAX: Final = 2**32 - 1
MAX_TIMEOUT_SEC: Final = timedelta.max.days * 86400
MAX_TIMEOUT_MS: Final = MAX_TIMEOUT_SEC * 1000

TEST_DATABASE_SUFFIX: Final = "_test"


def _test_database_url(url: str) -> str:
    """Append ``_test`` to the URL unless it already has it or has arguments."""
    if url.endswith(TEST_DATABASE_SUFFIX) or "?" in url:
        return url
    return f"{url}{TEST_DATABASE_SUFFIX}"


class DatabaseSettings(BaseModel):
    """Settings used to establish a connection pool with a database.

    Only ``database_url`` is required; every other value has a default.
    The URL is stored as-is: no connection is attempted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database_url: str = Field(min_length=1, description="Set with DATABASE_URL")
    min_connections: int = Field(
        default=1,
        ge=0,
        le=U32_MAX,
        description="Connections opened at start-up, set with MIN_CONNECTIONS",
    )
    max_connections: int = Field(
        default=10,
        ge=0,
        le=U32_MAX,
        description="Upper bound of the pool, set with MAX_CONNECTIONS",
    )
    acquire_timeout: timedelta = Field(
        default=timedelta(milliseconds=750),
        description="Time allowed to acquire a connection (ACQUIRE_TIMEOUT_MS)",
    )
    idle_timeout: timedelta = Field(
        default=timedelta(seconds=300),
        description="Idle connections older than this are closed (IDLE_TIMEOUT_SEC)",
    )
    test_before_acquire: bool = Field(
        default=False,
        description="Ping connections before handing them out (TEST_BEFORE_ACQUIRE)",
    )

    @property
    def acquire_timeout_ms(self) -> int:
        return self.acquire_timeout // timedelta(milliseconds=1)

    @property
    def idle_timeout_sec(self) -> int:
        return self.idle_timeout // timedelta(seconds=1)

    @model_validator(mode="after")
    def _validate_pool_range(self) -> "DatabaseSettings":
        if self.min_connections > self.max_connections:
            raise ValueError(
                f"min_connections ({self.min_connections}) must not exceed "
                f"max_connections ({self.max_connections})"
            )
        return self

    @classmethod
    def from_environ(
        cls,
        environ: Environ,
        environment: Environment = Environment.LOCAL,
    ) -> "DatabaseSettings":
        """Resolve the database variables for the given deployment tier.

        Under ``Environment.TEST`` the URL gets a ``_test`` suffix unless it
        already ends with it or carries connection arguments (``?``), so a
        test run never points at a local or production database by mistake.

        Raises:
            MissingVariableError: If ``DATABASE_URL`` is absent or empty
            InvalidValueError: If a numeric or boolean variable is malformed
            InvalidPoolRangeError: If ``MIN_CONNECTIONS > MAX_CONNECTIONS``
        """
        url = env_str(environ, DATABASE_URL, allow_empty=False)
        if environment == Environment.TEST:
            url = _test_database_url(url)

        min_connections = env_int(environ, MIN_CONNECTIONS, 1, maximum=U32_MAX)
        max_connections = env_int(environ, MAX_CONNECTIONS, 10, maximum=U32_MAX)
        if min_connections > max_connections:
            raise InvalidPoolRangeError(min_connections, max_connections)

        acquire_timeout_ms = env_int(
            environ, ACQUIRE_TIMEOUT_MS, 750, maximum=MAX_TIMEOUT_MS
        )
        idle_timeout_sec = env_int(
            environ, IDLE_TIMEOUT_SEC, 300, maximum=MAX_TIMEOUT_SEC
        )
        test_before_acquire = env_bool(environ, TEST_BEFORE_ACQUIRE, False)

        return cls(
            database_url=url,
            min_connections=min_connections,
            max_connections=max_connections,
            acquire_timeout=timedelta(milliseconds=acquire_timeout_ms),
            idle_timeout=timedelta(seconds=idle_timeout_sec),
            test_before_acquire=test_before_acquire,
        )
