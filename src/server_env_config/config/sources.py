"""Environment snapshots: the OS environment and ``.env`` text."""

import io
import os
from pathlib import Path

from dotenv import dotenv_values

from ..domain.exceptions import EnvFileError


def _drop_unset(values: dict[str, str | None]) -> dict[str, str]:
    # dotenv yields None for bare keys without "="
    return {key: value for key, value in values.items() if value is not None}


def load_environ(env_file: Path | str | None = None) -> dict[str, str]:
    """Take a snapshot of the process environment.

    Args:
        env_file: Optional ``.env`` file whose values fill in variables
            the process environment does not set. OS values always win.

    Returns:
        A plain dict, detached from ``os.environ``

    Raises:
        EnvFileError: If ``env_file`` is given but is missing, is not a
            regular file, or cannot be read as UTF-8 text
    """
    environ: dict[str, str] = {}
    if env_file is not None:
        path = Path(env_file)
        if not path.exists():
            raise EnvFileError(path)
        if not path.is_file():
            raise EnvFileError(path, "is not a regular file")
        try:
            values = dotenv_values(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvFileError(path, f"could not be read ({exc})") from exc
        environ.update(_drop_unset(values))

    environ.update(os.environ)
    return environ


def parse_env_text(text: str) -> dict[str, str]:
    """Parse ``.env`` formatted text, such as the output of ``Config.to_env``.

    Variable expansion is disabled so values like passwords containing
    ``${...}`` come back verbatim.
    """
    return _drop_unset(dotenv_values(stream=io.StringIO(text), interpolate=False))
