"""Field resolvers: typed lookups over an environment snapshot.

Every resolver reads a single key from a ``Mapping[str, str]`` and either
returns a coerced value or raises a ``ConfigError`` subclass. Defaults apply
only when the key is absent; a present but invalid value always fails.
"""

import enum
import re
import typing as t
from typing import Final

from ..domain.exceptions import InvalidValueError, MissingVariableError

Environ = t.Mapping[str, str]

E = t.TypeVar("E", bound=enum.Enum)

_UNSIGNED_PATTERN: Final = re.compile(r"\+?[0-9]+")

_BOOL_VALUES: Final = {
    "true": True,
    "1": True,
    "false": False,
    "0": False,
}


def env_str(
    environ: Environ,
    name: str,
    default: str | None = None,
    *,
    allow_empty: bool = True,
) -> str:
    """Read a string variable.

    Args:
        environ: Environment snapshot to read from
        name: Variable name
        default: Value used when the variable is absent. ``None`` makes
            the variable required.
        allow_empty: Whether an empty value is acceptable

    Returns:
        The raw value, or ``default`` when absent

    Raises:
        MissingVariableError: If absent (or empty and not allowed) with no default
        InvalidValueError: If empty, not allowed, and a default exists
    """
    raw = environ.get(name)
    if raw is None:
        if default is None:
            raise MissingVariableError(name)
        return default

    if raw == "" and not allow_empty:
        if default is None:
            raise MissingVariableError(name)
        raise InvalidValueError(name, raw, "a non-empty string")

    return raw


def env_int(
    environ: Environ,
    name: str,
    default: int,
    *,
    minimum: int = 0,
    maximum: int | None = None,
) -> int:
    """Read an unsigned integer variable bounded to ``[minimum, maximum]``.

    Only ASCII digits with an optional leading ``+`` are accepted, so
    whitespace, underscores and negative numbers are rejected instead of
    being silently normalised by ``int()``.
    """
    raw = environ.get(name)
    if raw is None:
        return default

    expected = _describe_range(minimum, maximum)
    if not _UNSIGNED_PATTERN.fullmatch(raw):
        raise InvalidValueError(name, raw, expected)

    try:
        value = int(raw)
    except ValueError:
        # digit strings beyond the interpreter's conversion limit
        raise InvalidValueError(name, raw, expected) from None
    if value < minimum or (maximum is not None and value > maximum):
        raise InvalidValueError(name, raw, expected)
    return value


def env_bool(environ: Environ, name: str, default: bool) -> bool:
    """Read a boolean variable: ``true``/``false``/``1``/``0``, any case."""
    raw = environ.get(name)
    if raw is None:
        return default

    try:
        return _BOOL_VALUES[raw.lower()]
    except KeyError:
        raise InvalidValueError(name, raw, "a boolean (true, false, 1, 0)") from None


def env_enum(environ: Environ, name: str, enum_cls: type[E], default: E) -> E:
    """Read an enum variable by case-insensitive exact match on member values."""
    raw = environ.get(name)
    if raw is None:
        return default
    return parse_enum(name, raw, enum_cls)


def parse_enum(name: str, raw: str, enum_cls: type[E]) -> E:
    """Match ``raw`` against the values of ``enum_cls`` ignoring case.

    Raises:
        InvalidValueError: If no member value matches exactly
    """
    wanted = raw.lower()
    for member in enum_cls:
        if str(member.value).lower() == wanted:
            return member

    choices = ", ".join(str(member.value) for member in enum_cls)
    raise InvalidValueError(name, raw, f"one of {choices}")


def _describe_range(minimum: int, maximum: int | None) -> str:
    if maximum is None:
        return f"an integer >= {minimum}"
    return f"an integer between {minimum} and {maximum}"
