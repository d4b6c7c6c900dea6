"""Reading ``LEADERBOARD_*`` settings from the environment.

A blank or missing variable always means "use the default". What happens
to a value that cannot be read depends on ``strict``: strict callers get a
``ConfigError`` naming the variable, lenient callers get a warning in the
log and the default.
"""

from __future__ import annotations

import logging
import os

from leaderboard.errors import ConfigError

logger = logging.getLogger(__name__)

TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSEY: frozenset[str] = frozenset({"0", "false", "no", "off", ""})

__all__ = ["FALSEY", "TRUTHY", "ConfigError", "parse_bool", "parse_enum", "parse_int"]


def _read(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def parse_bool(
    name: str,
    default: bool = False,
    *,
    strict: bool = True,
) -> bool:
    """Read an on/off switch such as ``LEADERBOARD_STRICT_ENV``.

    ``1/true/yes/on`` switch it on and ``0/false/no/off`` switch it off, in
    any case. A variable set to an empty string counts as off.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    switch = raw.strip().casefold()
    if switch in TRUTHY or switch in FALSEY:
        return switch in TRUTHY
    if strict:
        raise ConfigError(f"{name} must be one of 1/0, true/false, yes/no, on/off; got {raw!r}")
    logger.warning("Ignoring %s=%r (not an on/off value), keeping %s", name, raw, default)
    return default


def parse_int(
    name: str,
    default: int,
    *,
    min_value: int | None = None,
    strict: bool = True,
) -> int:
    """Read a whole-number setting (interval, population, seed, level bounds).

    A value below ``min_value`` is rejected in strict mode and raised to
    ``min_value`` otherwise.
    """
    raw = _read(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        if strict:
            raise ConfigError(f"{name} must be a whole number, got {raw!r}") from None
        logger.warning("Ignoring %s=%r (not a whole number), keeping %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        if strict:
            raise ConfigError(f"{name} must be at least {min_value}, got {value}")
        logger.warning("Raising %s from %d to its floor %d", name, value, min_value)
        return min_value
    return value


def parse_enum(
    name: str,
    allowed: set[str],
    default: str,
    *,
    strict: bool = True,
) -> str:
    """Read a choice such as ``LEADERBOARD_METHOD``, ignoring case."""
    raw = _read(name)
    if raw is None:
        return default
    by_key = {choice.casefold(): choice for choice in allowed}
    choice = by_key.get(raw.casefold())
    if choice is not None:
        return choice
    choices = ", ".join(sorted(allowed))
    if strict:
        raise ConfigError(f"{name} must be one of: {choices}; got {raw!r}")
    logger.warning("Ignoring %s=%r (choices: %s), keeping %s", name, raw, choices, default)
    return default
