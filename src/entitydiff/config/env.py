"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return a stripped environment variable, or None when it is unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_int(name: str, *, default: int, minimum: int | None = None) -> int:
    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(name, f"must be an integer, got {raw!r}") from exc
    if minimum is not None and value < minimum:
        raise ConfigurationError(name, f"must be >= {minimum}, got {value}")
    return value


def env_log_level(name: str, *, default: int = logging.INFO) -> int:
    raw = optional_env_var(name)
    if raw is None:
        return default
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise ConfigurationError(name, f"must be a logging level name, got {raw!r}")
    return level
