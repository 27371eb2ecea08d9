"""Application configuration helpers."""

from __future__ import annotations

from .cli import CliConfig, get_cli_config
from .env import env_int, env_log_level, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "CliConfig",
    "ConfigurationError",
    "configure_logging",
    "env_int",
    "env_log_level",
    "get_cli_config",
    "optional_env_var",
]
