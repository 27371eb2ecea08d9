"""Command line configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import env_int, env_log_level

LOG_LEVEL_VAR = "ENTITYDIFF_LOG_LEVEL"
JSON_INDENT_VAR = "ENTITYDIFF_JSON_INDENT"
DEFAULT_JSON_INDENT = 2


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Holds command line output configuration values."""

    log_level: int = logging.INFO
    json_indent: int = DEFAULT_JSON_INDENT


def get_cli_config() -> CliConfig:
    return CliConfig(
        log_level=env_log_level(LOG_LEVEL_VAR),
        json_indent=env_int(JSON_INDENT_VAR, default=DEFAULT_JSON_INDENT, minimum=0),
    )
