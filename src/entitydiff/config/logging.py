"""Logging setup for the command line."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once.

    Records go to stderr; stdout is reserved for the JSON documents the CLI prints.
    Pass ``force=True`` to replace handlers that are already installed.
    """

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
