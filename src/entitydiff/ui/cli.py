from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from entitydiff.adapters.serialization import (
    EntityDiffPayload,
    EntityPayload,
    entity_diff_from_payload,
    entity_diff_to_payload,
    entity_from_payload,
    entity_to_payload,
)
from entitydiff.config import ConfigurationError, configure_logging, get_cli_config
from entitydiff.domain.diff import diff_entities, patch_entity
from entitydiff.domain.errors import DataModelError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Diff and patch entity snapshots")
    subparsers = parser.add_subparsers(dest="command", required=True)

    diff = subparsers.add_parser("diff", help="Print the diff turning SOURCE into TARGET")
    diff.add_argument("source", type=Path, help="Entity JSON file to diff from")
    diff.add_argument("target", type=Path, help="Entity JSON file to diff to")

    patch = subparsers.add_parser("patch", help="Apply a diff to an entity and print the result")
    patch.add_argument("entity", type=Path, help="Entity JSON file to patch")
    patch.add_argument("diff", type=Path, help="Entity diff JSON file to apply")

    return parser.parse_args(list(argv))


def _read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc.msg}") from exc


def _write_payload(payload: BaseModel, *, indent: int) -> None:
    document = payload.model_dump(mode="json", exclude_none=True)
    sys.stdout.write(json.dumps(document, indent=indent or None, ensure_ascii=False))
    sys.stdout.write("\n")


def _run_diff(args: argparse.Namespace) -> EntityDiffPayload:
    source = entity_from_payload(EntityPayload.model_validate(_read_json(args.source)))
    target = entity_from_payload(EntityPayload.model_validate(_read_json(args.target)))
    entity_diff = diff_entities(source, target)
    log.info("Computed diff with %d operations", entity_diff.count_ops())
    return entity_diff_to_payload(entity_diff)


def _run_patch(args: argparse.Namespace) -> EntityPayload:
    entity = entity_from_payload(EntityPayload.model_validate(_read_json(args.entity)))
    entity_diff = entity_diff_from_payload(
        EntityDiffPayload.model_validate(_read_json(args.diff))
    )
    patch_entity(entity, entity_diff)
    log.info("Applied diff with %d operations", entity_diff.count_ops())
    return entity_to_payload(entity)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_cli_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)
    configure_logging(level=config.log_level)

    parsed_args = _parse_args(args_list)
    try:
        if parsed_args.command == "diff":
            payload: BaseModel = _run_diff(parsed_args)
        elif parsed_args.command == "patch":
            payload = _run_patch(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ValueError, TypeError, ValidationError, DataModelError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    _write_payload(payload, indent=config.json_indent)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
