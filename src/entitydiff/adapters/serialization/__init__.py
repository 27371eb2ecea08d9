"""Serialization boundary: JSON payloads for entities and entity diffs."""

from __future__ import annotations

from .schema import (
    ClaimPayload,
    DataValuePayload,
    DiffOpPayload,
    EntityDiffPayload,
    EntityPayload,
    SnakPayload,
)
from .translator import (
    claim_from_payload,
    claim_to_payload,
    entity_diff_from_payload,
    entity_diff_to_payload,
    entity_from_payload,
    entity_to_payload,
    snak_from_payload,
    snak_to_payload,
)

__all__ = [
    "ClaimPayload",
    "DataValuePayload",
    "DiffOpPayload",
    "EntityDiffPayload",
    "EntityPayload",
    "SnakPayload",
    "claim_from_payload",
    "claim_to_payload",
    "entity_diff_from_payload",
    "entity_diff_to_payload",
    "entity_from_payload",
    "entity_to_payload",
    "snak_from_payload",
    "snak_to_payload",
]
