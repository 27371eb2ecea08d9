"""Structural diff/patch engine for entities.

Layers, leaf first:
1) ``ops``: diff operations and the read-only ``Diff`` tree
2) ``differ``: recursive diff over plain field maps
3) ``patcher``: last-writer-wins application of a diff tree
4) ``entity_diff``: entity-level composition, including per-kind extra fields
"""

from __future__ import annotations

from .differ import FieldMap, diff_maps
from .entity_diff import (
    EntityDiff,
    NoSpecificFields,
    PropertyFields,
    SpecificFieldHandler,
    diff_entities,
    entity_field_map,
    patch_entity,
    specific_field_handler,
)
from .ops import (
    Diff,
    DiffOp,
    DiffOpAdd,
    DiffOpChange,
    DiffOpRemove,
    NestedDiff,
    SetDiff,
)
from .patcher import patch_map

__all__ = [
    "Diff",
    "DiffOp",
    "DiffOpAdd",
    "DiffOpChange",
    "DiffOpRemove",
    "EntityDiff",
    "FieldMap",
    "NestedDiff",
    "NoSpecificFields",
    "PropertyFields",
    "SetDiff",
    "SpecificFieldHandler",
    "diff_entities",
    "diff_maps",
    "entity_field_map",
    "patch_entity",
    "patch_map",
    "specific_field_handler",
]
