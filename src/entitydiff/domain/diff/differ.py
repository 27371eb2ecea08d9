"""Recursive structural diff over plain field maps.

A field map maps string keys to one of:
- a nested field map (any ``Mapping``) -> recurse
- a set of strings (any ``AbstractSet``) -> added/removed set diff
- anything else -> scalar, compared with ``==``
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import TYPE_CHECKING

from entitydiff.domain.diff.ops import (
    Diff,
    DiffOpAdd,
    DiffOpChange,
    DiffOpRemove,
    NestedDiff,
    SetDiff,
)

if TYPE_CHECKING:
    from entitydiff.domain.diff.ops import DiffOp

type FieldMap = Mapping[str, object]


def diff_maps(source: FieldMap, target: FieldMap) -> Diff:
    """Compute the diff turning ``source`` into ``target``.

    Keys are visited in source order, then target-only keys in target order, so the
    result is deterministic for the same inputs.
    """
    ops: dict[str, DiffOp] = {}
    for key, old_value in source.items():
        if key not in target:
            ops[key] = DiffOpRemove(old_value)
            continue
        op = _diff_values(old_value, target[key])
        if op is not None:
            ops[key] = op
    for key, new_value in target.items():
        if key not in source:
            ops[key] = DiffOpAdd(new_value)
    return Diff(ops)


def _diff_values(old_value: object, new_value: object) -> DiffOp | None:
    if isinstance(old_value, Mapping) and isinstance(new_value, Mapping):
        nested = diff_maps(old_value, new_value)  # pyright: ignore[reportUnknownArgumentType]
        return NestedDiff(nested) if nested else None
    if _is_string_set(old_value) and _is_string_set(new_value):
        added = frozenset(new_value) - frozenset(old_value)
        removed = frozenset(old_value) - frozenset(new_value)
        if added or removed:
            return SetDiff(added=added, removed=removed)
        return None
    if old_value == new_value:
        return None
    return DiffOpChange(old_value, new_value)


def _is_string_set(value: object) -> bool:
    return isinstance(value, Set) and not isinstance(value, Mapping)
