"""Apply a diff tree to a plain field map.

Merge policy is last-writer-wins and idempotent:
- ``Add`` sets the key, overwriting any present value
- ``Remove`` deletes the key; a missing key is not an error
- ``Change`` overwrites with the new value without checking the recorded old value
- ``NestedDiff`` recurses, starting from an empty map when the key is absent
- ``SetDiff`` yields ``(current - removed) | added``

Stale ``Change`` operations are logged at DEBUG level and applied anyway.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set
from typing import TYPE_CHECKING

from entitydiff.domain.diff.ops import (
    DiffOpAdd,
    DiffOpChange,
    DiffOpRemove,
    NestedDiff,
    SetDiff,
)

if TYPE_CHECKING:
    from entitydiff.domain.diff.differ import FieldMap
    from entitydiff.domain.diff.ops import Diff

log = logging.getLogger(__name__)


def patch_map(base: FieldMap, diff: Diff) -> dict[str, object]:
    """Return a new map: ``base`` with ``diff`` applied. ``base`` is not modified."""
    patched: dict[str, object] = dict(base)
    for key, op in diff.items():
        if isinstance(op, DiffOpAdd):
            patched[key] = op.new_value
        elif isinstance(op, DiffOpRemove):
            patched.pop(key, None)
        elif isinstance(op, DiffOpChange):
            if key in patched and patched[key] != op.old_value:
                log.debug("Overwriting %r: current value differs from the recorded one", key)
            patched[key] = op.new_value
        elif isinstance(op, NestedDiff):
            current = patched.get(key)
            current_map: FieldMap = current if isinstance(current, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]
            patched[key] = patch_map(current_map, op.diff)
        elif isinstance(op, SetDiff):
            current = patched.get(key)
            current_set: frozenset[str] = (
                frozenset(current) if isinstance(current, Set) else frozenset()  # pyright: ignore[reportUnknownArgumentType]
            )
            patched[key] = (current_set - op.removed) | op.added
    return patched
