"""Diff operations and the immutable diff tree that holds them.

Value operations own their values: a value is detached from its source when the
operation is built and every read hands out a fresh copy, so nothing obtained from a
diff can change it.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def _is_string_set(value: object) -> bool:
    return isinstance(value, Set) and not isinstance(value, Mapping)


def _detach(value: object) -> object:
    """Detach ``value`` from its source: maps are rebuilt, sets frozen, copyables copied."""
    if isinstance(value, Mapping):
        return {key: _detach(item) for key, item in value.items()}  # pyright: ignore[reportUnknownVariableType]
    if _is_string_set(value):
        return frozenset(value)  # pyright: ignore[reportUnknownArgumentType]
    copy = getattr(value, "copy", None)
    if callable(copy) and not isinstance(value, str | frozenset):
        return copy()
    return value


@dataclass(frozen=True, slots=True)
class DiffOpAdd:
    _new_value: object

    def __init__(self, new_value: object) -> None:
        object.__setattr__(self, "_new_value", _detach(new_value))

    def __repr__(self) -> str:
        return f"DiffOpAdd({self._new_value!r})"

    @property
    def new_value(self) -> object:
        return _detach(self._new_value)


@dataclass(frozen=True, slots=True)
class DiffOpRemove:
    _old_value: object

    def __init__(self, old_value: object) -> None:
        object.__setattr__(self, "_old_value", _detach(old_value))

    def __repr__(self) -> str:
        return f"DiffOpRemove({self._old_value!r})"

    @property
    def old_value(self) -> object:
        return _detach(self._old_value)


@dataclass(frozen=True, slots=True)
class DiffOpChange:
    """Replace ``old_value`` with ``new_value``. ``old_value`` is informational."""

    _old_value: object
    _new_value: object

    def __init__(self, old_value: object, new_value: object) -> None:
        object.__setattr__(self, "_old_value", _detach(old_value))
        object.__setattr__(self, "_new_value", _detach(new_value))

    def __repr__(self) -> str:
        return f"DiffOpChange({self._old_value!r}, {self._new_value!r})"

    @property
    def old_value(self) -> object:
        return _detach(self._old_value)

    @property
    def new_value(self) -> object:
        return _detach(self._new_value)


@dataclass(frozen=True, slots=True)
class NestedDiff:
    """Recursive diff of a keyed sub-map."""

    diff: Diff


@dataclass(frozen=True, slots=True)
class SetDiff:
    """Order- and duplicate-insensitive change of a set of strings."""

    added: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "added", frozenset(self.added))
        object.__setattr__(self, "removed", frozenset(self.removed))


type DiffOp = DiffOpAdd | DiffOpRemove | DiffOpChange | NestedDiff | SetDiff


class Diff(Mapping[str, DiffOp]):
    """Read-only mapping from field key to diff operation.

    An empty diff means "no difference". Equality is mapping equality, so two diffs
    computed from the same inputs compare equal.
    """

    __slots__ = ("_ops",)

    def __init__(self, ops: Mapping[str, DiffOp] | None = None) -> None:
        self._ops: dict[str, DiffOp] = dict(ops) if ops is not None else {}

    def __getitem__(self, key: str) -> DiffOp:
        return self._ops[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __repr__(self) -> str:
        return f"Diff({self._ops!r})"

    @property
    def is_empty(self) -> bool:
        return not self._ops

    def count_ops(self) -> int:
        """Number of leaf operations, nested diffs counted by their content."""
        total = 0
        for op in self._ops.values():
            total += op.diff.count_ops() if isinstance(op, NestedDiff) else 1
        return total
