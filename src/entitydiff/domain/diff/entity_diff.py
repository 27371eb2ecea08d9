"""Entity-level diff and patch.

``diff_entities`` turns two entities of the same kind into an ``EntityDiff``:
labels, descriptions and aliases are diffed as plain maps; claims are diffed as a
map keyed by GUID with whole-claim structural equality; fields that only exist on
one kind are diffed by that kind's handler.

``patch_entity`` applies an ``EntityDiff`` to an entity. All sub-steps run on a
working copy first, so either the whole patch lands or the entity is untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Protocol

from entitydiff.domain.diff.differ import diff_maps
from entitydiff.domain.diff.ops import Diff, DiffOpAdd, DiffOpChange, DiffOpRemove
from entitydiff.domain.diff.patcher import patch_map
from entitydiff.domain.errors import TypeMismatchError
from entitydiff.domain.model import (
    AliasGroupList,
    Claim,
    Claims,
    EntityType,
    Fingerprint,
    Property,
    TermList,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from entitydiff.domain.model import Entity

log = logging.getLogger(__name__)

LABEL_KEY: Final[str] = "label"
DESCRIPTION_KEY: Final[str] = "description"
ALIASES_KEY: Final[str] = "aliases"
CLAIM_KEY: Final[str] = "claim"
DATATYPE_KEY: Final[str] = "datatype"


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityDiff:
    """Versioned difference between two entities of ``entity_type``.

    ``specific`` holds fields outside the common schema; it is empty for kinds
    without extra fields.
    """

    entity_type: EntityType
    labels: Diff = field(default_factory=Diff)
    descriptions: Diff = field(default_factory=Diff)
    aliases: Diff = field(default_factory=Diff)
    claims: Diff = field(default_factory=Diff)
    specific: Diff = field(default_factory=Diff)

    # sections are unhashable mappings
    __hash__ = None  # type: ignore[assignment]

    @property
    def is_empty(self) -> bool:
        return self.count_ops() == 0

    def count_ops(self) -> int:
        return sum(
            d.count_ops()
            for d in (self.labels, self.descriptions, self.aliases, self.claims, self.specific)
        )


class SpecificFieldHandler(Protocol):
    """Diff/patch capability for the fields one entity kind adds to the core."""

    def diff_fields(self, source: Entity, target: Entity) -> Diff: ...

    def patch_fields(self, entity: Entity, diff: EntityDiff) -> None: ...


class NoSpecificFields:
    """Handler for kinds without extra fields: empty diff, no-op patch."""

    def diff_fields(self, source: Entity, target: Entity) -> Diff:  # noqa: ARG002
        return Diff()

    def patch_fields(self, entity: Entity, diff: EntityDiff) -> None:  # noqa: ARG002
        return None


class PropertyFields:
    """Diffs and patches the property data type."""

    def diff_fields(self, source: Entity, target: Entity) -> Diff:
        return diff_maps(_property_fields(source), _property_fields(target))

    def patch_fields(self, entity: Entity, diff: EntityDiff) -> None:
        if not isinstance(entity, Property):
            raise TypeMismatchError(f"expected a property, got {entity.entity_type}")
        op = diff.specific.get(DATATYPE_KEY)
        if isinstance(op, DiffOpAdd | DiffOpChange) and isinstance(op.new_value, str):
            entity.set_data_type_id(op.new_value)


def _property_fields(entity: Entity) -> dict[str, object]:
    if not isinstance(entity, Property):
        raise TypeMismatchError(f"expected a property, got {entity.entity_type}")
    return {DATATYPE_KEY: entity.data_type_id}


_SPECIFIC_FIELD_HANDLERS: Final[Mapping[EntityType, SpecificFieldHandler]] = {
    EntityType.ITEM: NoSpecificFields(),
    EntityType.PROPERTY: PropertyFields(),
}


def specific_field_handler(entity_type: EntityType) -> SpecificFieldHandler:
    return _SPECIFIC_FIELD_HANDLERS[entity_type]


def entity_field_map(entity: Entity) -> dict[str, object]:
    """Plain field map of the common schema: terms plus claims keyed by GUID."""
    fingerprint = entity.fingerprint
    return {
        LABEL_KEY: fingerprint.labels.to_texts(),
        DESCRIPTION_KEY: fingerprint.descriptions.to_texts(),
        ALIASES_KEY: fingerprint.alias_groups.to_texts(),
        CLAIM_KEY: entity.claims.by_guid(),
    }


def diff_entities(source: Entity, target: Entity) -> EntityDiff:
    """Diff ``source`` against ``target``. Both must be of the same kind.

    Claims are diffed by GUID, so the diff does not carry claim order: patching keeps
    existing claims in place and appends new ones, whatever their position in ``target``.
    """
    if source.entity_type != target.entity_type:
        raise TypeMismatchError(
            f"Can only diff between entities of the same type "
            f"({source.entity_type} != {target.entity_type})"
        )
    old = entity_field_map(source)
    new = entity_field_map(target)
    entity_diff = EntityDiff(
        entity_type=source.entity_type,
        labels=diff_maps(_as_map(old[LABEL_KEY]), _as_map(new[LABEL_KEY])),
        descriptions=diff_maps(_as_map(old[DESCRIPTION_KEY]), _as_map(new[DESCRIPTION_KEY])),
        aliases=diff_maps(_as_map(old[ALIASES_KEY]), _as_map(new[ALIASES_KEY])),
        claims=diff_maps(_as_map(old[CLAIM_KEY]), _as_map(new[CLAIM_KEY])),
        specific=specific_field_handler(source.entity_type).diff_fields(source, target),
    )
    log.debug(
        "Computed %s diff %s -> %s with %d operations",
        source.entity_type,
        source.id,
        target.id,
        entity_diff.count_ops(),
    )
    return entity_diff


def patch_entity(entity: Entity, diff: EntityDiff) -> None:
    """Apply ``diff`` to ``entity`` in place; fails fast and leaves it untouched on error."""
    if entity.entity_type != diff.entity_type:
        raise TypeMismatchError(
            f"Cannot apply a {diff.entity_type} diff to a {entity.entity_type}"
        )
    working = entity.copy()
    working.set_fingerprint(_patch_fingerprint(working.fingerprint, diff))
    working.set_claims(_patch_claims(working.claims, diff.claims))
    specific_field_handler(entity.entity_type).patch_fields(working, diff)
    _commit(entity, working)
    log.debug("Patched %s %s with %d operations", entity.entity_type, entity.id, diff.count_ops())


def _patch_fingerprint(fingerprint: Fingerprint, diff: EntityDiff) -> Fingerprint:
    labels = patch_map(fingerprint.labels.to_texts(), diff.labels)
    descriptions = patch_map(fingerprint.descriptions.to_texts(), diff.descriptions)
    aliases = patch_map(fingerprint.alias_groups.to_texts(), diff.aliases)
    return Fingerprint(
        labels=TermList.from_texts(_as_map(labels)),
        descriptions=TermList.from_texts(_as_map(descriptions)),
        alias_groups=AliasGroupList.from_texts(_as_map(aliases)),
    )


def _patch_claims(claims: Claims, diff: Diff) -> Claims:
    """GUID-keyed patch: existing claims keep their position, new ones are appended."""
    patched = claims.copy()
    for guid, op in diff.items():
        if isinstance(op, DiffOpRemove):
            patched.remove_claim_with_guid(guid)
            continue
        claim = op.new_value if isinstance(op, DiffOpAdd | DiffOpChange) else None
        if not isinstance(claim, Claim):
            raise TypeError(f"unsupported claim diff operation for {guid!r}: {op!r}")
        if claim.guid != guid:
            raise ValueError(f"claim diff key {guid!r} does not match claim guid")
        patched.add_claim(claim)
    return patched


def _commit(entity: Entity, working: Entity) -> None:
    entity.set_fingerprint(working.fingerprint)
    entity.set_claims(working.claims)
    for name, value in working._specific_field_values().items():  # noqa: SLF001
        setattr(entity, name, value)


def _as_map(value: object) -> Mapping[str, object]:
    if not isinstance(value, dict):
        raise TypeError(f"expected a field map, got {type(value).__name__}")
    return value  # pyright: ignore[reportUnknownVariableType]
