"""Typed entity identifiers and claim GUIDs.

An id is a (kind, serialization) value. Each kind owns a grammar: a single letter
prefix followed by a positive integer. Input is case-insensitive; the stored
serialization is always lower case.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final
from uuid import uuid4

from entitydiff.domain.errors import FormatError
from entitydiff.domain.model.enums import EntityType

if TYPE_CHECKING:
    from collections.abc import Mapping

CLAIM_GUID_SEPARATOR: Final[str] = "$"


@dataclass(frozen=True, slots=True)
class EntityId:
    """Base for kind-specific ids. Construct ``ItemId``/``PropertyId`` instead."""

    serialization: str

    # class-level grammar; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]
    PREFIX: ClassVar[str]

    def __post_init__(self) -> None:
        if type(self) is EntityId:
            raise TypeError("EntityId is abstract; use a kind-specific id class")
        if not isinstance(self.serialization, str):
            raise FormatError("The id serialization needs to be a string")
        pattern = _PATTERNS[self.ENTITY_TYPE]
        if not pattern.fullmatch(self.serialization):
            raise FormatError(
                f"Invalid {self.ENTITY_TYPE} id serialization: {self.serialization!r}"
            )
        object.__setattr__(self, "serialization", self.serialization.lower())

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    @property
    def numeric_id(self) -> int:
        """Trailing integer of the serialization (legacy interop only)."""
        return int(self.serialization[len(self.PREFIX) :])

    def __str__(self) -> str:
        return self.serialization


@dataclass(frozen=True, slots=True)
class ItemId(EntityId):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM
    PREFIX: ClassVar[str] = "q"


@dataclass(frozen=True, slots=True)
class PropertyId(EntityId):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.PROPERTY
    PREFIX: ClassVar[str] = "p"


_ID_CLASSES: Final[Mapping[EntityType, type[EntityId]]] = {
    EntityType.ITEM: ItemId,
    EntityType.PROPERTY: PropertyId,
}

_PATTERNS: Final[Mapping[EntityType, re.Pattern[str]]] = {
    entity_type: re.compile(rf"{id_class.PREFIX}[1-9][0-9]*", re.IGNORECASE)
    for entity_type, id_class in _ID_CLASSES.items()
}


def id_class_for(entity_type: EntityType) -> type[EntityId]:
    return _ID_CLASSES[entity_type]


def entity_id_for(entity_type: EntityType, serialization: str) -> EntityId:
    """Parse ``serialization`` against the grammar of ``entity_type``."""
    return id_class_for(entity_type)(serialization)


def parse_entity_id(serialization: str) -> EntityId:
    """Parse a serialization, inferring the kind from its prefix."""
    if not isinstance(serialization, str) or not serialization:
        raise FormatError("The id serialization needs to be a non-empty string")
    prefix = serialization[0].lower()
    for id_class in _ID_CLASSES.values():
        if id_class.PREFIX == prefix:
            return id_class(serialization)
    raise FormatError(f"Unknown entity id prefix: {serialization!r}")


def legacy_id_from_number(entity_type: EntityType, number: int) -> EntityId:
    """Map a bare integer to the canonical id of ``entity_type``.

    Legacy path: new code should pass full serializations around instead.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise FormatError("A legacy numeric id needs to be an integer")
    id_class = id_class_for(entity_type)
    return id_class(f"{id_class.PREFIX}{number}")


def claim_guid_owner(guid: str) -> str:
    """Return the owner entity serialization prefixed to a claim GUID."""
    if not isinstance(guid, str):
        raise FormatError("A claim GUID needs to be a string")
    parts = guid.split(CLAIM_GUID_SEPARATOR)
    if len(parts) != 2:  # noqa: PLR2004
        raise FormatError(f"A claim GUID should have a single {CLAIM_GUID_SEPARATOR!r} in it")
    owner, suffix = parts
    if not owner or not suffix:
        raise FormatError(f"Malformed claim GUID: {guid!r}")
    return owner


def new_claim_guid(entity_id: EntityId) -> str:
    return f"{entity_id.serialization}{CLAIM_GUID_SEPARATOR}{uuid4()}"
