"""Snaks and the data values they carry.

Snaks are immutable and compared by value. Data values are opaque to the core:
the only thing it relies on is equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable

from entitydiff.domain.model.enums import SnakType
from entitydiff.domain.model.ids import EntityId, PropertyId


@runtime_checkable
class DataValue(Protocol):
    """Opaque statement value. Must be immutable and equality-comparable."""

    @property
    def value_type(self) -> str: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str

    value_type: ClassVar[str] = "string"


@dataclass(frozen=True, slots=True)
class EntityIdValue:
    entity_id: EntityId

    value_type: ClassVar[str] = "wikibase-entityid"


@dataclass(frozen=True, slots=True)
class PropertyNoValueSnak:
    property_id: PropertyId

    SNAK_TYPE: ClassVar[SnakType] = SnakType.NO_VALUE


@dataclass(frozen=True, slots=True)
class PropertySomeValueSnak:
    property_id: PropertyId

    SNAK_TYPE: ClassVar[SnakType] = SnakType.SOME_VALUE


@dataclass(frozen=True, slots=True)
class PropertyValueSnak:
    property_id: PropertyId
    data_value: DataValue

    SNAK_TYPE: ClassVar[SnakType] = SnakType.VALUE


type Snak = PropertyNoValueSnak | PropertySomeValueSnak | PropertyValueSnak


def referenced_entity_ids(snak: Snak) -> tuple[EntityId, ...]:
    """Entity ids a snak points at: its property and, for entity values, the target."""
    if isinstance(snak, PropertyValueSnak) and isinstance(snak.data_value, EntityIdValue):
        return (snak.property_id, snak.data_value.entity_id)
    return (snak.property_id,)
