"""Entities: an optional typed id, a fingerprint and claims.

Entity kinds are a closed set (``Item``, ``Property``) sharing one core. Kind-specific
behavior (id grammar, diff/patch of extra fields) is looked up by ``ENTITY_TYPE``
rather than overridden per class.

Ownership: the fingerprint and claims are owned by the entity. Read accessors return
copies and setters store copies; the only way to change an entity is through its own
methods.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, ClassVar, Final

from entitydiff.domain.errors import IllegalStateError, TypeMismatchError
from entitydiff.domain.model.claims import Claim, Claims
from entitydiff.domain.model.enums import EntityType
from entitydiff.domain.model.ids import (
    EntityId,
    id_class_for,
    legacy_id_from_number,
    new_claim_guid,
)
from entitydiff.domain.model.terms import Fingerprint

if TYPE_CHECKING:
    from collections.abc import Iterable

    from entitydiff.domain.model.snaks import Snak

# fields that make up the shared core; anything else on a subclass is kind-specific
_CORE_FIELDS = frozenset({"_id", "_fingerprint", "_claims"})


@dataclass(eq=False, kw_only=True)
class Entity:
    """Shared entity core. Use ``Item`` or ``Property``."""

    _id: EntityId | None = field(default=None, repr=True)
    _fingerprint: Fingerprint = field(default_factory=Fingerprint, repr=False)
    _claims: Claims = field(default_factory=Claims, repr=False)

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    def __post_init__(self) -> None:
        if type(self) is Entity:
            raise TypeError("Entity is abstract; use Item or Property")
        entity_id, self._id = self._id, None
        if entity_id is not None:
            self.set_id(entity_id)
        self._fingerprint = self._fingerprint.copy()
        self._claims = self._claims.copy()

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    # Identity

    @property
    def id(self) -> EntityId | None:
        return self._id

    def set_id(self, entity_id: EntityId) -> None:
        """Assign the id. An id that is already set cannot be replaced by another one."""
        if not isinstance(entity_id, EntityId):
            raise TypeError("set_id only accepts EntityId; use set_legacy_numeric_id for integers")
        if entity_id.entity_type != self.entity_type:
            raise TypeMismatchError(
                f"Attempt to set a {entity_id.entity_type} id on a {self.entity_type}"
            )
        if self._id is not None and self._id != entity_id:
            raise IllegalStateError(f"{self.entity_type} already has id {self._id}")
        # normalize to the concrete id class of this kind
        self._id = id_class_for(self.entity_type)(entity_id.serialization)

    def set_legacy_numeric_id(self, number: int) -> None:
        """Legacy: assign an id from its bare numeric part."""
        self.set_id(legacy_id_from_number(self.entity_type, number))

    # Fingerprint

    @property
    def fingerprint(self) -> Fingerprint:
        return self._fingerprint.copy()

    def set_fingerprint(self, fingerprint: Fingerprint) -> None:
        self._fingerprint = fingerprint.copy()

    # Claims

    @property
    def claims(self) -> Claims:
        return self._claims.copy()

    def set_claims(self, claims: Claims | Iterable[Claim]) -> None:
        self._claims = claims.copy() if isinstance(claims, Claims) else Claims(claims)

    def add_claim(self, claim: Claim) -> None:
        self._claims.add_claim(claim)

    def has_claim(self, claim: Claim) -> bool:
        return self._claims.has_claim(claim)

    def remove_claim_with_guid(self, guid: str) -> None:
        self._claims.remove_claim_with_guid(guid)

    @property
    def has_claims(self) -> bool:
        return not self._claims.is_empty

    def new_claim(self, main_snak: Snak, qualifiers: Iterable[Snak] = ()) -> Claim:
        """Build (but do not add) a claim with a fresh GUID owned by this entity."""
        if self._id is None:
            raise IllegalStateError("cannot create a claim GUID for an entity without id")
        return Claim(
            main_snak=main_snak,
            qualifiers=list(qualifiers),
            guid=new_claim_guid(self._id),
        )

    def all_snaks(self) -> list[Snak]:
        return self._claims.all_snaks()

    # Whole-entity operations

    def is_empty(self) -> bool:
        """No terms and no claims. The id and kind-specific fields do not count."""
        return self._fingerprint.is_empty and self._claims.is_empty

    def clear(self) -> None:
        """Drop terms and claims, keep the id."""
        self._fingerprint = Fingerprint()
        self._claims = Claims()

    def copy(self) -> Entity:
        """Structural clone; shares no mutable state with this entity."""
        clone = type(self)(**self._specific_field_values())
        if self._id is not None:
            clone.set_id(self._id)
        clone.set_fingerprint(self._fingerprint)
        clone.set_claims(self._claims)
        return clone

    def _specific_field_values(self) -> dict[str, object]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.init and f.name not in _CORE_FIELDS
        }

    def __eq__(self, other: object) -> bool:
        """Content equality: kind, terms, ordered claims and kind-specific fields."""
        if not isinstance(other, Entity):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._fingerprint == other._fingerprint
            and self._claims == other._claims
            and self._specific_field_values() == other._specific_field_values()
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False, kw_only=True)
class Item(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ITEM

    @classmethod
    def new_empty(cls) -> Item:
        return cls()


@dataclass(eq=False, kw_only=True)
class Property(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.PROPERTY

    data_type_id: str

    def __post_init__(self) -> None:
        super().__post_init__()
        self._require_data_type_id(self.data_type_id)

    @classmethod
    def new_from_type(cls, data_type_id: str) -> Property:
        return cls(data_type_id=data_type_id)

    def set_data_type_id(self, data_type_id: str) -> None:
        self._require_data_type_id(data_type_id)
        self.data_type_id = data_type_id

    @staticmethod
    def _require_data_type_id(data_type_id: str) -> None:
        if not isinstance(data_type_id, str) or not data_type_id:
            raise ValueError("data type id needs to be a non-empty string")


type AnyEntity = Item | Property

_ENTITY_CLASSES: Final[dict[EntityType, type[AnyEntity]]] = {
    EntityType.ITEM: Item,
    EntityType.PROPERTY: Property,
}


def entity_class_for(entity_type: EntityType) -> type[AnyEntity]:
    return _ENTITY_CLASSES[entity_type]
