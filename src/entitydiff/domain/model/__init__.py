"""Public domain model surface."""

from __future__ import annotations

from entitydiff.domain.model.claims import Claim, Claims, Statement
from entitydiff.domain.model.entity import (
    AnyEntity,
    Entity,
    Item,
    Property,
    entity_class_for,
)
from entitydiff.domain.model.enums import EntityType, SnakType, StatementRank
from entitydiff.domain.model.ids import (
    EntityId,
    ItemId,
    PropertyId,
    claim_guid_owner,
    entity_id_for,
    id_class_for,
    legacy_id_from_number,
    new_claim_guid,
    parse_entity_id,
)
from entitydiff.domain.model.snaks import (
    DataValue,
    EntityIdValue,
    PropertyNoValueSnak,
    PropertySomeValueSnak,
    PropertyValueSnak,
    Snak,
    StringValue,
    referenced_entity_ids,
)
from entitydiff.domain.model.terms import (
    AliasGroup,
    AliasGroupList,
    Fingerprint,
    Term,
    TermList,
)

__all__ = [  # noqa: RUF022
    # ids
    "EntityId",
    "ItemId",
    "PropertyId",
    "claim_guid_owner",
    "entity_id_for",
    "id_class_for",
    "legacy_id_from_number",
    "new_claim_guid",
    "parse_entity_id",
    # terms
    "Term",
    "TermList",
    "AliasGroup",
    "AliasGroupList",
    "Fingerprint",
    # snaks
    "DataValue",
    "StringValue",
    "EntityIdValue",
    "PropertyNoValueSnak",
    "PropertySomeValueSnak",
    "PropertyValueSnak",
    "Snak",
    "referenced_entity_ids",
    # claims
    "Claim",
    "Statement",
    "Claims",
    # entities
    "Entity",
    "Item",
    "Property",
    "AnyEntity",
    "entity_class_for",
    # enums
    "EntityType",
    "SnakType",
    "StatementRank",
]
