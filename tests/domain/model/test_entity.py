from __future__ import annotations

import pytest

from entitydiff.domain.errors import IllegalStateError, TypeMismatchError
from entitydiff.domain.model import (
    Claims,
    Entity,
    EntityType,
    Fingerprint,
    Item,
    ItemId,
    Property,
    PropertyId,
    claim_guid_owner,
    entity_class_for,
)

from tests.helpers.entities import make_claim, make_item, make_property, no_value


def test_entity_core_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="abstract"):
        Entity()


def test_set_id_rejects_id_of_other_kind() -> None:
    item = Item()

    with pytest.raises(TypeMismatchError):
        item.set_id(PropertyId("P1"))  # pyright: ignore[reportArgumentType]


def test_set_id_rejects_replacing_existing_id() -> None:
    item = Item()
    item.set_id(ItemId("Q1"))

    item.set_id(ItemId("q1"))
    with pytest.raises(IllegalStateError, match="already has id"):
        item.set_id(ItemId("Q2"))

    assert item.id == ItemId("q1")


def test_set_id_rejects_plain_integers() -> None:
    prop = Property(data_type_id="string")

    with pytest.raises(TypeError, match="set_legacy_numeric_id"):
        prop.set_id(42)  # pyright: ignore[reportArgumentType]


def test_legacy_numeric_id_yields_canonical_id() -> None:
    prop = Property(data_type_id="string")

    prop.set_legacy_numeric_id(42)

    assert prop.id == PropertyId("p42")
    assert prop.id is not None
    assert prop.id.serialization == "p42"


def test_entity_type_discriminator() -> None:
    assert Item().entity_type is EntityType.ITEM
    assert make_property().entity_type is EntityType.PROPERTY
    assert entity_class_for(EntityType.PROPERTY) is Property


def test_new_item_is_empty_even_with_id() -> None:
    item = Item.new_empty()
    item.set_id(ItemId("Q1"))

    assert item.is_empty()


def test_property_with_only_datatype_is_empty() -> None:
    assert Property.new_from_type("string").is_empty()


def test_entity_with_label_or_claim_is_not_empty() -> None:
    assert not make_item(labels={"en": "Berlin"}).is_empty()
    assert not make_item(claims=[make_claim("Q1$a")]).is_empty()


def test_clear_keeps_id() -> None:
    item = make_item(labels={"en": "Berlin"}, claims=[make_claim("Q1$a")])

    item.clear()

    assert item.is_empty()
    assert item.id == ItemId("Q1")


def test_property_requires_non_empty_datatype() -> None:
    with pytest.raises(ValueError, match="data type id"):
        Property(data_type_id="")

    prop = make_property()
    with pytest.raises(ValueError, match="data type id"):
        prop.set_data_type_id("")
    prop.set_data_type_id("wikibase-item")
    assert prop.data_type_id == "wikibase-item"


def test_new_claim_uses_guid_owned_by_entity() -> None:
    item = make_item(item_id="Q64")

    claim = item.new_claim(no_value(1), qualifiers=[no_value(2)])

    assert claim.guid is not None
    assert claim_guid_owner(claim.guid) == "q64"
    assert claim.qualifiers == [no_value(2)]
    assert not item.has_claims


def test_new_claim_needs_an_id() -> None:
    with pytest.raises(IllegalStateError):
        Item().new_claim(no_value(1))


def test_claims_obtained_from_entity_do_not_mutate_it() -> None:
    item = make_item(claims=[make_claim("Q1$a")])

    claims = item.claims
    claims.add_claim(make_claim("Q1$b"))
    claims.remove_claim_with_guid("Q1$a")

    assert item.claims == Claims([make_claim("Q1$a")])


def test_mutating_claims_read_from_entity_does_not_leak_back() -> None:
    original = make_claim("Q1$a", no_value(1))
    item = make_item(claims=[original])

    mutated = None
    for claim in item.claims:
        claim.add_qualifier(no_value(2))
        mutated = claim

    assert mutated is not None
    assert item.claims == Claims([original])
    assert not item.has_claim(mutated)
    assert item.has_claim(original)


def test_fingerprint_obtained_from_entity_does_not_mutate_it() -> None:
    item = make_item(labels={"en": "Berlin"})

    fingerprint = item.fingerprint
    fingerprint.set_label("en", "Paris")

    assert item.fingerprint.get_label("en") == "Berlin"


def test_setters_copy_their_argument() -> None:
    fingerprint = Fingerprint()
    claims = Claims([make_claim("Q1$a")])
    item = Item()

    item.set_fingerprint(fingerprint)
    item.set_claims(claims)
    fingerprint.set_label("en", "Berlin")
    claims.add_claim(make_claim("Q1$b"))

    assert item.is_empty() is False
    assert item.fingerprint.is_empty
    assert len(item.claims) == 1


def test_entity_mutators() -> None:
    item = make_item()
    claim = make_claim("Q1$a", no_value(1), qualifiers=[no_value(2)])

    item.add_claim(claim)

    assert item.has_claim(claim)
    assert item.all_snaks() == [no_value(1), no_value(2)]
    item.remove_claim_with_guid("Q1$a")
    assert not item.has_claims


def test_copy_is_independent() -> None:
    item = make_item(labels={"en": "Berlin"}, claims=[make_claim("Q1$a")])

    clone = item.copy()
    clone.add_claim(make_claim("Q1$b"))
    fingerprint = clone.fingerprint
    fingerprint.set_label("de", "Berlin")
    clone.set_fingerprint(fingerprint)

    assert clone.id == item.id
    assert len(item.claims) == 1
    assert item.fingerprint.get_label("de") is None


def test_copy_keeps_property_datatype() -> None:
    prop = make_property(data_type_id="wikibase-item")

    clone = prop.copy()

    assert isinstance(clone, Property)
    assert clone.data_type_id == "wikibase-item"
    assert clone == prop


def test_equality_is_content_based() -> None:
    assert make_item(item_id="Q1", labels={"en": "x"}) == make_item(
        item_id="Q2", labels={"en": "x"}
    )
    assert make_item(labels={"en": "x"}) != make_item(labels={"en": "y"})
    assert make_property(data_type_id="string") != make_property(data_type_id="url")
    assert Item() != Property.new_from_type("string")
