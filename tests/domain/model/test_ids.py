from __future__ import annotations

import pytest

from entitydiff.domain.errors import FormatError
from entitydiff.domain.model import (
    EntityType,
    ItemId,
    PropertyId,
    claim_guid_owner,
    entity_id_for,
    legacy_id_from_number,
    new_claim_guid,
    parse_entity_id,
)


def test_property_id_accepts_both_cases_and_canonicalizes() -> None:
    lower = PropertyId("p42")
    upper = PropertyId("P42")

    assert lower == upper
    assert lower.serialization == "p42"
    assert str(upper) == "p42"
    assert upper.entity_type is EntityType.PROPERTY


@pytest.mark.parametrize("serialization", ["42", "q42", "p0", "p", "", "p42x", " p42", "p-1"])
def test_property_id_rejects_malformed_serializations(serialization: str) -> None:
    with pytest.raises(FormatError):
        PropertyId(serialization)


def test_id_rejects_non_string_serialization() -> None:
    with pytest.raises(FormatError, match="needs to be a string"):
        ItemId(42)  # pyright: ignore[reportArgumentType]


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid item id"):
        ItemId("p1")


def test_ids_of_different_kinds_are_never_equal() -> None:
    assert ItemId("q1") != PropertyId("p1")
    assert ItemId("Q1") == ItemId("q1")
    assert len({ItemId("Q1"), ItemId("q1")}) == 1


def test_ids_are_immutable() -> None:
    item_id = ItemId("q1")

    with pytest.raises(AttributeError):
        item_id.serialization = "q2"  # pyright: ignore[reportAttributeAccessIssue]


def test_numeric_id_extracts_trailing_integer() -> None:
    assert ItemId("Q1337").numeric_id == 1337
    assert PropertyId("p42").numeric_id == 42


def test_entity_id_for_uses_the_grammar_of_the_given_kind() -> None:
    assert entity_id_for(EntityType.ITEM, "Q5") == ItemId("q5")

    with pytest.raises(FormatError):
        entity_id_for(EntityType.ITEM, "P5")


def test_parse_entity_id_infers_kind_from_prefix() -> None:
    assert parse_entity_id("P31") == PropertyId("p31")
    assert parse_entity_id("q64") == ItemId("q64")

    with pytest.raises(FormatError, match="Unknown entity id prefix"):
        parse_entity_id("x1")
    with pytest.raises(FormatError):
        parse_entity_id("")


def test_legacy_id_from_number_maps_to_canonical_serialization() -> None:
    assert legacy_id_from_number(EntityType.PROPERTY, 42) == PropertyId("p42")
    assert legacy_id_from_number(EntityType.ITEM, 42).serialization == "q42"


@pytest.mark.parametrize("number", [0, -1, True, "42", 4.2])
def test_legacy_id_from_number_rejects_invalid_numbers(number: object) -> None:
    with pytest.raises(FormatError):
        legacy_id_from_number(EntityType.PROPERTY, number)  # pyright: ignore[reportArgumentType]


def test_claim_guid_owner_splits_off_entity_prefix() -> None:
    assert claim_guid_owner("Q1$abc-def") == "Q1"


@pytest.mark.parametrize("guid", ["Q1abc", "Q1$a$b", "$abc", "Q1$"])
def test_claim_guid_owner_rejects_malformed_guids(guid: str) -> None:
    with pytest.raises(FormatError):
        claim_guid_owner(guid)


def test_new_claim_guid_is_owned_by_entity_and_unique() -> None:
    first = new_claim_guid(ItemId("Q7"))
    second = new_claim_guid(ItemId("Q7"))

    assert claim_guid_owner(first) == "q7"
    assert first != second
