from __future__ import annotations

import pytest

from entitydiff.domain.model import AliasGroup, AliasGroupList, Fingerprint, Term, TermList


def test_term_list_keeps_one_term_per_language() -> None:
    labels = TermList([Term("en", "Berlin"), Term("en", "Berlin, Germany")])

    assert len(labels) == 1
    assert labels.get_text("en") == "Berlin, Germany"


def test_term_list_equality_ignores_insertion_order() -> None:
    first = TermList.from_texts({"en": "Berlin", "de": "Berlin"})
    second = TermList.from_texts({"de": "Berlin", "en": "Berlin"})

    assert first == second


def test_term_list_remove_is_idempotent() -> None:
    labels = TermList.from_texts({"en": "Berlin"})

    labels.remove_by_language("en")
    labels.remove_by_language("en")

    assert labels.is_empty
    with pytest.raises(KeyError, match="no term for language"):
        labels.get_by_language("en")


def test_term_rejects_empty_language_code() -> None:
    with pytest.raises(ValueError, match="language code"):
        Term("", "Berlin")


def test_alias_group_is_an_unordered_set_of_non_empty_strings() -> None:
    group = AliasGroup("en", ["Spree-Athen", " ", "Berlin", "Spree-Athen", " Berlin "])

    assert group.aliases == frozenset({"Spree-Athen", "Berlin"})
    assert group == AliasGroup("en", ["Berlin", "Spree-Athen"])


def test_setting_empty_alias_group_removes_it() -> None:
    groups = AliasGroupList.from_texts({"en": ["Spree-Athen"]})

    groups.set_aliases("en", [])

    assert "en" not in groups
    assert groups.is_empty


def test_alias_group_list_never_stores_empty_groups() -> None:
    groups = AliasGroupList([AliasGroup("en", []), AliasGroup("de", ["Bärlin"])])

    assert len(groups) == 1
    assert groups.to_texts() == {"de": frozenset({"Bärlin"})}


def test_empty_fingerprint() -> None:
    fingerprint = Fingerprint.new_empty()

    assert fingerprint.is_empty


@pytest.mark.parametrize(
    "mutate",
    [
        lambda fp: fp.set_label("en", "Berlin"),
        lambda fp: fp.set_description("en", "capital of Germany"),
        lambda fp: fp.set_aliases("en", ["Spree-Athen"]),
    ],
)
def test_fingerprint_with_any_term_is_not_empty(mutate) -> None:  # noqa: ANN001
    fingerprint = Fingerprint()

    mutate(fingerprint)

    assert not fingerprint.is_empty


def test_fingerprint_getters_return_copies() -> None:
    fingerprint = Fingerprint()
    fingerprint.set_label("en", "Berlin")

    labels = fingerprint.labels
    labels.set_text("de", "Berlin")
    aliases = fingerprint.alias_groups
    aliases.set_aliases("en", ["Spree-Athen"])

    assert fingerprint.get_label("de") is None
    assert fingerprint.get_aliases("en") == frozenset()


def test_fingerprint_setters_store_copies() -> None:
    labels = TermList.from_texts({"en": "Berlin"})
    fingerprint = Fingerprint()

    fingerprint.set_labels(labels)
    labels.set_text("de", "Berlin")

    assert fingerprint.labels == TermList.from_texts({"en": "Berlin"})


def test_fingerprint_copy_is_independent_and_equal() -> None:
    fingerprint = Fingerprint()
    fingerprint.set_label("en", "Berlin")
    fingerprint.set_aliases("en", ["Spree-Athen"])

    clone = fingerprint.copy()
    clone.set_label("en", "Paris")
    clone.remove_aliases("en")

    assert fingerprint.get_label("en") == "Berlin"
    assert fingerprint.get_aliases("en") == frozenset({"Spree-Athen"})
    assert fingerprint != clone
    assert fingerprint == Fingerprint(
        labels=TermList.from_texts({"en": "Berlin"}),
        alias_groups=AliasGroupList.from_texts({"en": ["Spree-Athen"]}),
    )
