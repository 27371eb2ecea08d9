from __future__ import annotations

import pytest

from entitydiff.domain.model import Item

from tests.helpers.entities import make_claim, make_item, no_value


@pytest.fixture
def berlin() -> Item:
    """Item with a single English label and no claims."""
    return make_item(labels={"en": "Berlin"})


@pytest.fixture
def berlin_expanded() -> Item:
    """``berlin`` plus a German label and one no-value claim."""
    return make_item(
        labels={"en": "Berlin", "de": "Berlin"},
        claims=[make_claim("Q1$abc", no_value(1))],
    )
