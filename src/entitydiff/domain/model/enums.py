"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Entity kind discriminator used for ids, entities and diffs."""

    ITEM = "item"
    PROPERTY = "property"


class SnakType(StrEnum):
    VALUE = "value"
    NO_VALUE = "novalue"
    SOME_VALUE = "somevalue"


class StatementRank(StrEnum):
    PREFERRED = "preferred"
    NORMAL = "normal"
    DEPRECATED = "deprecated"
