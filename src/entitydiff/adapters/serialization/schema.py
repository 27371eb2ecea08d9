"""JSON schemas for entities and entity diffs.

The entity payload mirrors the plain field-map shape the diff engine works on:
``label``/``description`` map languages to texts, ``aliases`` maps languages to
lists of texts and ``claim`` maps claim GUIDs to claim payloads.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from entitydiff.domain.model import EntityType, SnakType, StatementRank

type DiffOpName = Literal["add", "remove", "change", "diff", "set"]


class SerializationBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class DataValuePayload(SerializationBaseModel):
    type: Literal["string", "wikibase-entityid"]
    value: str


class SnakPayload(SerializationBaseModel):
    snaktype: SnakType
    property: str
    datavalue: DataValuePayload | None = None


class ClaimPayload(SerializationBaseModel):
    id: str | None = None
    type: Literal["claim", "statement"] = "claim"
    mainsnak: SnakPayload
    qualifiers: list[SnakPayload] = Field(default_factory=list["SnakPayload"])
    rank: StatementRank | None = None


class EntityPayload(SerializationBaseModel):
    type: EntityType
    id: str | None = None
    label: dict[str, str] = Field(default_factory=dict["str", "str"])
    description: dict[str, str] = Field(default_factory=dict["str", "str"])
    aliases: dict[str, list[str]] = Field(default_factory=dict["str", "list[str]"])
    claim: dict[str, ClaimPayload] = Field(default_factory=dict["str", "ClaimPayload"])
    datatype: str | None = None


class DiffOpPayload(SerializationBaseModel):
    """One diff operation. Which value fields are set depends on ``op``."""

    op: DiffOpName
    old: Any = None
    new: Any = None
    ops: dict[str, DiffOpPayload] | None = None
    added: list[str] | None = None
    removed: list[str] | None = None


class EntityDiffPayload(SerializationBaseModel):
    type: EntityType
    label: dict[str, DiffOpPayload] = Field(default_factory=dict["str", "DiffOpPayload"])
    description: dict[str, DiffOpPayload] = Field(default_factory=dict["str", "DiffOpPayload"])
    aliases: dict[str, DiffOpPayload] = Field(default_factory=dict["str", "DiffOpPayload"])
    claim: dict[str, DiffOpPayload] = Field(default_factory=dict["str", "DiffOpPayload"])
    specific: dict[str, DiffOpPayload] = Field(default_factory=dict["str", "DiffOpPayload"])
