"""Translate between JSON payloads and domain entities / entity diffs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from entitydiff.domain.diff import (
    Diff,
    DiffOpAdd,
    DiffOpChange,
    DiffOpRemove,
    EntityDiff,
    NestedDiff,
    SetDiff,
)
from entitydiff.domain.model import (
    AliasGroupList,
    Claim,
    EntityIdValue,
    Fingerprint,
    Property,
    PropertyId,
    PropertyNoValueSnak,
    PropertySomeValueSnak,
    PropertyValueSnak,
    SnakType,
    Statement,
    StringValue,
    TermList,
    entity_class_for,
    entity_id_for,
    parse_entity_id,
)

from .schema import (
    ClaimPayload,
    DataValuePayload,
    DiffOpPayload,
    EntityDiffPayload,
    EntityPayload,
    SnakPayload,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from entitydiff.domain.diff import DiffOp
    from entitydiff.domain.model import AnyEntity, DataValue, Entity, Snak

log = logging.getLogger(__name__)


# Entities


def entity_to_payload(entity: Entity) -> EntityPayload:
    fingerprint = entity.fingerprint
    return EntityPayload(
        type=entity.entity_type,
        id=entity.id.serialization if entity.id is not None else None,
        label=fingerprint.labels.to_texts(),
        description=fingerprint.descriptions.to_texts(),
        aliases={
            code: sorted(aliases) for code, aliases in fingerprint.alias_groups.to_texts().items()
        },
        claim={guid: claim_to_payload(claim) for guid, claim in entity.claims.by_guid().items()},
        datatype=entity.data_type_id if isinstance(entity, Property) else None,
    )


def entity_from_payload(payload: EntityPayload) -> AnyEntity:
    entity_class = entity_class_for(payload.type)
    entity: AnyEntity
    if entity_class is Property:
        if payload.datatype is None:
            raise ValueError("property payload needs a datatype")
        entity = Property(data_type_id=payload.datatype)
    else:
        if payload.datatype is not None:
            raise ValueError(f"{payload.type} payload must not carry a datatype")
        entity = entity_class()
    if payload.id is not None:
        entity.set_id(entity_id_for(payload.type, payload.id))
    entity.set_fingerprint(
        Fingerprint(
            labels=TermList.from_texts(payload.label),
            descriptions=TermList.from_texts(payload.description),
            alias_groups=AliasGroupList.from_texts(payload.aliases),
        )
    )
    entity.set_claims(
        _claim_from_keyed_payload(guid, claim) for guid, claim in payload.claim.items()
    )
    return entity


def _claim_from_keyed_payload(guid: str, payload: ClaimPayload) -> Claim:
    claim = claim_from_payload(payload)
    if claim.guid is None:
        claim.set_guid(guid)
    elif claim.guid != guid:
        raise ValueError(f"claim key {guid!r} does not match claim id {claim.guid!r}")
    return claim


# Claims and snaks


def claim_to_payload(claim: Claim) -> ClaimPayload:
    return ClaimPayload(
        id=claim.guid,
        type="statement" if isinstance(claim, Statement) else "claim",
        mainsnak=snak_to_payload(claim.main_snak),
        qualifiers=[snak_to_payload(snak) for snak in claim.qualifiers],
        rank=claim.rank if isinstance(claim, Statement) else None,
    )


def claim_from_payload(payload: ClaimPayload) -> Claim:
    main_snak = snak_from_payload(payload.mainsnak)
    qualifiers = [snak_from_payload(snak) for snak in payload.qualifiers]
    if payload.type == "statement":
        statement = Statement(main_snak=main_snak, qualifiers=qualifiers, guid=payload.id)
        if payload.rank is not None:
            statement.set_rank(payload.rank)
        return statement
    if payload.rank is not None:
        raise ValueError("only statements carry a rank")
    return Claim(main_snak=main_snak, qualifiers=qualifiers, guid=payload.id)


def snak_to_payload(snak: Snak) -> SnakPayload:
    datavalue = (
        _data_value_to_payload(snak.data_value) if isinstance(snak, PropertyValueSnak) else None
    )
    return SnakPayload(
        snaktype=snak.SNAK_TYPE,
        property=snak.property_id.serialization,
        datavalue=datavalue,
    )


def snak_from_payload(payload: SnakPayload) -> Snak:
    property_id = PropertyId(payload.property)
    if payload.snaktype is SnakType.VALUE:
        if payload.datavalue is None:
            raise ValueError("value snak needs a datavalue")
        return PropertyValueSnak(property_id, _data_value_from_payload(payload.datavalue))
    if payload.datavalue is not None:
        raise ValueError(f"{payload.snaktype} snak must not carry a datavalue")
    if payload.snaktype is SnakType.NO_VALUE:
        return PropertyNoValueSnak(property_id)
    return PropertySomeValueSnak(property_id)


def _data_value_to_payload(value: DataValue) -> DataValuePayload:
    if isinstance(value, StringValue):
        return DataValuePayload(type="string", value=value.value)
    if isinstance(value, EntityIdValue):
        return DataValuePayload(type="wikibase-entityid", value=value.entity_id.serialization)
    raise TypeError(f"unsupported data value type: {type(value).__name__}")


def _data_value_from_payload(payload: DataValuePayload) -> DataValue:
    if payload.type == "string":
        return StringValue(payload.value)
    return EntityIdValue(parse_entity_id(payload.value))


# Diffs

type _Encode = Callable[[object], object]
type _Decode = Callable[[object], object]


@dataclass(frozen=True, slots=True)
class _ValueCodec:
    """How the leaf values of one diff section travel through JSON."""

    encode: _Encode
    decode: _Decode


def _identity(value: object) -> object:
    return value


def _encode_alias_set(value: object) -> object:
    if isinstance(value, frozenset | set):
        return sorted(value)  # pyright: ignore[reportUnknownArgumentType, reportUnknownVariableType]
    return value


def _decode_alias_set(value: object) -> object:
    if isinstance(value, list):
        return frozenset(value)  # pyright: ignore[reportUnknownArgumentType]
    return value


def _encode_claim(value: object) -> object:
    if not isinstance(value, Claim):
        raise TypeError(f"claim diff values must be claims, got {type(value).__name__}")
    return claim_to_payload(value).model_dump(mode="json", exclude_none=True)


def _decode_claim(value: object) -> object:
    return claim_from_payload(ClaimPayload.model_validate(value))


_TEXT_CODEC = _ValueCodec(encode=_identity, decode=_identity)
_ALIAS_CODEC = _ValueCodec(encode=_encode_alias_set, decode=_decode_alias_set)
_CLAIM_CODEC = _ValueCodec(encode=_encode_claim, decode=_decode_claim)


def entity_diff_to_payload(entity_diff: EntityDiff) -> EntityDiffPayload:
    return EntityDiffPayload(
        type=entity_diff.entity_type,
        label=_diff_to_payload(entity_diff.labels, _TEXT_CODEC),
        description=_diff_to_payload(entity_diff.descriptions, _TEXT_CODEC),
        aliases=_diff_to_payload(entity_diff.aliases, _ALIAS_CODEC),
        claim=_diff_to_payload(entity_diff.claims, _CLAIM_CODEC),
        specific=_diff_to_payload(entity_diff.specific, _TEXT_CODEC),
    )


def entity_diff_from_payload(payload: EntityDiffPayload) -> EntityDiff:
    entity_diff = EntityDiff(
        entity_type=payload.type,
        labels=_diff_from_payload(payload.label, _TEXT_CODEC),
        descriptions=_diff_from_payload(payload.description, _TEXT_CODEC),
        aliases=_diff_from_payload(payload.aliases, _ALIAS_CODEC),
        claims=_diff_from_payload(payload.claim, _CLAIM_CODEC),
        specific=_diff_from_payload(payload.specific, _TEXT_CODEC),
    )
    log.debug("Loaded %s diff with %d operations", payload.type, entity_diff.count_ops())
    return entity_diff


def _diff_to_payload(diff: Diff, codec: _ValueCodec) -> dict[str, DiffOpPayload]:
    return {key: _op_to_payload(op, codec) for key, op in diff.items()}


def _op_to_payload(op: DiffOp, codec: _ValueCodec) -> DiffOpPayload:
    if isinstance(op, DiffOpAdd):
        return DiffOpPayload(op="add", new=codec.encode(op.new_value))
    if isinstance(op, DiffOpRemove):
        return DiffOpPayload(op="remove", old=codec.encode(op.old_value))
    if isinstance(op, DiffOpChange):
        return DiffOpPayload(
            op="change", old=codec.encode(op.old_value), new=codec.encode(op.new_value)
        )
    if isinstance(op, NestedDiff):
        return DiffOpPayload(op="diff", ops=_diff_to_payload(op.diff, codec))
    return DiffOpPayload(op="set", added=sorted(op.added), removed=sorted(op.removed))


def _diff_from_payload(payload: Mapping[str, DiffOpPayload], codec: _ValueCodec) -> Diff:
    return Diff({key: _op_from_payload(key, op, codec) for key, op in payload.items()})


def _op_from_payload(key: str, payload: DiffOpPayload, codec: _ValueCodec) -> DiffOp:
    if payload.op == "add":
        return DiffOpAdd(codec.decode(payload.new))
    if payload.op == "remove":
        return DiffOpRemove(codec.decode(payload.old))
    if payload.op == "change":
        return DiffOpChange(codec.decode(payload.old), codec.decode(payload.new))
    if payload.op == "diff":
        if payload.ops is None:
            raise ValueError(f"nested diff for {key!r} needs ops")
        return NestedDiff(_diff_from_payload(payload.ops, codec))
    return SetDiff(
        added=frozenset(payload.added or ()),
        removed=frozenset(payload.removed or ()),
    )
