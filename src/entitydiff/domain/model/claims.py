"""Claims (statements) and the ordered, GUID-unique Claims collection.

A claim's GUID is its identity; ``==`` compares the full structure (GUID included),
``has_same_content`` compares everything but the GUID.

Boundary rule: ``Claims`` never hands out a reference to a claim it stores. Claims are
copied on the way in and on the way out, so mutating a claim obtained from a
collection (or an entity) has no effect on the collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from entitydiff.domain.model.enums import StatementRank
from entitydiff.domain.model.ids import claim_guid_owner

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from entitydiff.domain.model.ids import PropertyId
    from entitydiff.domain.model.snaks import Snak


def _dedupe_snaks(snaks: Iterable[Snak]) -> list[Snak]:
    unique: list[Snak] = []
    for snak in snaks:
        if snak not in unique:
            unique.append(snak)
    return unique


@dataclass(kw_only=True)
class Claim:
    """Main snak plus ordered, duplicate-free qualifiers, identified by a GUID."""

    main_snak: Snak
    qualifiers: list[Snak] = field(default_factory=list["Snak"])
    guid: str | None = None

    def __post_init__(self) -> None:
        self.qualifiers = _dedupe_snaks(self.qualifiers)
        if self.guid is not None:
            claim_guid_owner(self.guid)

    @property
    def property_id(self) -> PropertyId:
        return self.main_snak.property_id

    def set_guid(self, guid: str | None) -> None:
        if guid is not None:
            claim_guid_owner(guid)
        self.guid = guid

    def set_qualifiers(self, qualifiers: Iterable[Snak]) -> None:
        self.qualifiers = _dedupe_snaks(qualifiers)

    def add_qualifier(self, snak: Snak) -> None:
        if snak not in self.qualifiers:
            self.qualifiers.append(snak)

    def qualifiers_for_property(self, property_id: PropertyId) -> tuple[Snak, ...]:
        return tuple(q for q in self.qualifiers if q.property_id == property_id)

    def all_snaks(self) -> list[Snak]:
        """Main snak followed by the qualifiers, in order."""
        return [self.main_snak, *self.qualifiers]

    def has_same_content(self, other: Claim) -> bool:
        """Structural equality ignoring the GUID."""
        return replace(other.copy(), guid=self.guid) == self

    def copy(self) -> Claim:
        # Snaks are frozen; copying the qualifier list makes the copy independent.
        return replace(self, qualifiers=list(self.qualifiers))


@dataclass(kw_only=True)
class Statement(Claim):
    """Claim with a rank."""

    rank: StatementRank = StatementRank.NORMAL

    def set_rank(self, rank: StatementRank) -> None:
        self.rank = StatementRank(rank)


class Claims:
    """Ordered claims, unique by GUID.

    Adding a claim whose GUID is already present replaces the stored claim in place,
    keeping its position.
    """

    __slots__ = ("_claims",)

    def __init__(self, claims: Iterable[Claim] = ()) -> None:
        self._claims: dict[str, Claim] = {}
        for claim in claims:
            self.add_claim(claim)

    def __iter__(self) -> Iterator[Claim]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._claims)

    def __contains__(self, claim: object) -> bool:
        return isinstance(claim, Claim) and self.has_claim(claim)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Claims):
            return NotImplemented
        # order matters
        return list(self._claims.items()) == list(other._claims.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Claims({list(self._claims.values())!r})"

    @property
    def is_empty(self) -> bool:
        return not self._claims

    @property
    def guids(self) -> tuple[str, ...]:
        return tuple(self._claims)

    def add_claim(self, claim: Claim) -> None:
        if claim.guid is None:
            raise ValueError("claim needs a guid to be added to a claim list")
        self._claims[claim.guid] = claim.copy()

    def has_claim(self, claim: Claim) -> bool:
        """True if a claim with the same GUID and the same structure is stored."""
        if claim.guid is None:
            return False
        stored = self._claims.get(claim.guid)
        return stored is not None and stored == claim

    def has_claim_with_guid(self, guid: str) -> bool:
        return guid in self._claims

    def get_claim_with_guid(self, guid: str) -> Claim | None:
        stored = self._claims.get(guid)
        return stored.copy() if stored is not None else None

    def remove_claim_with_guid(self, guid: str) -> None:
        self._claims.pop(guid, None)

    def remove_claim(self, claim: Claim) -> None:
        if claim.guid is not None:
            self.remove_claim_with_guid(claim.guid)

    def claims_for_property(self, property_id: PropertyId) -> list[Claim]:
        return [c.copy() for c in self._claims.values() if c.property_id == property_id]

    def main_snaks(self) -> list[Snak]:
        return [c.main_snak for c in self._claims.values()]

    def all_snaks(self) -> list[Snak]:
        """Main snak then qualifiers of every claim, in claim order."""
        return [snak for claim in self._claims.values() for snak in claim.all_snaks()]

    def to_list(self) -> list[Claim]:
        return [c.copy() for c in self._claims.values()]

    def by_guid(self) -> dict[str, Claim]:
        return {guid: c.copy() for guid, c in self._claims.items()}

    def copy(self) -> Claims:
        return Claims(self._claims.values())
