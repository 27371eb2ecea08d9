"""Multilingual terms: labels, descriptions and alias groups bundled in a Fingerprint.

Lists are keyed by language code; there is at most one term and at most one alias
group per language. Accessors hand out copies so callers never alias internal state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def _require_language_code(language_code: str) -> None:
    if not isinstance(language_code, str):
        raise TypeError("language code needs to be a string")
    if not language_code:
        raise ValueError("language code must not be empty")


@dataclass(frozen=True, slots=True)
class Term:
    language_code: str
    text: str

    def __post_init__(self) -> None:
        _require_language_code(self.language_code)
        if not isinstance(self.text, str):
            raise TypeError("term text needs to be a string")


@dataclass(frozen=True, slots=True)
class AliasGroup:
    """Distinct, non-empty aliases for one language. Order is not significant."""

    language_code: str
    aliases: frozenset[str]

    def __init__(self, language_code: str, aliases: Iterable[str] = ()) -> None:
        _require_language_code(language_code)
        cleaned: set[str] = set()
        for alias in aliases:
            if not isinstance(alias, str):
                raise TypeError("aliases need to be strings")
            stripped = alias.strip()
            if stripped:
                cleaned.add(stripped)
        object.__setattr__(self, "language_code", language_code)
        object.__setattr__(self, "aliases", frozenset(cleaned))

    @property
    def is_empty(self) -> bool:
        return not self.aliases

    def __len__(self) -> int:
        return len(self.aliases)


class TermList:
    """Language-keyed list of terms. Used for both labels and descriptions."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._terms: dict[str, Term] = {}
        for term in terms:
            self.set_term(term)

    @classmethod
    def from_texts(cls, texts: Mapping[str, str]) -> TermList:
        return cls(Term(language_code, text) for language_code, text in texts.items())

    def __iter__(self) -> Iterator[Term]:
        return iter(tuple(self._terms.values()))

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, language_code: object) -> bool:
        return language_code in self._terms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermList):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TermList({self.to_texts()!r})"

    @property
    def is_empty(self) -> bool:
        return not self._terms

    def has_term_for_language(self, language_code: str) -> bool:
        return language_code in self._terms

    def get_by_language(self, language_code: str) -> Term:
        try:
            return self._terms[language_code]
        except KeyError:
            raise KeyError(f"no term for language {language_code!r}") from None

    def get_text(self, language_code: str) -> str | None:
        term = self._terms.get(language_code)
        return term.text if term is not None else None

    def set_term(self, term: Term) -> None:
        self._terms[term.language_code] = term

    def set_text(self, language_code: str, text: str) -> None:
        self.set_term(Term(language_code, text))

    def remove_by_language(self, language_code: str) -> None:
        self._terms.pop(language_code, None)

    def to_texts(self) -> dict[str, str]:
        return {code: term.text for code, term in self._terms.items()}

    def copy(self) -> TermList:
        # Terms are frozen, a shallow copy of the mapping is independent.
        return TermList(self._terms.values())


class AliasGroupList:
    """Language-keyed alias groups. Empty groups are never stored."""

    __slots__ = ("_groups",)

    def __init__(self, groups: Iterable[AliasGroup] = ()) -> None:
        self._groups: dict[str, AliasGroup] = {}
        for group in groups:
            self.set_group(group)

    @classmethod
    def from_texts(cls, texts: Mapping[str, Iterable[str]]) -> AliasGroupList:
        return cls(AliasGroup(language_code, aliases) for language_code, aliases in texts.items())

    def __iter__(self) -> Iterator[AliasGroup]:
        return iter(tuple(self._groups.values()))

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, language_code: object) -> bool:
        return language_code in self._groups

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AliasGroupList):
            return NotImplemented
        return self._groups == other._groups

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AliasGroupList({self.to_texts()!r})"

    @property
    def is_empty(self) -> bool:
        return not self._groups

    def has_group_for_language(self, language_code: str) -> bool:
        return language_code in self._groups

    def get_by_language(self, language_code: str) -> AliasGroup:
        try:
            return self._groups[language_code]
        except KeyError:
            raise KeyError(f"no alias group for language {language_code!r}") from None

    def set_group(self, group: AliasGroup) -> None:
        if group.is_empty:
            self._groups.pop(group.language_code, None)
            return
        self._groups[group.language_code] = group

    def set_aliases(self, language_code: str, aliases: Iterable[str]) -> None:
        self.set_group(AliasGroup(language_code, aliases))

    def remove_by_language(self, language_code: str) -> None:
        self._groups.pop(language_code, None)

    def to_texts(self) -> dict[str, frozenset[str]]:
        return {code: group.aliases for code, group in self._groups.items()}

    def copy(self) -> AliasGroupList:
        return AliasGroupList(self._groups.values())


class Fingerprint:
    """Labels, descriptions and aliases of one entity.

    The three lists are owned by the fingerprint: setters store copies and getters
    return copies.
    """

    __slots__ = ("_alias_groups", "_descriptions", "_labels")

    def __init__(
        self,
        labels: TermList | None = None,
        descriptions: TermList | None = None,
        alias_groups: AliasGroupList | None = None,
    ) -> None:
        self._labels = labels.copy() if labels is not None else TermList()
        self._descriptions = descriptions.copy() if descriptions is not None else TermList()
        self._alias_groups = (
            alias_groups.copy() if alias_groups is not None else AliasGroupList()
        )

    def __repr__(self) -> str:
        return (
            f"Fingerprint(labels={self._labels!r}, descriptions={self._descriptions!r}, "
            f"alias_groups={self._alias_groups!r})"
        )

    @classmethod
    def new_empty(cls) -> Fingerprint:
        return cls()

    @property
    def labels(self) -> TermList:
        return self._labels.copy()

    def set_labels(self, labels: TermList) -> None:
        self._labels = labels.copy()

    def get_label(self, language_code: str) -> str | None:
        return self._labels.get_text(language_code)

    def set_label(self, language_code: str, text: str) -> None:
        self._labels.set_text(language_code, text)

    def remove_label(self, language_code: str) -> None:
        self._labels.remove_by_language(language_code)

    @property
    def descriptions(self) -> TermList:
        return self._descriptions.copy()

    def set_descriptions(self, descriptions: TermList) -> None:
        self._descriptions = descriptions.copy()

    def get_description(self, language_code: str) -> str | None:
        return self._descriptions.get_text(language_code)

    def set_description(self, language_code: str, text: str) -> None:
        self._descriptions.set_text(language_code, text)

    def remove_description(self, language_code: str) -> None:
        self._descriptions.remove_by_language(language_code)

    @property
    def alias_groups(self) -> AliasGroupList:
        return self._alias_groups.copy()

    def set_alias_groups(self, alias_groups: AliasGroupList) -> None:
        self._alias_groups = alias_groups.copy()

    def get_aliases(self, language_code: str) -> frozenset[str]:
        if not self._alias_groups.has_group_for_language(language_code):
            return frozenset()
        return self._alias_groups.get_by_language(language_code).aliases

    def set_aliases(self, language_code: str, aliases: Iterable[str]) -> None:
        self._alias_groups.set_aliases(language_code, aliases)

    def remove_aliases(self, language_code: str) -> None:
        self._alias_groups.remove_by_language(language_code)

    @property
    def is_empty(self) -> bool:
        return self._labels.is_empty and self._descriptions.is_empty and self._alias_groups.is_empty

    def copy(self) -> Fingerprint:
        return Fingerprint(self._labels, self._descriptions, self._alias_groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return (
            self._labels == other._labels
            and self._descriptions == other._descriptions
            and self._alias_groups == other._alias_groups
        )

    __hash__ = None  # type: ignore[assignment]
