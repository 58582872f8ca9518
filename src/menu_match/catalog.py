"""In-memory menu catalog with a per-attribute value index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from menu_match.exceptions import DuplicateIdentifier, UnknownItemError
from menu_match.matcher import find_matches
from menu_match.schema import CatalogEntry, ConstraintSpec
from menu_match.taxonomy import AttributeKey, AttributeValue, ValueKind


class Catalog:
    """Ordered collection of catalog entries.

    Entries keep insertion order. The distinct-value index is updated on
    every ``add`` so it always reflects the current entries.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self._entries: list[CatalogEntry] = []
        self._by_identifier: dict[int, CatalogEntry] = {}
        self._index: dict[AttributeKey, set[AttributeValue]] = {key: set() for key in AttributeKey}
        for entry in entries:
            self.add(entry)

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> "Catalog":
        return cls(entries)

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def add(self, entry: CatalogEntry) -> None:
        if entry.identifier in self._by_identifier:
            raise DuplicateIdentifier(f"identifier {entry.identifier} is already in the catalog")
        self._entries.append(entry)
        self._by_identifier[entry.identifier] = entry
        for key, value in entry.attributes.items():
            if key.kind is ValueKind.SET:
                self._index[key].update(value)
            else:
                self._index[key].add(value)

    def get(self, identifier: int) -> CatalogEntry:
        try:
            return self._by_identifier[identifier]
        except KeyError:
            raise UnknownItemError(f"no catalog entry with identifier {identifier}") from None

    def distinct_values(self, key: AttributeKey | str) -> frozenset[AttributeValue]:
        """Return the values observed for ``key`` across all entries.

        Entries without the key are ignored. For set-valued keys the result
        is the union of every entry's members.
        """
        if not isinstance(key, AttributeKey):
            key = AttributeKey.parse(key)
        return frozenset(self._index[key])

    def find_matches(self, spec: ConstraintSpec) -> list[CatalogEntry]:
        return find_matches(self._entries, spec)
