"""Closed attribute taxonomy for menu catalogs."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

_LABEL_OVERRIDES = {
    "NA": "N/A",
}


class Vocabulary(str, Enum):
    """Closed vocabulary whose members are looked up case-insensitively by name."""

    @classmethod
    def parse(cls, token: str):
        name = token.strip().upper().replace("-", "_")
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"{token.strip()!r} is not a valid {cls.__name__.lower()}") from None

    @property
    def label(self) -> str:
        return _LABEL_OVERRIDES.get(self.name, self.name.replace("_", " ").title())


class ValueKind(str, Enum):
    """Shape of the value stored under an attribute key."""

    ENUM = "enum"
    TEXT = "text"
    BOOLEAN = "boolean"
    SET = "set"


class Category(Vocabulary):
    BURGER = "burger"
    SALAD = "salad"


class Meat(Vocabulary):
    BEEF = "beef"
    CHICKEN = "chicken"
    VEGAN = "vegan"
    NA = "na"


class Sauce(Vocabulary):
    TOMATO = "tomato"
    BARBECUE = "barbecue"
    AIOLI = "aioli"
    MAYONNAISE = "mayonnaise"
    SPECIAL = "special"
    MUSTARD = "mustard"
    CHILLI = "chilli"


class Dressing(Vocabulary):
    RANCH = "ranch"
    ITALIAN = "italian"
    FRENCH = "french"
    SWEET_CHILLI = "sweet_chilli"
    BALSAMIC = "balsamic"
    CAESAR = "caesar"
    NA = "na"


class AttributeKey(Vocabulary):
    """Filterable properties of a catalog entry."""

    CATEGORY = "category"
    BUN = "bun"
    MEAT = "meat"
    CHEESE = "cheese"
    PICKLES = "pickles"
    TOMATO = "tomato"
    CUCUMBER = "cucumber"
    SAUCES = "sauces"
    DRESSING = "dressing"
    LEAFY_GREENS = "leafy_greens"

    @property
    def kind(self) -> ValueKind:
        return _KINDS[self]

    @property
    def vocabulary(self) -> type[Vocabulary] | None:
        """Closed vocabulary the key's values are drawn from, if any."""
        return _VOCABULARIES.get(self)


_KINDS: dict[AttributeKey, ValueKind] = {
    AttributeKey.CATEGORY: ValueKind.ENUM,
    AttributeKey.BUN: ValueKind.TEXT,
    AttributeKey.MEAT: ValueKind.ENUM,
    AttributeKey.CHEESE: ValueKind.BOOLEAN,
    AttributeKey.PICKLES: ValueKind.BOOLEAN,
    AttributeKey.TOMATO: ValueKind.BOOLEAN,
    AttributeKey.CUCUMBER: ValueKind.BOOLEAN,
    AttributeKey.SAUCES: ValueKind.SET,
    AttributeKey.DRESSING: ValueKind.ENUM,
    AttributeKey.LEAFY_GREENS: ValueKind.SET,
}

_VOCABULARIES: dict[AttributeKey, type[Vocabulary]] = {
    AttributeKey.CATEGORY: Category,
    AttributeKey.MEAT: Meat,
    AttributeKey.DRESSING: Dressing,
    AttributeKey.SAUCES: Sauce,
}

AttributeValue = Vocabulary | str | bool | frozenset


def coerce_value(key: AttributeKey, value: object) -> AttributeValue:
    """Convert a raw value into the canonical shape for ``key``.

    Enum keys accept members or their names, with spaces read as underscores.
    Set keys accept any iterable of members, or a single string. Empty set
    values are returned as-is so callers can decide what absence means.

    Raises:
        ValueError: If the value does not fit the key's shape.
    """
    kind = key.kind
    if kind is ValueKind.BOOLEAN:
        if not isinstance(value, bool):
            raise ValueError(f"{key.value} expects a boolean, got {value!r}")
        return value
    if kind is ValueKind.TEXT:
        if not isinstance(value, str):
            raise ValueError(f"{key.value} expects text, got {value!r}")
        return str(value).strip().lower()
    if kind is ValueKind.ENUM:
        return _coerce_member(key.vocabulary, value)
    if kind is ValueKind.SET:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, Iterable):
            raise ValueError(f"{key.value} expects a collection, got {value!r}")
        vocabulary = key.vocabulary
        if vocabulary is None:
            return frozenset(_coerce_text(key, item) for item in value) - {""}
        return frozenset(_coerce_member(vocabulary, item) for item in value)
    raise AssertionError(f"unhandled value kind: {kind}")


def _coerce_member(vocabulary: type[Vocabulary], value: object) -> Vocabulary:
    if isinstance(value, vocabulary):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a {vocabulary.__name__.lower()}, got {value!r}")
    return vocabulary.parse("_".join(value.split()))


def _coerce_text(key: AttributeKey, value: object) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key.value} expects text items, got {value!r}")
    return value.strip().lower()
