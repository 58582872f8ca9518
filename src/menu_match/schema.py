"""Data models for menu-match."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from menu_match.taxonomy import (
    AttributeKey,
    AttributeValue,
    Category,
    Dressing,
    Meat,
    Sauce,
    ValueKind,
    coerce_value,
)


class BurgerDetails(BaseModel):
    """Attributes carried only by bread-composite entries."""

    model_config = ConfigDict(frozen=True)

    bun: str
    sauces: frozenset[Sauce] = frozenset()


class SaladDetails(BaseModel):
    """Attributes carried only by leafy-bowl entries."""

    model_config = ConfigDict(frozen=True)

    dressing: Dressing
    leafy_greens: frozenset[str] = frozenset()
    cucumber: bool = False


_DETAILS_BY_CATEGORY: dict[Category, type[BaseModel]] = {
    Category.BURGER: BurgerDetails,
    Category.SALAD: SaladDetails,
}


class CatalogEntry(BaseModel):
    """One immutable menu offering decoded from the catalog file."""

    model_config = ConfigDict(frozen=True)

    identifier: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    description: str = ""
    category: Category
    meat: Meat = Meat.NA
    cheese: bool = False
    pickles: bool = False
    tomato: bool = False
    details: BurgerDetails | SaladDetails | None = None

    @model_validator(mode="after")
    def _details_match_category(self) -> "CatalogEntry":
        expected = _DETAILS_BY_CATEGORY.get(self.category)
        if expected is None:
            if self.details is not None:
                raise ValueError(f"{self.category.value} entries carry no category details")
        elif not isinstance(self.details, expected):
            raise ValueError(f"{self.category.value} entries require {expected.__name__}")
        return self

    @property
    def attributes(self) -> dict[AttributeKey, AttributeValue]:
        """Attribute map used for matching and indexing.

        Keys that do not apply to the entry's category are absent, as is
        ``MEAT`` when the entry has no meat and ``SAUCES`` when a burger has
        no sauce.
        """
        attributes: dict[AttributeKey, AttributeValue] = {AttributeKey.CATEGORY: self.category}
        if isinstance(self.details, BurgerDetails):
            attributes[AttributeKey.BUN] = self.details.bun
            if self.details.sauces:
                attributes[AttributeKey.SAUCES] = self.details.sauces
        if self.meat is not Meat.NA:
            attributes[AttributeKey.MEAT] = self.meat
        attributes[AttributeKey.PICKLES] = self.pickles
        attributes[AttributeKey.CHEESE] = self.cheese
        attributes[AttributeKey.TOMATO] = self.tomato
        if isinstance(self.details, SaladDetails):
            attributes[AttributeKey.DRESSING] = self.details.dressing
            attributes[AttributeKey.LEAFY_GREENS] = self.details.leafy_greens
            attributes[AttributeKey.CUCUMBER] = self.details.cucumber
        return attributes


class ConstraintSpec(BaseModel):
    """Sparse description of a desired item plus an inclusive price range.

    A key missing from ``constraints`` means "don't care". Set-valued keys
    given an empty collection are dropped, so they read as absent.
    """

    model_config = ConfigDict(frozen=True)

    constraints: Mapping[AttributeKey, Any] = Field(default_factory=dict, validate_default=True)
    min_price: float = Field(default=0.0, ge=0)
    max_price: float = Field(default=math.inf, ge=0)

    @field_validator("constraints", mode="before")
    @classmethod
    def _coerce_constraints(cls, value: Any) -> dict[AttributeKey, AttributeValue]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("constraints must be a mapping of attribute keys to values")
        constraints: dict[AttributeKey, AttributeValue] = {}
        for raw_key, raw_value in value.items():
            key = raw_key if isinstance(raw_key, AttributeKey) else AttributeKey.parse(str(raw_key))
            coerced = coerce_value(key, raw_value)
            if key.kind is ValueKind.SET and not coerced:
                continue
            constraints[key] = coerced
        return constraints

    @field_validator("constraints")
    @classmethod
    def _freeze_constraints(cls, value: Mapping[AttributeKey, Any]) -> Mapping[AttributeKey, Any]:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_price_range(self) -> "ConstraintSpec":
        if self.min_price > self.max_price:
            raise ValueError(f"min_price {self.min_price} exceeds max_price {self.max_price}")
        return self

    @classmethod
    def build(
        cls,
        *,
        min_price: float | None = None,
        max_price: float | None = None,
        **constraints: Any,
    ) -> "ConstraintSpec":
        """Build a spec from keyword constraints, skipping ``None`` values.

        Example:
            ConstraintSpec.build(category="burger", sauces=["aioli"], max_price=12)
        """
        return cls(
            constraints={
                AttributeKey.parse(name): value for name, value in constraints.items() if value is not None
            },
            min_price=0.0 if min_price is None else min_price,
            max_price=math.inf if max_price is None else max_price,
        )

    def with_constraint(self, key: AttributeKey, value: Any) -> "ConstraintSpec":
        return ConstraintSpec(
            constraints={**self.constraints, key: value},
            min_price=self.min_price,
            max_price=self.max_price,
        )


class CustomOrder(BaseModel):
    """Synthesized offering built from a customer's preferences."""

    model_config = ConfigDict(frozen=True)

    identifier: Literal[0] = 0
    name: str = "CUSTOM ORDER"
    price: None = None
    description: str = "custom - see preferences"
    preferences: ConstraintSpec

    @property
    def attributes(self) -> dict[AttributeKey, AttributeValue]:
        return dict(self.preferences.constraints)
