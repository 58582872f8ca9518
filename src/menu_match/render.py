"""Plain-text rendering of entries and preferences."""

from __future__ import annotations

import math

from menu_match.schema import CatalogEntry, ConstraintSpec, CustomOrder
from menu_match.taxonomy import AttributeKey, AttributeValue, Vocabulary


def format_value(value: AttributeValue) -> str:
    """Format an attribute value for display."""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, Vocabulary):
        return value.label
    if isinstance(value, (set, frozenset)):
        return ", ".join(sorted(format_value(item) for item in value)) or "-"
    return str(value)


def format_price(price: float) -> str:
    return f"${price:.2f}"


def describe_spec(spec: ConstraintSpec) -> str:
    """Render a customer's preferences, one attribute per line."""
    lines = _attribute_lines(spec.constraints)
    if spec.min_price > 0 or not math.isinf(spec.max_price):
        upper = "any" if math.isinf(spec.max_price) else format_price(spec.max_price)
        lines.append(f"Price range: {format_price(spec.min_price)} - {upper}")
    return "\n".join(lines)


def describe_entry(entry: CatalogEntry | CustomOrder) -> str:
    """Render an offering as multi-line text.

    Catalog entries show name, identifier, description, attributes and price.
    Custom orders have no fixed price, so only their preferences are shown.
    """
    if isinstance(entry, CustomOrder):
        return describe_spec(entry.preferences)

    lines = [f"{entry.name} ({entry.identifier})"]
    if entry.description:
        lines.append(entry.description)
    lines.extend(_attribute_lines(entry.attributes))
    lines.append(f"Price: {format_price(entry.price)}")
    return "\n".join(lines)


def _attribute_lines(attributes: dict[AttributeKey, AttributeValue]) -> list[str]:
    return [f"{key.label}: {format_value(value)}" for key, value in attributes.items()]
