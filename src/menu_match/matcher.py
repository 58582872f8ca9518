"""Strict constraint matching over catalog entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from menu_match.schema import CatalogEntry, ConstraintSpec
from menu_match.taxonomy import AttributeKey, AttributeValue, ValueKind

logger = logging.getLogger(__name__)


def matches(entry: CatalogEntry, spec: ConstraintSpec) -> bool:
    """Return True if ``entry`` satisfies every constraint present in ``spec``.

    Price must fall within the inclusive range of ``spec``. For each constrained
    key, an entry without that key fails; scalar keys compare by equality and
    set keys require a non-empty intersection.
    """
    if not spec.min_price <= entry.price <= spec.max_price:
        return False

    attributes = entry.attributes
    for key, wanted in spec.constraints.items():
        if key not in attributes:
            return False
        if not _satisfies(key, attributes[key], wanted):
            return False
    return True


def find_matches(entries: Iterable[CatalogEntry], spec: ConstraintSpec) -> list[CatalogEntry]:
    """Return the entries satisfying ``spec``, preserving their order."""
    result = [entry for entry in entries if matches(entry, spec)]
    logger.debug(
        "matched %d entries for %d constraint(s) in price range [%s, %s]",
        len(result),
        len(spec.constraints),
        spec.min_price,
        spec.max_price,
    )
    return result


def _satisfies(key: AttributeKey, actual: AttributeValue, wanted: AttributeValue) -> bool:
    kind = key.kind
    if kind is ValueKind.SET:
        return not frozenset(actual).isdisjoint(wanted)
    if kind in (ValueKind.ENUM, ValueKind.TEXT, ValueKind.BOOLEAN):
        return actual == wanted
    raise AssertionError(f"unhandled value kind: {kind}")
