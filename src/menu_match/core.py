"""Core catalog loading and search functions."""

from pathlib import Path
from typing import Any

from menu_match.catalog import Catalog
from menu_match.config import MenuMatchConfig
from menu_match.parser import load_catalog_file
from menu_match.schema import CatalogEntry, ConstraintSpec

PathInput = str | Path


def open_catalog(
    path: PathInput | None = None,
    *,
    encoding: str | None = None,
) -> Catalog:
    """Load the menu catalog from disk.

    Args:
        path: Catalog file path. Falls back to MENU_MATCH_CATALOG_PATH env var,
            then `menu.txt`.
        encoding: File encoding. Falls back to MENU_MATCH_CATALOG_ENCODING env
            var, then `utf-8`.

    Returns:
        Catalog with every entry in file order.
    """
    config = MenuMatchConfig.from_env()
    return load_catalog_file(
        path if path is not None else config.catalog_path,
        encoding=encoding or config.catalog_encoding,
    )


def search(
    catalog: Catalog,
    spec: ConstraintSpec | None = None,
    *,
    min_price: float | None = None,
    max_price: float | None = None,
    **constraints: Any,
) -> list[CatalogEntry]:
    """Find catalog entries matching a spec or keyword constraints.

    Keyword constraints use attribute names (`category`, `bun`, `sauces`, ...).
    `None` values mean "don't care". An explicit `spec` takes precedence.
    """
    if spec is None:
        spec = ConstraintSpec.build(min_price=min_price, max_price=max_price, **constraints)
    return catalog.find_matches(spec)
