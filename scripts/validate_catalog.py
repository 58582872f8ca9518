"""Validate a menu catalog file.

Checks:
1. Every record decodes (segments, field count, identifiers, enumerations, prices).
2. Identifiers are unique.
3. Each category contributes at least one entry.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from menu_match.config import MenuMatchConfig  # noqa: E402
from menu_match.exceptions import MenuMatchError  # noqa: E402
from menu_match.parser import load_catalog_file  # noqa: E402
from menu_match.taxonomy import AttributeKey, Category  # noqa: E402


def fail(message: str) -> None:
    print(f"[catalog-check] ERROR: {message}")
    raise SystemExit(1)


def warn(message: str) -> None:
    print(f"[catalog-check] WARNING: {message}")


def main(argv: list[str] | None = None) -> int:
    config = MenuMatchConfig.from_env()
    parser = argparse.ArgumentParser(description="Validate a menu catalog file")
    parser.add_argument("path", nargs="?", default=config.catalog_path, help="Catalog file to check")
    parser.add_argument("--encoding", default=config.catalog_encoding)
    args = parser.parse_args(argv)

    try:
        catalog = load_catalog_file(args.path, encoding=args.encoding)
    except MenuMatchError as exc:
        fail(str(exc))

    if not len(catalog):
        fail(f"No entries found in {args.path}")

    categories = catalog.distinct_values(AttributeKey.CATEGORY)
    for category in Category:
        if category not in categories:
            warn(f"No {category.value} entries in {args.path}")

    print(f"[catalog-check] OK ({len(catalog)} entries)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
