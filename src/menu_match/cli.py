"""Command-line interface for menu-match."""

import argparse
import json
import logging
import sys

from menu_match import __version__
from menu_match.catalog import Catalog
from menu_match.config import MenuMatchConfig
from menu_match.core import open_catalog
from menu_match.exceptions import CatalogParseError, MenuMatchError
from menu_match.order import Customer, Order
from menu_match.render import describe_entry, format_price, format_value
from menu_match.schema import CatalogEntry, ConstraintSpec, CustomOrder
from menu_match.taxonomy import AttributeKey


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    config = MenuMatchConfig.from_env()
    parser = _build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = open_catalog(args.catalog)
        return args.handler(catalog, args)
    except CatalogParseError as e:
        print(f"Error: catalog is malformed: {e}", file=sys.stderr)
        return 1
    except MenuMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def _build_parser(config: MenuMatchConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menu-match",
        description="Search a menu catalog for items matching your preferences",
    )
    parser.add_argument(
        "--catalog",
        default=config.catalog_path,
        help="Path to the catalog file (default: MENU_MATCH_CATALOG_PATH env var or menu.txt)",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: MENU_MATCH_LOG_LEVEL env var or WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"menu-match {__version__}",
    )

    filters = _filter_parser()
    subparsers = parser.add_subparsers(dest="command", required=True)

    options = subparsers.add_parser("options", help="List the distinct values observed for an attribute")
    options.add_argument("key", type=AttributeKey.parse, help="Attribute name, e.g. bun or leafy_greens")
    options.set_defaults(handler=_run_options)

    search = subparsers.add_parser("search", parents=[filters], help="Find items matching preferences")
    search.add_argument("--json", action="store_true", help="Output as JSON")
    search.set_defaults(handler=_run_search)

    show = subparsers.add_parser("show", help="Show one catalog item")
    show.add_argument("identifier", type=int, help="Catalog item identifier")
    show.set_defaults(handler=_run_show)

    order = subparsers.add_parser(
        "order",
        parents=[filters],
        help="Print an order receipt for a catalog item, or a custom order built from filters",
    )
    order.add_argument("--name", required=True, help="Customer name")
    order.add_argument("--contact", required=True, help="Customer contact number (9 digits)")
    order.add_argument("--requests", default="", help="Customisation requests")
    order.add_argument("--item", type=int, help="Catalog item identifier (omit for a custom order)")
    order.set_defaults(handler=_run_order)

    return parser


def _filter_parser() -> argparse.ArgumentParser:
    filters = argparse.ArgumentParser(add_help=False)
    group = filters.add_argument_group("preferences")
    group.add_argument("--category", help="burger or salad")
    group.add_argument("--bun", help="Bun type")
    group.add_argument("--meat", help="beef, chicken, vegan")
    group.add_argument("--dressing", help="Salad dressing")
    group.add_argument("--sauce", action="append", dest="sauces", help="Acceptable sauce (repeatable)")
    group.add_argument(
        "--green", action="append", dest="leafy_greens", help="Acceptable leafy green (repeatable)"
    )
    for flag in ("cheese", "pickles", "tomato", "cucumber"):
        group.add_argument(f"--{flag}", type=_yes_no, metavar="yes|no", help=f"Require {flag} or not")
    group.add_argument("--min-price", type=float, help="Minimum price")
    group.add_argument("--max-price", type=float, help="Maximum price")
    return filters


def _yes_no(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"yes", "y", "true"}:
        return True
    if normalized in {"no", "n", "false"}:
        return False
    raise argparse.ArgumentTypeError(f"expected yes or no, got {value!r}")


def _spec_from_args(args: argparse.Namespace) -> ConstraintSpec:
    return ConstraintSpec.build(
        min_price=args.min_price,
        max_price=args.max_price,
        **{key.value: getattr(args, key.value) for key in AttributeKey},
    )


def _run_options(catalog: Catalog, args: argparse.Namespace) -> int:
    for label in sorted(format_value(value) for value in catalog.distinct_values(args.key)):
        print(label)
    return 0


def _run_search(catalog: Catalog, args: argparse.Namespace) -> int:
    results = catalog.find_matches(_spec_from_args(args))
    if not results:
        print("No results found", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([entry.model_dump(mode="json") for entry in results], indent=2))
    else:
        _print_results(results)
    return 0


def _run_show(catalog: Catalog, args: argparse.Namespace) -> int:
    print(describe_entry(catalog.get(args.identifier)))
    return 0


def _run_order(catalog: Catalog, args: argparse.Namespace) -> int:
    customer = Customer.create(args.name, args.contact)
    if args.item is not None:
        item: CatalogEntry | CustomOrder = catalog.get(args.item)
    else:
        item = CustomOrder(preferences=_spec_from_args(args))
    print(Order(customer=customer, item=item, special_requests=args.requests).receipt_text())
    return 0


def _print_results(results: list[CatalogEntry]) -> None:
    """Print results in human-readable format."""
    print()
    for entry in results:
        print(f"  {entry.identifier:>6}  {entry.name:<28} {format_price(entry.price):>8}")
    print()
    print(f"  {len(results)} match(es)")


if __name__ == "__main__":
    sys.exit(main())
