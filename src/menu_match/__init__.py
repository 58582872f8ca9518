"""menu-match: Load a menu catalog and find the items matching a customer's preferences."""

from menu_match.catalog import Catalog
from menu_match.core import open_catalog, search
from menu_match.parser import load_catalog, load_catalog_file, parse_catalog
from menu_match.schema import BurgerDetails, CatalogEntry, ConstraintSpec, CustomOrder, SaladDetails
from menu_match.taxonomy import AttributeKey, Category, Dressing, Meat, Sauce

__version__ = "0.1.0"

__all__ = [
    "open_catalog",
    "search",
    "load_catalog",
    "load_catalog_file",
    "parse_catalog",
    "AttributeKey",
    "BurgerDetails",
    "Catalog",
    "CatalogEntry",
    "Category",
    "ConstraintSpec",
    "CustomOrder",
    "Dressing",
    "Meat",
    "SaladDetails",
    "Sauce",
    "__version__",
]
