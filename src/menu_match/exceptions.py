"""Custom exceptions for menu-match."""

from __future__ import annotations


class MenuMatchError(Exception):
    """Base exception for menu-match."""

    pass


class CatalogReadError(MenuMatchError):
    """Raised when the catalog file cannot be read."""

    pass


class CatalogNotFoundError(CatalogReadError):
    """Raised when the catalog file does not exist."""

    pass


class CatalogParseError(MenuMatchError):
    """Raised when a catalog record cannot be decoded.

    Attributes:
        line: 1-based source line of the offending record, if known.
        field: Name of the field that failed to decode.
        reason: Underlying decode failure.
    """

    field = "record"

    def __init__(self, reason: str, *, line: int | None = None, field: str | None = None):
        self.line = line
        self.field = field or type(self).field
        self.reason = reason
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}invalid {self.field}: {reason}")


class MalformedRecord(CatalogParseError):
    """Raised when a record does not have the expected segment or field layout."""

    field = "record"


class InvalidIdentifier(CatalogParseError):
    field = "identifier"


class DuplicateIdentifier(InvalidIdentifier):
    """Raised when an identifier is already used by another entry."""

    pass


class InvalidCategory(CatalogParseError):
    field = "category"


class InvalidPrice(CatalogParseError):
    field = "price"


class InvalidMeat(CatalogParseError):
    field = "meat"


class InvalidDressing(CatalogParseError):
    field = "dressing"


class InvalidSauce(CatalogParseError):
    field = "sauces"


class UnknownItemError(MenuMatchError, LookupError):
    """Raised when an identifier is not present in the catalog."""

    pass


class InvalidCustomerError(MenuMatchError):
    """Raised when customer details for an order are invalid."""

    pass
