"""Parser for the line-oriented menu catalog format.

Each record after the header line has the layout::

    identifier,category,name,price,bun,meat,cheese,pickles,cucumber,tomato,dressing[greens][sauces][description]

The three bracketed segments hold comma-separated leafy greens, comma-separated
sauces, and free-text description. Delimiters cannot be escaped inside values.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

from menu_match.catalog import Catalog
from menu_match.exceptions import (
    CatalogNotFoundError,
    CatalogParseError,
    CatalogReadError,
    DuplicateIdentifier,
    InvalidCategory,
    InvalidDressing,
    InvalidIdentifier,
    InvalidMeat,
    InvalidPrice,
    InvalidSauce,
    MalformedRecord,
)
from menu_match.schema import BurgerDetails, CatalogEntry, SaladDetails
from menu_match.taxonomy import Category, Dressing, Meat, Sauce, Vocabulary

logger = logging.getLogger(__name__)

HEADER_LINES = 1
HEAD_FIELDS = (
    "identifier",
    "category",
    "name",
    "price",
    "bun",
    "meat",
    "cheese",
    "pickles",
    "cucumber",
    "tomato",
    "dressing",
)
BRACKETED_SEGMENTS = ("leafy_greens", "sauces", "description")
NO_SAUCE_TOKENS = frozenset({"", "na", "none"})
IDENTIFIER_PATTERN = re.compile(r"[+-]?[0-9]+")
PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_catalog(text: str) -> list[CatalogEntry]:
    """Decode every record in ``text``, aborting on the first bad line.

    Raises:
        CatalogParseError: A subclass naming the 1-based line and the field
            that failed to decode. No entries are returned in that case.
    """
    entries: list[CatalogEntry] = []
    seen: set[int] = set()

    for line_no, line in enumerate(text.splitlines(), start=1):
        if line_no <= HEADER_LINES or not line.strip():
            continue
        try:
            entry = parse_record(line, line_no=line_no)
            if entry.identifier in seen:
                raise DuplicateIdentifier(
                    f"identifier {entry.identifier} appears more than once",
                    line=line_no,
                )
        except CatalogParseError as exc:
            logger.error("catalog load aborted at line %s (%s): %s", exc.line, exc.field, exc.reason)
            raise
        seen.add(entry.identifier)
        entries.append(entry)
        logger.debug("line %d: decoded entry %d (%s)", line_no, entry.identifier, entry.name)

    logger.info("parsed %d catalog entries", len(entries))
    return entries


def parse_record(line: str, *, line_no: int | None = None) -> CatalogEntry:
    """Decode a single catalog record."""
    segments = line.split("[")
    if len(segments) != 1 + len(BRACKETED_SEGMENTS):
        raise MalformedRecord(
            f"expected {len(BRACKETED_SEGMENTS)} bracketed segments, found {len(segments) - 1}",
            line=line_no,
            field="segments",
        )
    head = segments[0]
    greens_raw, sauces_raw, description = (segment.replace("]", "") for segment in segments[1:])

    fields = head.split(",")
    # A dangling comma before the first bracket leaves one empty trailing field.
    if len(fields) == len(HEAD_FIELDS) + 1 and not fields[-1].strip():
        fields.pop()
    if len(fields) != len(HEAD_FIELDS):
        raise MalformedRecord(
            f"expected {len(HEAD_FIELDS)} comma-separated fields, found {len(fields)}",
            line=line_no,
            field="head",
        )
    raw = dict(zip(HEAD_FIELDS, fields))

    identifier = _decode_identifier(raw["identifier"], line_no)
    category = _decode_member(Category, raw["category"], InvalidCategory, line_no)
    name = raw["name"].strip()
    if not name:
        raise MalformedRecord("name is empty", line=line_no, field="name")
    price = _decode_price(raw["price"], line_no)
    meat = _decode_member(Meat, raw["meat"], InvalidMeat, line_no)
    dressing = _decode_member(
        Dressing, raw["dressing"].strip().replace(" ", "_"), InvalidDressing, line_no
    )
    sauces = _decode_sauces(sauces_raw, line_no)

    details: BurgerDetails | SaladDetails | None = None
    if category is Category.BURGER:
        details = BurgerDetails(bun=raw["bun"].strip().lower(), sauces=sauces)
    elif category is Category.SALAD:
        details = SaladDetails(
            dressing=dressing,
            leafy_greens=_decode_greens(greens_raw),
            cucumber=_decode_flag(raw["cucumber"]),
        )

    return CatalogEntry(
        identifier=identifier,
        name=name,
        price=price,
        description=description.strip(),
        category=category,
        meat=meat,
        cheese=_decode_flag(raw["cheese"]),
        pickles=_decode_flag(raw["pickles"]),
        tomato=_decode_flag(raw["tomato"]),
        details=details,
    )


def load_catalog(text: str) -> Catalog:
    """Parse catalog text into a :class:`Catalog`."""
    return Catalog.from_entries(parse_catalog(text))


def load_catalog_file(path: str | Path, *, encoding: str = "utf-8") -> Catalog:
    """Read and parse a catalog file.

    Raises:
        CatalogNotFoundError: If the file does not exist.
        CatalogReadError: If the file cannot be read or decoded.
        CatalogParseError: If any record is malformed.
    """
    path = Path(path)
    logger.info("loading catalog from %s", path)
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise CatalogNotFoundError(f"catalog file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogReadError(f"catalog file could not be read: {path}: {exc}") from exc
    return load_catalog(text)


def _decode_identifier(token: str, line_no: int | None) -> int:
    text = token.strip()
    if not IDENTIFIER_PATTERN.fullmatch(text):
        raise InvalidIdentifier(f"not an integer: {text!r}", line=line_no)
    identifier = int(text)
    if identifier <= 0:
        raise InvalidIdentifier(f"identifier must be positive, got {identifier}", line=line_no)
    return identifier


def _decode_price(token: str, line_no: int | None) -> float:
    text = token.strip()
    if not PRICE_PATTERN.fullmatch(text):
        raise InvalidPrice(f"not a decimal number: {text!r}", line=line_no)
    price = float(text)
    if not math.isfinite(price) or price < 0:
        raise InvalidPrice(f"price must be a non-negative number, got {text!r}", line=line_no)
    return price


def _decode_member(
    vocabulary: type[Vocabulary],
    token: str,
    error: type[CatalogParseError],
    line_no: int | None,
) -> Vocabulary:
    try:
        return vocabulary.parse(token)
    except ValueError as exc:
        raise error(str(exc), line=line_no) from exc


def _decode_flag(token: str) -> bool:
    return token.strip().lower() == "yes"


def _decode_sauces(segment: str, line_no: int | None) -> frozenset[Sauce]:
    sauces: set[Sauce] = set()
    for token in segment.split(","):
        if token.strip().lower() in NO_SAUCE_TOKENS:
            continue
        sauces.add(_decode_member(Sauce, token, InvalidSauce, line_no))
    return frozenset(sauces)


def _decode_greens(segment: str) -> frozenset[str]:
    return frozenset(token.strip().lower() for token in segment.split(",")) - {""}
