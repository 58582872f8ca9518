"""Tests for the catalog parser."""

import pytest

from conftest import HEADER, SAMPLE_LINES
from menu_match import (
    AttributeKey,
    BurgerDetails,
    Category,
    Dressing,
    Meat,
    SaladDetails,
    Sauce,
    load_catalog,
    load_catalog_file,
    parse_catalog,
)
from menu_match.exceptions import (
    CatalogNotFoundError,
    CatalogParseError,
    DuplicateIdentifier,
    InvalidCategory,
    InvalidDressing,
    InvalidIdentifier,
    InvalidMeat,
    InvalidPrice,
    InvalidSauce,
    MalformedRecord,
)
from menu_match.parser import parse_record


def _catalog_with(*lines: str) -> str:
    return "\n".join([HEADER, *lines])


def test_parse_sample_catalog(catalog_text):
    entries = parse_catalog(catalog_text)

    assert [entry.identifier for entry in entries] == [1001, 1002, 1003, 1004, 2001, 2002, 2003]


def test_parse_is_deterministic(catalog_text):
    assert parse_catalog(catalog_text) == parse_catalog(catalog_text)


def test_header_line_is_skipped():
    assert parse_catalog(HEADER) == []


def test_blank_lines_are_skipped():
    entries = parse_catalog(_catalog_with(SAMPLE_LINES[0], "", "   ", SAMPLE_LINES[1]))
    assert len(entries) == 2


def test_decodes_burger_fields():
    entry = parse_record(SAMPLE_LINES[0])

    assert entry.identifier == 1001
    assert entry.category is Category.BURGER
    assert entry.name == "Classic Beef"
    assert entry.price == 12.5
    assert entry.meat is Meat.BEEF
    assert entry.cheese is True
    assert entry.pickles is True
    assert entry.tomato is True
    assert entry.description == "A classic beef burger."
    assert entry.details == BurgerDetails(bun="sesame", sauces=frozenset({Sauce.TOMATO, Sauce.SPECIAL}))


def test_decodes_salad_fields():
    entry = parse_record(SAMPLE_LINES[4])

    assert entry.category is Category.SALAD
    assert entry.details == SaladDetails(
        dressing=Dressing.CAESAR,
        leafy_greens=frozenset({"cos lettuce", "rocket"}),
        cucumber=False,
    )


def test_dressing_spaces_become_underscores():
    entry = parse_record(SAMPLE_LINES[6])
    assert entry.details.dressing is Dressing.SWEET_CHILLI


def test_yes_flag_is_case_insensitive():
    line = "7,burger,Flags,1,milk,beef,YES,Yes,no,nope,NA[x][NA][d]"
    entry = parse_record(line)
    assert entry.cheese is True
    assert entry.pickles is True
    assert entry.tomato is False


def test_no_sauce_token_means_empty_set():
    entry = parse_record(SAMPLE_LINES[3])
    assert entry.details.sauces == frozenset()
    assert AttributeKey.SAUCES not in entry.attributes


def test_trailing_comma_before_segments_is_tolerated():
    entry = parse_record("7,salad,Bowl,9.5,NA,NA,no,no,yes,no,ranch,[kale][NA][Greens.]")
    assert entry.details.dressing is Dressing.RANCH
    assert entry.details.cucumber is True


def test_category_field_invariant(catalog_text):
    for entry in parse_catalog(catalog_text):
        attributes = entry.attributes
        is_burger = entry.category is Category.BURGER
        is_salad = entry.category is Category.SALAD
        assert (AttributeKey.BUN in attributes) == is_burger
        assert (AttributeKey.SAUCES in attributes) == (is_burger and bool(entry.details.sauces))
        assert (AttributeKey.DRESSING in attributes) == is_salad
        assert (AttributeKey.LEAFY_GREENS in attributes) == is_salad
        assert (AttributeKey.CUCUMBER in attributes) == is_salad
        assert (AttributeKey.MEAT in attributes) == (entry.meat is not Meat.NA)


def test_cucumber_ignored_for_burgers():
    # 1003 says cucumber=yes but burgers carry no cucumber attribute.
    entry = parse_record(SAMPLE_LINES[2])
    assert AttributeKey.CUCUMBER not in entry.attributes


def test_non_numeric_identifier_is_fatal():
    text = _catalog_with("abc,burger,Bad,1,milk,beef,no,no,no,no,NA[x][NA][d]", *SAMPLE_LINES)

    with pytest.raises(InvalidIdentifier) as excinfo:
        parse_catalog(text)

    assert excinfo.value.line == 2
    assert excinfo.value.field == "identifier"
    assert "line 2" in str(excinfo.value)


def test_error_reports_source_line_of_later_record():
    bad = "9,burger,Bad,1,milk,beef,no,no,no,no,NA[x][ketchup][d]"
    with pytest.raises(InvalidSauce) as excinfo:
        parse_catalog(_catalog_with(*SAMPLE_LINES[:3], bad))
    assert excinfo.value.line == 5
    assert excinfo.value.field == "sauces"


@pytest.mark.parametrize(
    "line,error,field",
    [
        ("0,burger,Zero,1,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidIdentifier, "identifier"),
        ("1_0,burger,Bad,1,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidIdentifier, "identifier"),
        ("1,pizza,Bad,1,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidCategory, "category"),
        ("1,burger,Bad,cheap,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidPrice, "price"),
        ("1,burger,Bad,-2,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidPrice, "price"),
        ("1,burger,Bad,nan,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidPrice, "price"),
        ("1,burger,Bad,1_2.5,milk,beef,no,no,no,no,NA[x][NA][d]", InvalidPrice, "price"),
        ("1,burger,Bad,1,milk,tofu,no,no,no,no,NA[x][NA][d]", InvalidMeat, "meat"),
        ("1,burger,Bad,1,milk,beef,no,no,no,no,gravy[x][NA][d]", InvalidDressing, "dressing"),
        ("1,burger,Bad,1,milk,beef,no,no,no,no,NA[x][aioli,ketchup][d]", InvalidSauce, "sauces"),
        ("1,burger,Bad,1,milk,beef,no,no,no,no,NA[x][NA]", MalformedRecord, "segments"),
        ("1,burger,Bad,1,milk,beef,no,no,no,NA[x][NA][d]", MalformedRecord, "head"),
        ("1,burger, ,1,milk,beef,no,no,no,no,NA[x][NA][d]", MalformedRecord, "name"),
    ],
)
def test_decode_failures(line, error, field):
    with pytest.raises(error) as excinfo:
        parse_catalog(_catalog_with(line))

    assert excinfo.value.line == 2
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, CatalogParseError)


def test_duplicate_identifier_is_fatal():
    with pytest.raises(DuplicateIdentifier) as excinfo:
        parse_catalog(_catalog_with(SAMPLE_LINES[0], SAMPLE_LINES[0]))
    assert excinfo.value.line == 3


def test_load_catalog_returns_catalog(catalog_text):
    catalog = load_catalog(catalog_text)
    assert len(catalog) == len(SAMPLE_LINES)


def test_load_catalog_file(catalog_file):
    catalog = load_catalog_file(catalog_file)
    assert catalog.get(2002).name == "Greek Garden"


def test_load_catalog_file_missing(tmp_path):
    with pytest.raises(CatalogNotFoundError):
        load_catalog_file(tmp_path / "missing.txt")


def test_bundled_sample_menu_loads():
    from pathlib import Path

    catalog = load_catalog_file(Path(__file__).resolve().parent.parent / "menu.txt")
    assert len(catalog) == 12
