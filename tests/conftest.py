"""Shared fixtures for menu-match tests."""

import pytest

from menu_match import load_catalog

HEADER = "id,type,name,price,bun,meat,cheese,pickles,cucumber,tomato,dressing,[greens][sauces][description]"

SAMPLE_LINES = [
    "1001,burger,Classic Beef,12.50,Sesame,beef,yes,yes,no,yes,NA[lettuce][tomato,special][A classic beef burger.]",
    "1002,burger,Chicken Crunch,11.00,brioche,chicken,no,yes,no,no,NA[lettuce][aioli,special][Crispy chicken.]",
    "1003,burger,Garden Stack,10.00,brioche,vegan,yes,no,yes,yes,NA[spinach][mustard][Plant-based patty.]",
    "1004,burger,Plain Jane,8.00,milk,beef,no,no,no,no,NA[NA][NA][Just the patty, no sauce.]",
    "2001,salad,Caesar Bowl,13.00,NA,chicken,yes,no,no,no,caesar[cos lettuce, Rocket][NA][Chicken caesar.]",
    "2002,salad,Greek Garden,12.00,NA,NA,yes,no,yes,yes,Italian[spinach][NA][Feta and olives.]",
    "2003,salad,Sweet Heat,14.50,NA,beef,no,no,yes,no,sweet chilli[kale][NA][Beef with sweet chilli.]",
]

SAMPLE_CATALOG = "\n".join([HEADER, *SAMPLE_LINES]) + "\n"


@pytest.fixture
def catalog_text() -> str:
    return SAMPLE_CATALOG


@pytest.fixture
def catalog():
    return load_catalog(SAMPLE_CATALOG)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "menu.txt"
    path.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return path
