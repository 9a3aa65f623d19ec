"""Tests for category inference."""

import pytest

from splitledger.domain.category import CATEGORY_ICONS, categorize, category_icon
from splitledger.domain.entities import Category


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Monthly Rent payment", Category.RENT),
        ("Uber to airport", Category.TRANSPORT),
        ("random stuff", Category.OTHER),
        ("Electricity bill", Category.ELECTRICITY),
        ("Power backup", Category.ELECTRICITY),
        ("WiFi recharge", Category.WIFI),
        ("Internet", Category.WIFI),
        ("Water cans", Category.WATER),
        ("Maid salary", Category.COOK),
        ("Cook", Category.COOK),
        ("Grocery run", Category.GROCERIES),
        ("Team meal", Category.GROCERIES),
        ("Auto fare", Category.TRANSPORT),
        ("Doctor visit", Category.MEDICAL),
        ("Medicines", Category.MEDICAL),
    ],
)
def test_categorize(description, expected):
    """Test keyword-based category inference."""
    assert categorize(description) == expected


def test_categorize_first_rule_wins():
    """Test that earlier rules take priority when several keywords match."""
    # rent beats electricity, food beats uber
    assert categorize("Rent and electricity") == Category.RENT
    assert categorize("Food delivery via uber") == Category.GROCERIES
    # "water" comes before "cook"
    assert categorize("Water for the cook") == Category.WATER


def test_categorize_matches_substrings():
    """Test keywords match inside longer words."""
    # "parental" contains "rent"
    assert categorize("Parental visit") == Category.RENT


def test_categorize_empty():
    """Test empty descriptions fall back to other."""
    assert categorize("") == Category.OTHER


def test_every_category_has_icon():
    """Test every category has a display icon."""
    assert set(CATEGORY_ICONS) == set(Category)


def test_category_icon_unknown_falls_back():
    """Test unknown category values get the other icon."""
    assert category_icon("furniture") == CATEGORY_ICONS[Category.OTHER]
    assert category_icon("rent") == CATEGORY_ICONS[Category.RENT]
