"""
Tests for grocery aisle categorization.
"""

from collections import namedtuple

import pytest

from constants import GROCERY_CATEGORIES
from services.categories import categorize_ingredient, group_by_category, is_valid_category


@pytest.mark.parametrize('name, category', [
    ('spinach', 'Produce'),
    ('greek yogurt', 'Dairy'),
    ('Chicken Breast', 'Meat & Seafood'),
    ('sourdough bread', 'Bakery'),
    ('olive oil', 'Pantry'),
    ('frozen pizza', 'Frozen'),
    ('sparkling water', 'Beverages'),
    ('pretzels', 'Snacks'),
    ('hummus', 'Condiments'),
    ('xyz123', 'Other'),
])
def test_categorize(name, category):
    assert categorize_ingredient(name) == category


def test_case_and_whitespace_insensitive():
    assert categorize_ingredient('  SPINACH ') == 'Produce'


def test_substring_matching():
    # 'apple' is a keyword, so anything containing it is produce
    assert categorize_ingredient('pineapple juice') == 'Produce'
    assert categorize_ingredient('applesauce') == 'Produce'


def test_first_category_in_order_wins():
    # 'cream' (Dairy) is checked before 'ice cream' (Frozen)
    assert categorize_ingredient('vanilla ice cream') == 'Dairy'
    # 'pepper' is listed under Produce before Pantry
    assert categorize_ingredient('black pepper') == 'Produce'


def test_empty_name_is_other():
    assert categorize_ingredient('') == 'Other'
    assert categorize_ingredient(None) == 'Other'


def test_result_is_always_a_known_category():
    for name in ('kale', 'rice cake', 'quinoa', 'mystery box', 'tea'):
        assert categorize_ingredient(name) in GROCERY_CATEGORIES


def test_idempotent():
    assert categorize_ingredient('cheddar') == categorize_ingredient('cheddar')


def test_is_valid_category():
    assert is_valid_category('Meat & Seafood')
    assert not is_valid_category('Meat')


Row = namedtuple('Row', ['name', 'category'])


def test_group_by_category_follows_display_order():
    rows = [
        Row('soda', 'Beverages'),
        Row('kale', 'Produce'),
        Row('milk', 'Dairy'),
        Row('apples', 'Produce'),
        Row('gizmo', 'Unknown'),
    ]
    grouped = group_by_category(rows)
    assert list(grouped) == ['Produce', 'Dairy', 'Beverages', 'Other']
    assert [r.name for r in grouped['Produce']] == ['kale', 'apples']
    assert [r.name for r in grouped['Other']] == ['gizmo']


def test_group_by_category_empty():
    assert group_by_category([]) == {}
