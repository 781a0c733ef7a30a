"""
Category Service

Classifies ingredient names into grocery aisle categories.
"""

from collections import OrderedDict

from constants import CATEGORY_KEYWORDS, GROCERY_CATEGORIES, DEFAULT_CATEGORY


def categorize_ingredient(name):
    """
    Return the grocery category for an ingredient name.

    Keywords match by substring, so 'apple' also matches 'pineapple'.
    The first category in declaration order with a matching keyword wins;
    names matching nothing fall into 'Other'.
    """
    lower = (name or '').lower().strip()
    if not lower:
        return DEFAULT_CATEGORY

    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lower for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


def is_valid_category(category):
    return category in GROCERY_CATEGORIES


def group_by_category(items):
    """Group items into an ordered mapping of category -> items.

    Categories follow display order and empty ones are left out. Items
    with an unknown category are filed under 'Other'.
    """
    grouped = OrderedDict((category, []) for category in GROCERY_CATEGORIES)
    for item in items:
        category = item.category if item.category in grouped else DEFAULT_CATEGORY
        grouped[category].append(item)
    return OrderedDict((category, rows) for category, rows in grouped.items() if rows)
