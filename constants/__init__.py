"""
Constants Package

Unit vocabulary, grocery categories and validation limits.
"""

from .units import (
    UNIT_PATTERNS,
    UNIT_REGEX,
    QUANTITY_REGEX,
    GLYPH_REGEX,
    UNIT_ALIASES,
    UNICODE_FRACTIONS,
    COMMON_FRACTIONS,
)
from .categories import GROCERY_CATEGORIES, CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from .validation import UPDATABLE_ITEM_FIELDS, MAX_LENGTHS, MAX_QUANTITY, MAX_RECORD_ID
