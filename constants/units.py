"""
Unit Constants

Contains the unit vocabulary, the ingredient line patterns built from it,
unit synonym mappings and fraction tables used for ingredient parsing.
"""

import re

# Unit spellings recognized after a leading quantity (regex fragments)
UNIT_PATTERNS = [
    'cups?', 'tbsp', 'tablespoons?', 'tsp', 'teaspoons?',
    'oz', 'ounces?', 'lbs?', 'pounds?', 'g', 'grams?', 'kg',
    'ml', 'liters?', 'l', 'qt', 'quarts?', 'pt', 'pints?',
    'slices?', 'pieces?', 'cloves?', 'stalks?', 'heads?', 'cans?',
    'packages?', 'bags?', 'bunch(?:es)?', 'sprigs?', 'pinch(?:es)?',
]

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bc': 0.25,   # ¼
    '\u00bd': 0.5,    # ½
    '\u00be': 0.75,   # ¾
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}

_GLYPHS = ''.join(UNICODE_FRACTIONS)
QUANTITY_CHARS = r'[\d./\s' + _GLYPHS + r']+'

# "2 cups diced tomatoes", "1/2 tsp. salt"
UNIT_REGEX = re.compile(
    r'^(' + QUANTITY_CHARS + r')\s*(' + '|'.join(UNIT_PATTERNS) + r')\.?\s+(.+)$',
    re.IGNORECASE,
)

# "2 chicken breasts"
QUANTITY_REGEX = re.compile(r'^(' + QUANTITY_CHARS + r')\s+(.+)$')

GLYPH_REGEX = re.compile('[' + _GLYPHS + ']')

# Unit synonyms (lowercase input -> canonical short form)
UNIT_ALIASES = {
    'tablespoons': 'tbsp', 'tablespoon': 'tbsp',
    'teaspoons': 'tsp', 'teaspoon': 'tsp',
    'cups': 'cup',
    'ounces': 'oz', 'ounce': 'oz',
    'pounds': 'lb', 'pound': 'lb', 'lbs': 'lb',
    'grams': 'g', 'gram': 'g',
    'kilograms': 'kg', 'kilogram': 'kg',
    'milliliters': 'ml', 'milliliter': 'ml',
    'liters': 'L', 'liter': 'L', 'l': 'L',
}

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 2/3: '2/3', 0.75: '3/4', 0.875: '7/8'
}
