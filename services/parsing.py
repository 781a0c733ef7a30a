"""
Parsing Service

Functions for parsing quantities, units and ingredient lines into
structured grocery data. Everything here is pure and never raises on
malformed text: the worst case is an unparsed name with no quantity.
"""

import re
from collections import namedtuple

from constants import (
    UNIT_REGEX,
    QUANTITY_REGEX,
    GLYPH_REGEX,
    UNIT_ALIASES,
    UNICODE_FRACTIONS,
    COMMON_FRACTIONS,
)

ParsedIngredient = namedtuple('ParsedIngredient', ['quantity', 'unit', 'name'])

_NUMBER = r'\d+(?:\.\d*)?|\.\d+'
_LEADING_NUMBER = re.compile(_NUMBER)
_VULGAR_FRACTION = re.compile(
    r'^(?:(' + _NUMBER + r')\s+)?(' + _NUMBER + r')\s*/\s*(' + _NUMBER + r')'
)


def float_to_fraction(value):
    """Convert float to fraction string for display."""
    if value is None or value == 0:
        return '0'
    # Check if it's a whole number
    if value == int(value):
        return str(int(value))
    whole = int(value)
    decimal = value - whole
    # Check common fractions (with tolerance)
    for dec, frac in COMMON_FRACTIONS.items():
        if abs(decimal - dec) < 0.02:
            if whole > 0:
                return f"{whole} {frac}"
            return frac
    return f"{value:.2f}".rstrip('0').rstrip('.')


def _leading_float(text):
    """Parse the number at the start of text, 0.0 if there is none."""
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def _parse_vulgar_fraction(text):
    """Parse 'a/b' or 'w a/b' at the start of text, 0.0 if it doesn't parse."""
    match = _VULGAR_FRACTION.match(text)
    if not match:
        return 0.0
    whole = float(match.group(1)) if match.group(1) else 0.0
    denom = float(match.group(3))
    if denom == 0:
        return whole
    return whole + float(match.group(2)) / denom


def parse_fraction(value):
    """
    Parse a quantity string into a float.

    Handles '2', '0.5', '1/2', '1 1/2', '½' and '1½'. Every unicode
    fraction glyph present contributes its value once, then the remaining
    digits are parsed as a fraction or a plain number and added. Anything
    unparseable contributes nothing, so the result is 0.0 for text with
    no numeric content.
    """
    if not value:
        return 0.0

    text = str(value).strip()
    total = 0.0

    for char, fraction in UNICODE_FRACTIONS.items():
        if char in text:
            total += fraction

    numeric = GLYPH_REGEX.sub('', text).strip()
    if numeric:
        if '/' in numeric:
            total += _parse_vulgar_fraction(numeric)
        else:
            total += _leading_float(numeric)

    return max(total, 0.0)


def normalize_unit(unit):
    """Map a unit spelling to its canonical short form ('tablespoons' -> 'tbsp').

    Unknown units are returned lowercased; empty input gives None.
    """
    if not unit:
        return None
    lower = str(unit).strip().lower()
    if not lower:
        return None
    return UNIT_ALIASES.get(lower, lower)


def parse_ingredient(text):
    """
    Parse an ingredient line like '2 cups diced tomatoes' into a
    ParsedIngredient(quantity, unit, name).

    Tried in order, first match wins:
      1. quantity + known unit + name   ('½ tsp salt')
      2. positive quantity + name       ('2 chicken breasts')
      3. the whole line as the name     ('olive oil')
    """
    cleaned = (text or '').strip()

    unit_match = UNIT_REGEX.match(cleaned)
    if unit_match:
        return ParsedIngredient(
            quantity=parse_fraction(unit_match.group(1)),
            unit=normalize_unit(unit_match.group(2)),
            name=unit_match.group(3).strip(),
        )

    qty_match = QUANTITY_REGEX.match(cleaned)
    if qty_match:
        quantity = parse_fraction(qty_match.group(1))
        if quantity > 0:
            return ParsedIngredient(quantity=quantity, unit=None, name=qty_match.group(2).strip())

    return ParsedIngredient(quantity=None, unit=None, name=cleaned)
