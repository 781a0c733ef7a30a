"""
Tests for quantity, unit and ingredient line parsing.
"""

import pytest

from constants import UNIT_ALIASES
from services.parsing import (
    ParsedIngredient,
    float_to_fraction,
    normalize_unit,
    parse_fraction,
    parse_ingredient,
)


class TestParseFraction:

    @pytest.mark.parametrize('text, expected', [
        ('1/2', 0.5),
        ('1 1/2', 1.5),
        ('½', 0.5),
        ('¼', 0.25),
        ('2', 2.0),
        ('0.5', 0.5),
        ('1½', 1.5),
        ('1 ¾', 1.75),
        (' 3 ', 3.0),
        ('3/4 ', 0.75),
    ])
    def test_values(self, text, expected):
        assert parse_fraction(text) == pytest.approx(expected)

    def test_empty_is_zero(self):
        assert parse_fraction('') == 0
        assert parse_fraction(None) == 0

    def test_no_numeric_content_is_zero(self):
        assert parse_fraction('abc') == 0
        assert parse_fraction('/') == 0

    def test_division_by_zero_contributes_nothing(self):
        assert parse_fraction('1/0') == 0

    def test_multiple_glyphs_are_summed(self):
        assert parse_fraction('½¼') == pytest.approx(0.75)

    def test_thirds(self):
        assert parse_fraction('⅓') == pytest.approx(1 / 3)
        assert parse_fraction('2⅔') == pytest.approx(2 + 2 / 3)

    def test_never_negative(self):
        assert parse_fraction('-2') >= 0


class TestNormalizeUnit:

    @pytest.mark.parametrize('unit, expected', [
        ('tablespoons', 'tbsp'),
        ('Tablespoon', 'tbsp'),
        ('teaspoons', 'tsp'),
        ('cups', 'cup'),
        ('ounces', 'oz'),
        ('pounds', 'lb'),
        ('lbs', 'lb'),
        ('grams', 'g'),
        ('kilograms', 'kg'),
        ('milliliters', 'ml'),
        ('liters', 'L'),
        ('l', 'L'),
        ('L', 'L'),
        ('Bunch', 'bunch'),
        ('whole', 'whole'),
    ])
    def test_canonical_forms(self, unit, expected):
        assert normalize_unit(unit) == expected

    def test_empty_is_none(self):
        assert normalize_unit(None) is None
        assert normalize_unit('') is None
        assert normalize_unit('   ') is None

    @pytest.mark.parametrize('unit', sorted(set(UNIT_ALIASES) | set(UNIT_ALIASES.values())) + [
        'cloves', 'Pinches', 'bag', 'can', 'qt', None, 'whole',
    ])
    def test_idempotent(self, unit):
        assert normalize_unit(normalize_unit(unit)) == normalize_unit(unit)


class TestParseIngredient:

    def test_quantity_unit_name(self):
        assert parse_ingredient('2 cups diced tomatoes') == ParsedIngredient(2.0, 'cup', 'diced tomatoes')

    def test_unicode_fraction_with_unit(self):
        assert parse_ingredient('½ tsp salt') == ParsedIngredient(0.5, 'tsp', 'salt')

    def test_mixed_fraction_and_long_unit(self):
        parsed = parse_ingredient('1 1/2 Tablespoons olive oil')
        assert parsed.quantity == pytest.approx(1.5)
        assert parsed.unit == 'tbsp'
        assert parsed.name == 'olive oil'

    def test_unit_with_period(self):
        assert parse_ingredient('3 lbs. ground beef') == ParsedIngredient(3.0, 'lb', 'ground beef')

    def test_quantity_without_unit(self):
        assert parse_ingredient('2 chicken breasts') == ParsedIngredient(2.0, None, 'chicken breasts')

    def test_word_starting_with_unit_letters_is_not_a_unit(self):
        assert parse_ingredient('2 large eggs') == ParsedIngredient(2.0, None, 'large eggs')
        assert parse_ingredient('4 garlic cloves') == ParsedIngredient(4.0, None, 'garlic cloves')

    def test_name_only(self):
        assert parse_ingredient('olive oil') == ParsedIngredient(None, None, 'olive oil')

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_ingredient('   1 can  black beans  ') == ParsedIngredient(1.0, 'can', 'black beans')

    def test_zero_quantity_without_unit_falls_back(self):
        assert parse_ingredient('0 apples') == ParsedIngredient(None, None, '0 apples')

    def test_empty_and_none(self):
        assert parse_ingredient('') == ParsedIngredient(None, None, '')
        assert parse_ingredient(None) == ParsedIngredient(None, None, '')

    def test_number_alone_is_a_name(self):
        assert parse_ingredient('2') == ParsedIngredient(None, None, '2')

    @pytest.mark.parametrize('unit', [
        'cup', 'cups', 'tbsp', 'tablespoon', 'tsp', 'teaspoons', 'oz', 'ounce',
        'lb', 'lbs', 'pound', 'g', 'grams', 'kg', 'ml', 'liter', 'l', 'qt',
        'quarts', 'pt', 'pint', 'slices', 'piece', 'cloves', 'stalk', 'heads',
        'can', 'packages', 'bag', 'bunches', 'sprig', 'pinch', 'pinches',
    ])
    def test_every_unit_in_vocabulary(self, unit):
        parsed = parse_ingredient(f'1/4 {unit} fresh thyme')
        assert parsed.quantity == pytest.approx(0.25)
        assert parsed.unit == normalize_unit(unit)
        assert parsed.name == 'fresh thyme'


def test_float_to_fraction():
    assert float_to_fraction(1.5) == '1 1/2'
    assert float_to_fraction(0.25) == '1/4'
    assert float_to_fraction(2.0) == '2'
    assert float_to_fraction(0.333) == '1/3'
    assert float_to_fraction(1.2) == '1.2'
    assert float_to_fraction(None) == '0'
