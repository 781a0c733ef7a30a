"""
Tests for input sanitization.
"""

from utils import (
    sanitize_item_name, sanitize_unit, sanitize_ingredient_text,
    sanitize_recipe_title, sanitize_url
)


def test_item_name_strips_control_characters_and_collapses_space():
    assert sanitize_item_name('  red\x00 \t onion\n ') == 'red onion'


def test_item_name_is_not_html_escaped():
    assert sanitize_item_name('half & half') == 'half & half'


def test_item_name_truncated():
    assert len(sanitize_item_name('a' * 500)) == 200


def test_item_name_none():
    assert sanitize_item_name(None) == ''


def test_unit():
    assert sanitize_unit(' cups ') == 'cups'
    assert sanitize_unit('') is None
    assert sanitize_unit(None) is None


def test_ingredient_text():
    assert sanitize_ingredient_text(' 2 cups\tflour ') == '2 cups flour'
    assert sanitize_ingredient_text(None) == ''


def test_recipe_title_is_stored_as_plain_text():
    assert sanitize_recipe_title('Mac & Cheese') == 'Mac & Cheese'
    assert sanitize_recipe_title(' <b>Stew</b>\n') == '<b>Stew</b>'


def test_recipe_title_truncated_on_raw_text():
    title = sanitize_recipe_title('&' * 300)
    assert len(title) == 200
    assert title == '&' * 197 + '...'


def test_recipe_title_default():
    assert sanitize_recipe_title('') == 'Untitled Recipe'


def test_url():
    assert sanitize_url('https://example.com/recipe') == 'https://example.com/recipe'
    assert sanitize_url('javascript:alert(1)') == ''
    assert sanitize_url('ftp://example.com') == ''
    assert sanitize_url(None) == ''
