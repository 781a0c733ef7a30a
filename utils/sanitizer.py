"""
Input Sanitization Module

Cleans client-supplied grocery and recipe fields before they are stored.
"""

import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
_WHITESPACE = re.compile(r'\s+')


def _clean(text):
    """Stringify, drop control characters and collapse whitespace."""
    if not isinstance(text, str):
        text = str(text)
    # Tabs and newlines become spaces before control characters are dropped
    text = _WHITESPACE.sub(' ', text)
    text = _CONTROL_CHARS.sub('', text)
    return text.strip()


def sanitize_item_name(name, max_length=MAX_LENGTHS['item_name']):
    """
    Sanitize a grocery item or ingredient name.

    Names are merge keys, so they are not HTML-escaped here; escaping
    'half & half' would make it a different key from the same text
    arriving through another path.

    Returns:
        Cleaned name, '' when nothing usable remains
    """
    if name is None:
        return ''
    return _clean(name)[:max_length].strip()


def sanitize_unit(unit, max_length=MAX_LENGTHS['unit']):
    """Sanitize a unit string. Returns None when empty."""
    if unit is None:
        return None
    unit = _clean(unit)[:max_length].strip()
    return unit or None


def sanitize_ingredient_text(text, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize a free-text ingredient line before it is parsed.

    Args:
        text: Single ingredient line
        max_length: Maximum length (default 500)

    Returns:
        Sanitized ingredient text
    """
    if not text:
        return ''
    return _clean(text)[:max_length].strip()


def sanitize_recipe_title(title, max_length=MAX_LENGTHS['recipe_title']):
    """
    Sanitize a recipe title for storage.

    Titles are stored as plain text; escaping is left to whatever renders
    them, since the API only returns JSON.

    Args:
        title: The recipe title to sanitize
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized title, 'Untitled Recipe' when empty
    """
    if not title:
        return 'Untitled Recipe'

    title = _clean(title)

    if len(title) > max_length:
        title = title[:max_length-3] + '...'

    return title or 'Untitled Recipe'


def sanitize_url(url, max_length=MAX_LENGTHS['source_url']):
    """
    Sanitize a URL by rejecting anything that is not plain http(s).

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()
    if len(url) > max_length:
        return ''

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        return ''

    return url
