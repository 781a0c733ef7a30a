"""
Smoke tests for the grocery app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app factory can be imported without errors."""
    from app import create_app
    from models import db
    assert callable(create_app)
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import User, SavedRecipe, GroceryItem
    assert User is not None
    assert SavedRecipe is not None
    assert GroceryItem is not None
    print("OK: Models import successfully")

def test_sanitizer_import():
    """Verify sanitizer utilities can be imported."""
    from utils import sanitize_item_name, sanitize_unit, sanitize_recipe_title
    assert callable(sanitize_item_name)
    assert callable(sanitize_unit)
    assert callable(sanitize_recipe_title)
    print("OK: Sanitizer utils import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import GROCERY_CATEGORIES, CATEGORY_KEYWORDS, UNIT_PATTERNS, UNICODE_FRACTIONS
    assert GROCERY_CATEGORIES[-1] == 'Other'
    assert 'Other' not in CATEGORY_KEYWORDS
    assert list(CATEGORY_KEYWORDS) == list(GROCERY_CATEGORIES[:-1])
    assert 'cups?' in UNIT_PATTERNS
    assert '½' in UNICODE_FRACTIONS
    print("OK: Constants import successfully")

def test_fraction_constants_unchanged():
    """Verify fraction glyph values have expected values."""
    from constants import UNICODE_FRACTIONS

    # These values must not change
    assert UNICODE_FRACTIONS['¼'] == 0.25
    assert UNICODE_FRACTIONS['½'] == 0.5
    assert UNICODE_FRACTIONS['¾'] == 0.75
    assert UNICODE_FRACTIONS['⅛'] == 0.125
    assert len(UNICODE_FRACTIONS) == 9
    print("OK: Fraction constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import create_app
    app = create_app('testing')
    with app.test_client() as client:
        response = client.get('/health')
        assert response.status_code == 200
        response = client.get('/api/grocery')
        assert response.status_code == 200
        print("OK: App serves grocery list")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_sanitizer_import,
        test_constants_import,
        test_fraction_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
