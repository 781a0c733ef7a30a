"""
Services Package

Business logic for the grocery list: ingredient parsing, categorization
and the recipe import merge policy.
"""

from .parsing import (
    ParsedIngredient,
    float_to_fraction,
    normalize_unit,
    parse_fraction,
    parse_ingredient,
)

from .categories import (
    categorize_ingredient,
    group_by_category,
    is_valid_category,
)

from .exceptions import (
    GroceryError,
    ValidationError,
    ItemNotFound,
    RecipeNotFound,
    DuplicateItemError,
)

from .users import ensure_user, validate_user_id

from .recipes import (
    save_recipe,
    list_saved_recipes,
    get_saved_recipe,
)

from .grocery import (
    ImportResult,
    import_from_recipe,
    import_saved_recipe,
    list_items,
    get_item,
    add_item,
    add_item_from_text,
    update_item,
    delete_item,
    clear_checked,
)

__all__ = [
    # Parsing
    'ParsedIngredient',
    'float_to_fraction',
    'normalize_unit',
    'parse_fraction',
    'parse_ingredient',
    # Categories
    'categorize_ingredient',
    'group_by_category',
    'is_valid_category',
    # Errors
    'GroceryError',
    'ValidationError',
    'ItemNotFound',
    'RecipeNotFound',
    'DuplicateItemError',
    # Users
    'ensure_user',
    'validate_user_id',
    # Recipes
    'save_recipe',
    'list_saved_recipes',
    'get_saved_recipe',
    # Grocery
    'ImportResult',
    'import_from_recipe',
    'import_saved_recipe',
    'list_items',
    'get_item',
    'add_item',
    'add_item_from_text',
    'update_item',
    'delete_item',
    'clear_checked',
]
