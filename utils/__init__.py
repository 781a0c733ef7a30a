# Utility modules for the FUEL grocery app
from .sanitizer import (
    sanitize_item_name, sanitize_unit, sanitize_ingredient_text,
    sanitize_recipe_title, sanitize_url
)
