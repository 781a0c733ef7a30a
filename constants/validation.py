"""
Validation Constants

Contains whitelist values for validating user input to prevent
injection attacks and ensure data integrity.
"""

# Fields a client may change on a grocery item
UPDATABLE_ITEM_FIELDS = {'name', 'quantity', 'unit', 'category', 'checked'}

# Maximum field lengths for security
MAX_LENGTHS = {
    'item_name': 200,
    'unit': 50,
    'recipe_title': 200,
    'ingredient_text': 500,
    'source_url': 500,
    'user_id': 64,
}

# Upper bound for any stored quantity, including merged totals
MAX_QUANTITY = 100000

# Largest id an Integer column holds (signed 64-bit)
MAX_RECORD_ID = 2 ** 63 - 1
