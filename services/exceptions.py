"""
Service Exceptions

Errors raised by the grocery services. Parsing and categorization never
raise; these cover lookups and client input on the persisted side.
"""


class GroceryError(Exception):
    """Base class for grocery service errors."""
    status_code = 400


class ValidationError(GroceryError):
    """Raised when client-supplied fields are missing or invalid."""
    status_code = 400


class ItemNotFound(GroceryError):
    """Raised when a grocery item does not exist for the user."""
    status_code = 404


class RecipeNotFound(GroceryError):
    """Raised when a saved recipe does not exist for the user."""
    status_code = 404


class DuplicateItemError(GroceryError):
    """Raised when a change would create a second unchecked row for a name."""
    status_code = 409
