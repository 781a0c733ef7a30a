"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .user import User
from .recipe import SavedRecipe
from .grocery import GroceryItem

__all__ = [
    'db',
    'User',
    'SavedRecipe',
    'GroceryItem',
]
