"""
User Model

Owner of saved recipes and grocery items. Users are created on demand
the first time an id is seen.
"""

from datetime import datetime, timezone

from .base import db


def utcnow():
    return datetime.now(timezone.utc)


class User(db.Model):
    """Application user keyed by an external id string."""
    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(100), default='')
    email = db.Column(db.String(200), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    grocery_items = db.relationship('GroceryItem', backref='user', lazy=True, cascade='all, delete-orphan')
    saved_recipes = db.relationship('SavedRecipe', backref='user', lazy=True, cascade='all, delete-orphan')
