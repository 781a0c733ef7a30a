"""
Grocery Models

Contains the GroceryItem model for a user's grocery list.
"""

from .base import db
from .user import utcnow


class GroceryItem(db.Model):
    """
    Grocery list row owned by a user.

    name is stored lowercased and trimmed and is the key for merging
    recipe imports. At most one unchecked row per (user, name) is allowed;
    checked rows are history and may repeat.
    """
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(50), nullable=True)
    category = db.Column(db.String(50), default='Other', nullable=False, index=True)
    checked = db.Column(db.Boolean, default=False, nullable=False)
    # Provenance for rows created by a recipe import
    recipe_id = db.Column(db.String(64), nullable=True)
    recipe_title = db.Column(db.String(200), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        db.Index(
            'uq_grocery_item_unchecked_name', 'user_id', 'name',
            unique=True,
            sqlite_where=db.text('checked = 0'),
            postgresql_where=db.text('NOT checked'),
        ),
    )
