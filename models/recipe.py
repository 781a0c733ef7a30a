"""
Recipe Model

Contains the SavedRecipe model, the source of ingredient lists for
grocery imports.
"""

import json
import logging

from .base import db
from .user import utcnow

logger = logging.getLogger(__name__)


class SavedRecipe(db.Model):
    """Recipe saved by a user. Ingredients are stored as a JSON list of
    {name, amount, unit, original} records."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    ingredients = db.Column(db.Text, default='[]')
    source_url = db.Column(db.String(500), default='')
    servings = db.Column(db.Integer, nullable=True)
    is_ai_generated = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    @property
    def ingredient_list(self):
        """Decoded ingredient records; [] when the stored JSON is unusable."""
        try:
            records = json.loads(self.ingredients or '[]')
        except (json.JSONDecodeError, TypeError):
            logger.warning("Recipe %s has malformed ingredient JSON", self.id)
            return []
        return records if isinstance(records, list) else []

    @ingredient_list.setter
    def ingredient_list(self, records):
        self.ingredients = json.dumps(list(records or []))
