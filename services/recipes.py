"""
Saved Recipe Service

Stores recipes a user saved so their ingredients can be imported into
the grocery list later.
"""

import logging
from collections.abc import Mapping

from constants import MAX_RECORD_ID
from models import db, SavedRecipe
from utils import sanitize_recipe_title, sanitize_url
from .exceptions import RecipeNotFound, ValidationError
from .users import ensure_user
from .session import commit_or_rollback

logger = logging.getLogger(__name__)


def _clean_ingredients(ingredients):
    if ingredients is None:
        return []
    if not isinstance(ingredients, (list, tuple)):
        raise ValidationError('Ingredients must be a list')
    records = []
    for record in ingredients:
        if isinstance(record, str):
            records.append({'original': record})
        elif isinstance(record, Mapping):
            records.append({key: record.get(key) for key in ('name', 'amount', 'unit', 'original')
                            if record.get(key) is not None})
        else:
            raise ValidationError('Each ingredient must be an object or a string')
    return records


def save_recipe(user_id, title, ingredients=None, source_url=None, servings=None, is_ai_generated=False):
    """Persist a recipe for user_id and return it."""
    ensure_user(user_id)
    if servings is not None and (isinstance(servings, bool) or not isinstance(servings, int) or servings <= 0):
        raise ValidationError('Servings must be a positive integer')

    recipe = SavedRecipe(
        user_id=user_id,
        title=sanitize_recipe_title(title),
        source_url=sanitize_url(source_url),
        servings=servings,
        is_ai_generated=bool(is_ai_generated),
    )
    recipe.ingredient_list = _clean_ingredients(ingredients)
    db.session.add(recipe)
    commit_or_rollback()
    logger.info("Saved recipe %s for user %s", recipe.id, user_id)
    return recipe


def list_saved_recipes(user_id):
    return (SavedRecipe.query
            .filter_by(user_id=user_id)
            .order_by(SavedRecipe.created_at.desc(), SavedRecipe.id.desc())
            .all())


def _recipe_key(recipe_id):
    """Primary key for recipe_id, or None when it cannot name a stored row."""
    if isinstance(recipe_id, bool):
        return None
    try:
        key = int(str(recipe_id).strip())
    except ValueError:
        return None
    if not 0 < key <= MAX_RECORD_ID:
        return None
    return key


def get_saved_recipe(user_id, recipe_id):
    """Return the user's recipe or raise RecipeNotFound."""
    recipe = None
    key = _recipe_key(recipe_id)
    if key is not None:
        recipe = SavedRecipe.query.filter_by(id=key, user_id=user_id).first()
    if recipe is None:
        raise RecipeNotFound(f'Recipe {recipe_id} not found')
    return recipe
