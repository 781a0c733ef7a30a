"""
Grocery List Service

Functions for managing a user's grocery list and for merging recipe
ingredients into it.

Merge rule: an ingredient whose name matches one of the user's unchecked
items is folded into that row. Quantities are added only when the units
are equal (None equals None) and the ingredient supplies a quantity;
otherwise the existing row is left as it is. There is no cross-unit
conversion, so '1 tbsp butter' never adds into '1 cup butter'. Checked
rows are never matched, so a new recipe always puts a bought-before item
back on the list.
"""

import logging
import math
from collections import namedtuple
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from constants import MAX_QUANTITY, UPDATABLE_ITEM_FIELDS
from models import db, GroceryItem
from utils import sanitize_item_name, sanitize_unit, sanitize_ingredient_text
from .categories import categorize_ingredient, is_valid_category
from .exceptions import DuplicateItemError, ItemNotFound, ValidationError
from .parsing import normalize_unit, parse_fraction, parse_ingredient
from .recipes import get_saved_recipe
from .session import commit_or_rollback
from .users import ensure_user

logger = logging.getLogger(__name__)

ImportResult = namedtuple('ImportResult', ['added', 'merged', 'failed'])

ADDED = 'added'
MERGED = 'merged'


def normalize_item_name(name):
    """Merge key for an item name: sanitized, lowercased, trimmed."""
    return sanitize_item_name(name).lower()


def _positive_quantity(value):
    """Return value as a positive finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = parse_fraction(value)
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _validate_quantity(value):
    """Client-supplied quantity: None, or a positive number within bounds."""
    if value is None:
        return None
    quantity = _positive_quantity(value)
    if quantity is None:
        raise ValidationError('Quantity must be a positive number')
    if quantity > MAX_QUANTITY:
        raise ValidationError(f'Quantity must be at most {MAX_QUANTITY}')
    return quantity


def _ingredient_fields(record):
    """
    Reduce an ingredient record to (name, quantity, unit).

    Records are mappings with 'name' and optional 'amount'/'unit', as
    produced by recipe search or generation. A raw ingredient line (or a
    mapping with only 'original') is run through the line parser instead.
    """
    if isinstance(record, str):
        record = {'original': record}
    if not isinstance(record, Mapping):
        return '', None, None

    if not record.get('name') and record.get('original'):
        parsed = parse_ingredient(sanitize_ingredient_text(record['original']))
        return normalize_item_name(parsed.name), _positive_quantity(parsed.quantity), parsed.unit

    name = normalize_item_name(record.get('name') or '')
    quantity = _positive_quantity(record.get('amount'))
    unit = normalize_unit(sanitize_unit(record.get('unit')))
    return name, quantity, unit


def _describe(record):
    if isinstance(record, Mapping):
        return str(record.get('name') or record.get('original') or '')
    return str(record)


def find_unchecked_item(user_id, name):
    return GroceryItem.query.filter_by(user_id=user_id, name=name, checked=False).first()


def merge_quantity(item, quantity, unit):
    """
    Add quantity into item when the units agree.

    Returns True when the stored quantity changed. Raises ValidationError
    when the sum would exceed MAX_QUANTITY; item is left unchanged then.
    """
    if quantity is None or normalize_unit(item.unit) != unit:
        return False
    total = (item.quantity or 0) + quantity
    if total > MAX_QUANTITY:
        raise ValidationError(f"Merged quantity for '{item.name}' would exceed {MAX_QUANTITY}")
    item.quantity = total
    return True


def _import_one(user_id, name, quantity, unit, recipe_id, recipe_title):
    existing = find_unchecked_item(user_id, name)
    if existing is not None:
        if merge_quantity(existing, quantity, unit):
            logger.debug("Merged %s %s into '%s' (item %s)", quantity, unit, name, existing.id)
        return MERGED

    db.session.add(GroceryItem(
        user_id=user_id,
        name=name,
        quantity=quantity,
        unit=unit,
        category=categorize_ingredient(name),
        checked=False,
        recipe_id=recipe_id,
        recipe_title=recipe_title,
    ))
    return ADDED


def _import_in_savepoint(user_id, name, quantity, unit, recipe_id, recipe_title):
    try:
        with db.session.begin_nested():
            return _import_one(user_id, name, quantity, unit, recipe_id, recipe_title)
    except IntegrityError:
        # Another import inserted the same unchecked row first; merge into it
        logger.info("Unchecked '%s' appeared concurrently for user %s, retrying as merge", name, user_id)
        with db.session.begin_nested():
            return _import_one(user_id, name, quantity, unit, recipe_id, recipe_title)


def import_from_recipe(user_id, recipe_id, ingredients, recipe_title=None):
    """
    Merge a recipe's ingredients into the user's grocery list.

    Each ingredient is applied in its own savepoint, so a database error
    on one ingredient is recorded in ``failed`` and the rest of the batch
    still goes through.

    Args:
        user_id: Owner of the grocery list
        recipe_id: Source recipe id, stored as provenance on new rows
        ingredients: Ingredient records or raw ingredient lines
        recipe_title: Source recipe title, stored as provenance on new rows

    Returns:
        ImportResult(added, merged, failed) where failed is a list of
        (ingredient, reason) tuples
    """
    ensure_user(user_id)
    recipe_id = str(recipe_id) if recipe_id is not None else None

    added = 0
    merged = 0
    failed = []

    for record in ingredients or []:
        name, quantity, unit = _ingredient_fields(record)
        if not name:
            failed.append((_describe(record), 'missing ingredient name'))
            continue

        try:
            outcome = _import_in_savepoint(user_id, name, quantity, unit, recipe_id, recipe_title)
        except ValidationError as e:
            logger.warning("Skipped '%s' for user %s: %s", name, user_id, e)
            failed.append((name, str(e)))
            continue
        except SQLAlchemyError as e:
            logger.exception("Failed to import '%s' for user %s", name, user_id)
            failed.append((name, e.__class__.__name__))
            continue

        if outcome == ADDED:
            added += 1
        else:
            merged += 1

    commit_or_rollback()
    logger.info("Imported recipe %s for user %s: %d added, %d merged, %d failed",
                recipe_id, user_id, added, merged, len(failed))
    return ImportResult(added, merged, failed)


def import_saved_recipe(user_id, recipe_id):
    """Import the ingredients of one of the user's saved recipes."""
    recipe = get_saved_recipe(user_id, recipe_id)
    return import_from_recipe(user_id, recipe.id, recipe.ingredient_list, recipe_title=recipe.title)


def list_items(user_id):
    return (GroceryItem.query
            .filter_by(user_id=user_id)
            .order_by(GroceryItem.category, GroceryItem.created_at, GroceryItem.id)
            .all())


def get_item(user_id, item_id):
    """Return the user's item or raise ItemNotFound."""
    item = GroceryItem.query.filter_by(id=item_id, user_id=user_id).first()
    if item is None:
        raise ItemNotFound(f'Item {item_id} not found')
    return item


def add_item(user_id, name, quantity=None, unit=None, category=None):
    """
    Add an item entered directly by the user.

    When an unchecked item with the same name exists, the new entry is
    merged into it with the same rule as recipe imports.

    Returns:
        (item, created) tuple
    """
    key = normalize_item_name(name)
    if not key:
        raise ValidationError('Name required')
    quantity = _validate_quantity(quantity)
    unit = normalize_unit(sanitize_unit(unit))
    if category is not None and not is_valid_category(category):
        raise ValidationError(f'Invalid category: {category}')

    ensure_user(user_id)

    existing = find_unchecked_item(user_id, key)
    if existing is None:
        item = GroceryItem(
            user_id=user_id,
            name=key,
            quantity=quantity,
            unit=unit,
            category=category or categorize_ingredient(key),
            checked=False,
        )
        db.session.add(item)
        try:
            db.session.commit()
            return item, True
        except IntegrityError:
            db.session.rollback()
            existing = find_unchecked_item(user_id, key)
            if existing is None:
                raise

    merge_quantity(existing, quantity, unit)
    commit_or_rollback()
    return existing, False


def add_item_from_text(user_id, text, category=None):
    """Parse a free-text line like '2 cups milk' and add it."""
    parsed = parse_ingredient(sanitize_ingredient_text(text))
    if not parsed.name:
        raise ValidationError('Text required')
    quantity = parsed.quantity if parsed.quantity else None
    return add_item(user_id, parsed.name, quantity=quantity, unit=parsed.unit, category=category)


def update_item(user_id, item_id, changes):
    """
    Apply client changes to an item.

    Unchecking an item while another unchecked row with the same name
    exists folds this row into that one. Renaming onto such a name raises
    DuplicateItemError.

    Returns:
        The item that now represents the entry
    """
    unknown = set(changes) - UPDATABLE_ITEM_FIELDS
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

    values = {}
    if 'name' in changes:
        values['name'] = normalize_item_name(changes['name'] or '')
        if not values['name']:
            raise ValidationError('Name required')
    if 'quantity' in changes:
        values['quantity'] = _validate_quantity(changes['quantity'])
    if 'unit' in changes:
        values['unit'] = normalize_unit(sanitize_unit(changes['unit']))
    if 'category' in changes:
        if not is_valid_category(changes['category']):
            raise ValidationError(f"Invalid category: {changes['category']}")
        values['category'] = changes['category']
    if 'checked' in changes:
        if not isinstance(changes['checked'], bool):
            raise ValidationError('Checked must be true or false')
        values['checked'] = changes['checked']

    item = get_item(user_id, item_id)
    was_checked = item.checked
    for field, value in values.items():
        setattr(item, field, value)

    if not item.checked:
        with db.session.no_autoflush:
            sibling = (GroceryItem.query
                       .filter(GroceryItem.user_id == user_id,
                               GroceryItem.name == item.name,
                               GroceryItem.checked.is_(False),
                               GroceryItem.id != item.id)
                       .first())
        if sibling is not None:
            if was_checked:
                try:
                    merge_quantity(sibling, item.quantity, normalize_unit(item.unit))
                except ValidationError:
                    db.session.rollback()
                    raise
                db.session.delete(item)
                commit_or_rollback()
                logger.info("Folded unchecked item %s into %s", item_id, sibling.id)
                return sibling
            name = item.name
            db.session.rollback()
            raise DuplicateItemError(f"'{name}' is already on the list")

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateItemError('Another unchecked item has the same name')
    return item


def delete_item(user_id, item_id):
    item = get_item(user_id, item_id)
    db.session.delete(item)
    commit_or_rollback()


def clear_checked(user_id):
    """Delete all checked items. Returns the number removed."""
    count = GroceryItem.query.filter_by(user_id=user_id, checked=True).delete()
    commit_or_rollback()
    logger.info("Cleared %d checked items for user %s", count, user_id)
    return count
