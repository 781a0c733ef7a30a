"""
FUEL grocery API

Flask application serving a user's grocery list and the recipe import
that merges saved recipe ingredients into it.
"""

import logging

from flask import Blueprint, Flask, current_app, g, jsonify, request
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db
from services import (
    GroceryError,
    ValidationError,
    add_item,
    add_item_from_text,
    categorize_ingredient,
    clear_checked,
    delete_item,
    float_to_fraction,
    group_by_category,
    import_saved_recipe,
    list_items,
    list_saved_recipes,
    parse_ingredient,
    save_recipe,
    update_item,
    validate_user_id,
)
from utils import sanitize_ingredient_text

migrate = Migrate()

api = Blueprint('api', __name__, url_prefix='/api')


def item_to_dict(item):
    """Serialize a GroceryItem for the JSON API."""
    return {
        'id': item.id,
        'name': item.name,
        'quantity': item.quantity,
        'quantityDisplay': float_to_fraction(item.quantity) if item.quantity else None,
        'unit': item.unit,
        'category': item.category,
        'checked': item.checked,
        'recipeId': item.recipe_id,
        'recipeTitle': item.recipe_title,
        'createdAt': item.created_at.isoformat() if item.created_at else None,
    }


def recipe_to_dict(recipe):
    return {
        'id': recipe.id,
        'title': recipe.title,
        'ingredients': recipe.ingredient_list,
        'sourceUrl': recipe.source_url or None,
        'servings': recipe.servings,
        'isAiGenerated': recipe.is_ai_generated,
        'createdAt': recipe.created_at.isoformat() if recipe.created_at else None,
    }


def get_json_body():
    """Return the request JSON object or raise ValidationError."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('JSON object body required')
    return body


@api.before_request
def resolve_user():
    """Every route acts for exactly one user, passed explicitly to the services."""
    user_id = request.headers.get('X-User-Id') or current_app.config['DEFAULT_USER_ID']
    g.user_id = validate_user_id(user_id)


# ---------------------------------------------------------------------------
# Grocery list
# ---------------------------------------------------------------------------

@api.route('/grocery', methods=['GET'])
def grocery_list():
    items = list_items(g.user_id)
    if request.args.get('grouped') in ('1', 'true'):
        grouped = group_by_category(items)
        return jsonify([
            {'category': category, 'items': [item_to_dict(i) for i in rows]}
            for category, rows in grouped.items()
        ])
    return jsonify([item_to_dict(item) for item in items])


@api.route('/grocery', methods=['POST'])
def grocery_add():
    body = get_json_body()
    if body.get('text'):
        item, created = add_item_from_text(g.user_id, body['text'], category=body.get('category'))
    else:
        item, created = add_item(
            g.user_id,
            body.get('name'),
            quantity=body.get('quantity'),
            unit=body.get('unit'),
            category=body.get('category'),
        )
    return jsonify(item_to_dict(item)), 201 if created else 200


@api.route('/grocery/<int:item_id>', methods=['PATCH'])
def grocery_update(item_id):
    body = get_json_body()
    item = update_item(g.user_id, item_id, body)
    return jsonify(item_to_dict(item))


@api.route('/grocery/<int:item_id>', methods=['DELETE'])
def grocery_delete(item_id):
    delete_item(g.user_id, item_id)
    return jsonify({'success': True})


@api.route('/grocery/clear-checked', methods=['POST'])
def grocery_clear_checked():
    removed = clear_checked(g.user_id)
    return jsonify({'success': True, 'removed': removed})


@api.route('/grocery/from-recipe', methods=['POST'])
def grocery_from_recipe():
    """Merge a saved recipe's ingredients into the grocery list."""
    body = get_json_body()
    recipe_id = body.get('recipeId')
    if recipe_id is None or recipe_id == '':
        raise ValidationError('recipeId required')

    result = import_saved_recipe(g.user_id, recipe_id)
    current_app.logger.info("Recipe %s imported for %s: %d added, %d merged",
                            recipe_id, g.user_id, result.added, result.merged)
    return jsonify({
        'added': result.added,
        'merged': result.merged,
        'failed': [{'name': name, 'reason': reason} for name, reason in result.failed],
    })


@api.route('/grocery/parse', methods=['POST'])
def grocery_parse():
    """Preview how a free-text line would be stored."""
    body = get_json_body()
    text = sanitize_ingredient_text(body.get('text'))
    if not text:
        raise ValidationError('Text required')
    parsed = parse_ingredient(text)
    return jsonify({
        'quantity': parsed.quantity,
        'unit': parsed.unit,
        'name': parsed.name,
        'category': categorize_ingredient(parsed.name),
    })


# ---------------------------------------------------------------------------
# Saved recipes
# ---------------------------------------------------------------------------

@api.route('/recipes/saved', methods=['GET'])
def recipes_saved():
    return jsonify([recipe_to_dict(r) for r in list_saved_recipes(g.user_id)])


@api.route('/recipes/saved', methods=['POST'])
def recipes_save():
    body = get_json_body()
    if not body.get('title'):
        raise ValidationError('Title required')
    ingredients = body.get('ingredients') or []
    if isinstance(ingredients, list) and len(ingredients) > current_app.config['MAX_IMPORT_INGREDIENTS']:
        raise ValidationError('Too many ingredients')
    recipe = save_recipe(
        g.user_id,
        body['title'],
        ingredients=ingredients,
        source_url=body.get('sourceUrl'),
        servings=body.get('servings'),
        is_ai_generated=body.get('isAiGenerated', False),
    )
    return jsonify(recipe_to_dict(recipe)), 201


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------

def handle_grocery_error(e):
    return jsonify({'error': str(e)}), e.status_code


def handle_database_error(e):
    db.session.rollback()
    current_app.logger.exception("Database error on %s %s", request.method, request.path)
    return jsonify({'error': 'Database error'}), 500


def handle_http_error(e):
    return jsonify({'error': e.description}), e.code


def _enable_sqlite_savepoints(engine):
    """Let SQLite honour SAVEPOINT by taking over BEGIN from pysqlite."""

    @event.listens_for(engine, 'connect')
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, 'begin')
    def do_begin(conn):
        conn.exec_driver_sql('BEGIN')


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)
    for name in ('services', 'models'):
        logging.getLogger(name).setLevel(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def create_app(config_name=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(api)
    app.register_error_handler(GroceryError, handle_grocery_error)
    app.register_error_handler(SQLAlchemyError, handle_database_error)
    app.register_error_handler(HTTPException, handle_http_error)

    with app.app_context():
        if db.engine.dialect.name == 'sqlite':
            _enable_sqlite_savepoints(db.engine)
        db.create_all()

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    app.logger.debug("Application created with %s", config_class.__name__)
    return app
