"""
Admin Routes

JSON endpoints for managing recipes and reference records. Every write
takes the admin secret, either as 'admin_secret' in the JSON body or in the
X-Admin-Secret header.
"""

from flask import Blueprint, jsonify, request

from services import (
    add_recipe, update_recipe, remove_recipe, update_ingredient, get_recipe,
    list_ingredients, list_unused, remove_entity, remove_all_unused,
)
from services.auth import require_admin

from .payload import json_object_body

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


def _admin_secret(payload):
    secret = payload.get('admin_secret')
    if secret is None:
        secret = request.headers.get('X-Admin-Secret')
    return secret


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    require_admin(_admin_secret(json_object_body()))
    return jsonify({'ok': True})


# ============================================
# ROUTES - RECIPES
# ============================================

@admin_bp.route('/recipes', methods=['POST'])
def recipe_add():
    payload = json_object_body()
    recipe_id = add_recipe(
        payload.get('title'),
        payload.get('ingredient_lines'),
        payload.get('instructions', ''),
        _admin_secret(payload),
    )
    return jsonify({'id': recipe_id}), 201


@admin_bp.route('/recipes/<int:recipe_id>', methods=['PATCH'])
def recipe_edit(recipe_id):
    payload = json_object_body()
    update_recipe(
        recipe_id,
        _admin_secret(payload),
        title=payload.get('title'),
        ingredient_lines=payload.get('ingredient_lines'),
        instructions=payload.get('instructions'),
    )
    return jsonify(get_recipe(recipe_id))


@admin_bp.route('/recipes/<int:recipe_id>', methods=['DELETE'])
def recipe_delete(recipe_id):
    remove_recipe(recipe_id, _admin_secret(json_object_body()))
    return '', 204


# ============================================
# ROUTES - REFERENCE RECORDS
# ============================================

@admin_bp.route('/ingredients')
def ingredients_list():
    return jsonify(list_ingredients())


@admin_bp.route('/ingredients/<int:ingredient_id>', methods=['PATCH'])
def ingredient_edit(ingredient_id):
    payload = json_object_body()
    ingredient = update_ingredient(ingredient_id, payload.get('protein_per_100g'), _admin_secret(payload))
    return jsonify(ingredient)


@admin_bp.route('/<kind>/unused')
def unused_list(kind):
    return jsonify([entity.to_dict() for entity in list_unused(kind)])


@admin_bp.route('/<kind>/unused', methods=['DELETE'])
def unused_cleanup(kind):
    return jsonify(remove_all_unused(kind, _admin_secret(json_object_body())))


@admin_bp.route('/<kind>/<int:entity_id>', methods=['DELETE'])
def entity_delete(kind, entity_id):
    remove_entity(kind, entity_id, _admin_secret(json_object_body()))
    return '', 204
