"""
Public Routes

Read endpoints for browsing recipes, plus the pairing bookmarks that any
visitor may create and delete.
"""

from flask import Blueprint, jsonify, request

from services import (
    list_recipes, get_recipe_view, list_unique_names,
    filter_recipes_by_ingredients, match_suggestions,
    save_pairing, delete_pairing, list_pairings,
)

from .payload import json_object_body

public_bp = Blueprint('public', __name__, url_prefix='/api')


# ============================================
# ROUTES - RECIPES
# ============================================

@public_bp.route('/recipes')
def recipes_list():
    """
    All recipes, joined. Filter with repeated ?ingredient=<name> and narrow
    an ingredient to forms with ?form:<name>=<form>.
    """
    selected = request.args.getlist('ingredient')
    forms_by_name = {}
    for name in selected:
        forms = request.args.getlist(f'form:{name}')
        if forms:
            forms_by_name[name] = forms
    return jsonify(filter_recipes_by_ingredients(list_recipes(), selected, forms_by_name))


@public_bp.route('/recipes/<int:recipe_id>')
def recipe_view(recipe_id):
    view = get_recipe_view(
        recipe_id,
        servings=request.args.get('servings', 1, type=int),
        custom_line=request.args.get('custom_line', type=int),
        custom_amount=request.args.get('custom_amount', type=float),
    )
    return jsonify(view)


@public_bp.route('/<kind>/names')
def names_list(kind):
    names = list_unique_names(kind)
    if 'q' in request.args:
        names = match_suggestions(names, request.args['q'])
    return jsonify(names)


# ============================================
# ROUTES - PAIRINGS
# ============================================

@public_bp.route('/pairings')
def pairings_list():
    return jsonify(list_pairings())


@public_bp.route('/pairings', methods=['POST'])
def pairing_add():
    payload = json_object_body()
    pairing_id = save_pairing(payload.get('recipe_ids'), name=payload.get('name'))
    return jsonify({'id': pairing_id}), 201


@public_bp.route('/pairings/<int:pairing_id>', methods=['DELETE'])
def pairing_delete(pairing_id):
    delete_pairing(pairing_id)
    return '', 204
