"""
Recipe Service

Create, update and delete recipes through the normalization layer, and
read them back joined with their reference names.
"""

import logging

from constants import MAX_LENGTHS
from models import db, Recipe, Ingredient, Unit, IngredientForm
from utils.sanitizer import sanitize_text, sanitize_instructions

from .auth import require_admin
from .errors import ValidationError, NotFoundError
from .normalization import build_ingredient_lines, entity_model
from .parsing import parse_amount
from .scaling import ServingScale, build_recipe_view

logger = logging.getLogger(__name__)


def _clean_title(title):
    title = sanitize_text(title)
    if not title:
        raise ValidationError('title required')
    if len(title) > MAX_LENGTHS['recipe_title']:
        raise ValidationError(f"title too long (max {MAX_LENGTHS['recipe_title']} characters)")
    return title


def _clean_instructions(instructions):
    instructions = sanitize_instructions(instructions)
    if len(instructions) > MAX_LENGTHS['instructions']:
        raise ValidationError(f"instructions too long (max {MAX_LENGTHS['instructions']} characters)")
    return instructions


def _build_lines(raw_lines):
    lines = build_ingredient_lines(raw_lines)
    if not lines:
        raise ValidationError('at least one ingredient required')
    return lines


def _get_recipe_or_404(recipe_id):
    recipe = db.session.get(Recipe, recipe_id)
    if recipe is None:
        raise NotFoundError(f'recipe {recipe_id} not found')
    return recipe


# ============================================
# MUTATIONS
# ============================================

def add_recipe(title, ingredient_lines, instructions, admin_secret):
    """Create a recipe from raw ingredient rows and return its id."""
    require_admin(admin_secret)

    title = _clean_title(title)
    instructions = _clean_instructions(instructions)
    lines = _build_lines(ingredient_lines)

    recipe = Recipe(title=title, instructions=instructions, ingredient_lines=lines)
    db.session.add(recipe)
    db.session.commit()
    logger.info("Created recipe %r (id=%s, %d lines)", title, recipe.id, len(lines))
    return recipe.id


def update_recipe(recipe_id, admin_secret, title=None, ingredient_lines=None, instructions=None):
    """
    Patch a recipe. Fields left as None keep their stored value; a supplied
    ingredient list replaces the stored one and must not come out empty.
    """
    require_admin(admin_secret)
    recipe = _get_recipe_or_404(recipe_id)

    updates = {}
    if title is not None:
        updates['title'] = _clean_title(title)
    if instructions is not None:
        updates['instructions'] = _clean_instructions(instructions)
    if ingredient_lines is not None:
        updates['ingredient_lines'] = _build_lines(ingredient_lines)

    if not updates:
        return

    for field, value in updates.items():
        setattr(recipe, field, value)
    db.session.commit()
    logger.info("Updated recipe %s (%s)", recipe_id, ', '.join(sorted(updates)))


def remove_recipe(recipe_id, admin_secret):
    """Delete a recipe. Pairings that mention it are left untouched."""
    require_admin(admin_secret)
    recipe = _get_recipe_or_404(recipe_id)
    title = recipe.title
    db.session.delete(recipe)
    db.session.commit()
    logger.info("Deleted recipe %r (id=%s)", title, recipe_id)


def update_ingredient(ingredient_id, protein_per_100g, admin_secret):
    """Set or clear an ingredient's protein per 100g."""
    require_admin(admin_secret)
    ingredient = db.session.get(Ingredient, ingredient_id)
    if ingredient is None:
        raise NotFoundError(f'ingredient {ingredient_id} not found')

    message = 'protein per 100g must be a non-negative number'
    try:
        protein = parse_amount(protein_per_100g)
    except ValueError:
        raise ValidationError(message) from None
    if protein is not None and protein < 0:
        raise ValidationError(message)

    ingredient.protein_per_100g = protein
    db.session.commit()
    logger.info("Set protein for %r to %s", ingredient.name, protein)
    return ingredient.to_dict()


# ============================================
# QUERIES
# ============================================

def _load_lookups():
    return (
        {i.id: i for i in Ingredient.query.all()},
        {u.id: u.name for u in Unit.query.all()},
        {f.id: f.name for f in IngredientForm.query.all()},
    )


def join_recipe(recipe, ingredients, units, forms):
    """
    Resolve a recipe's stored ids into names.

    Lines whose ingredient no longer exists are skipped, as are form and
    unit ids that no longer resolve.
    """
    lines = []
    for line in recipe.ingredient_lines or []:
        ingredient = ingredients.get(line.get('ingredient_id'))
        if ingredient is None:
            continue

        joined = {
            'item': ingredient.name,
            'core': bool(line.get('core')),
            'protein_per_100g': ingredient.protein_per_100g,
            'forms': [forms[f] for f in line.get('form_ids') or [] if f in forms],
        }

        stored_quantity = line.get('quantity')
        if stored_quantity:
            quantity = {}
            if stored_quantity.get('amount') is not None:
                quantity['amount'] = stored_quantity['amount']
            unit_name = units.get(stored_quantity.get('unit_id'))
            if unit_name is not None:
                quantity['unit'] = unit_name
            joined['quantity'] = quantity

        lines.append(joined)

    return {
        'id': recipe.id,
        'title': recipe.title,
        'instructions': recipe.instructions or '',
        'ingredients': lines,
    }


def list_recipes():
    """All recipes in creation order, with reference names resolved."""
    ingredients, units, forms = _load_lookups()
    recipes = Recipe.query.order_by(Recipe.id).all()
    return [join_recipe(r, ingredients, units, forms) for r in recipes]


def get_recipe(recipe_id):
    """One recipe with reference names resolved."""
    recipe = _get_recipe_or_404(recipe_id)
    ingredients, units, forms = _load_lookups()
    return join_recipe(recipe, ingredients, units, forms)


def list_unique_names(kind):
    """Sorted names of every record of an entity kind."""
    model = entity_model(kind)
    return sorted(entity.name for entity in model.query.all())


def list_ingredients():
    """All ingredients with their protein data, sorted by name."""
    return [i.to_dict() for i in Ingredient.query.order_by(Ingredient.name).all()]


def get_recipe_view(recipe_id, servings=1, custom_line=None, custom_amount=None):
    """
    One joined recipe with scaled quantities, protein total and steps.

    A custom amount for a core line takes precedence over servings and
    resets them to 1.
    """
    recipe = get_recipe(recipe_id)
    scale = ServingScale(servings)
    if custom_line is not None and custom_amount is not None:
        scale.set_custom_quantity(custom_line, custom_amount)
    return build_recipe_view(recipe, scale)
