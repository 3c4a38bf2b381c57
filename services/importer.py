"""
Import Service

Bulk loading of ingredients, recipes and pairings from JSONL files, plus a
full wipe used before reseeding. Bad rows are skipped with a warning rather
than aborting the whole import.
"""

import json
import logging

from models import db, Ingredient, Unit, IngredientForm, Recipe, RecipePairing
from utils.sanitizer import clean_name, sanitize_text, sanitize_instructions

from .normalization import resolve_ingredient_name, resolve_unit_name, resolve_form_name
from .parsing import parse_amount

logger = logging.getLogger(__name__)


def read_jsonl(path):
    """Read one JSON object per non-blank line."""
    records = []
    with open(path, encoding='utf-8') as f:
        for line in f:
            if line.strip():
                records.append(json.loads(line))
    return records


def import_ingredients(records):
    """
    Import {'item': ..., 'protein_per_100g': ...} rows.

    Existing ingredients are reused and get their protein updated when the
    row carries one. Returns a map of ingredient name to id.
    """
    ingredient_map = {}
    for record in records:
        name = clean_name(record.get('item'))
        if not name:
            continue
        ingredient_id = resolve_ingredient_name(name)

        protein = record.get('protein_per_100g', record.get('proteinPer100g'))
        if protein is not None:
            try:
                protein = parse_amount(protein)
            except ValueError:
                logger.warning("Ignoring invalid protein value for %r: %r", name, protein)
                protein = None
        if protein is not None:
            db.session.get(Ingredient, ingredient_id).protein_per_100g = protein
            db.session.commit()

        ingredient_map[name] = ingredient_id
    return ingredient_map


def _import_line(raw, ingredient_map):
    name = clean_name(raw.get('item'))
    ingredient_id = ingredient_map.get(name)
    if ingredient_id is None:
        logger.warning("Ingredient not found: %s", name)
        return None

    line = {'ingredient_id': ingredient_id, 'core': bool(raw.get('core'))}

    forms = [clean_name(f) for f in raw.get('forms') or []]
    form_ids = [resolve_form_name(f) for f in forms if f]
    if form_ids:
        line['form_ids'] = form_ids

    raw_quantity = raw.get('quantity')
    if raw_quantity:
        quantity = {}
        try:
            amount = parse_amount(raw_quantity.get('amount'))
        except ValueError:
            logger.warning("Ignoring invalid amount for %s: %r", name, raw_quantity.get('amount'))
            amount = None
        if amount is not None:
            quantity['amount'] = amount
        unit = clean_name(raw_quantity.get('unit'))
        if unit:
            quantity['unit_id'] = resolve_unit_name(unit)
        if quantity:
            line['quantity'] = quantity

    return line


def import_recipes(records, ingredient_map):
    """
    Import recipe rows whose lines name ingredients from ingredient_map.

    Lines naming unknown ingredients are dropped; a recipe left with no
    lines is skipped. Forms and units are resolved get-or-create. Returns a
    map of recipe title to id.
    """
    recipe_map = {}
    for record in records:
        title = sanitize_text(record.get('title'))
        lines = []
        for raw in record.get('ingredients') or []:
            line = _import_line(raw, ingredient_map)
            if line is not None:
                lines.append(line)

        if not title or not lines:
            logger.warning('Recipe "%s" has no valid ingredients, skipping', title)
            continue

        recipe = Recipe(
            title=title,
            instructions=sanitize_instructions(record.get('instructions')),
            ingredient_lines=lines,
        )
        db.session.add(recipe)
        db.session.commit()
        recipe_map[title] = recipe.id
    return recipe_map


def import_pairings(records, recipe_map):
    """Import {'name': ..., 'recipe_titles': [...]} rows; returns the new pairing ids."""
    pairing_ids = []
    for record in records:
        titles = record.get('recipe_titles', record.get('recipeTitles')) or []
        recipe_ids = []
        for title in titles:
            recipe_id = recipe_map.get(title)
            if recipe_id is None:
                logger.warning("Recipe not found: %s", title)
                continue
            recipe_ids.append(recipe_id)

        if not recipe_ids:
            logger.warning("Pairing with recipes [%s] has no valid recipes, skipping", ', '.join(titles))
            continue

        pairing = RecipePairing(name=sanitize_text(record.get('name')) or None, recipe_ids=recipe_ids)
        db.session.add(pairing)
        db.session.commit()
        pairing_ids.append(pairing.id)
    return pairing_ids


def clear_all_data():
    """
    Delete every row, pairings first and reference records last.

    Returns the number of deleted rows per collection.
    """
    counts = {}
    for key, model in (
        ('pairings', RecipePairing),
        ('recipes', Recipe),
        ('ingredients', Ingredient),
        ('forms', IngredientForm),
        ('units', Unit),
    ):
        counts[key] = model.query.delete()
    db.session.commit()
    logger.info("Cleared all data: %s", counts)
    return counts
