"""
Recipe Pairing Service

Pairings bookmark a group of recipes. They are not tied to the recipes'
lifecycle: ids of deleted recipes stay stored and are skipped on read.
"""

import logging

from constants import MAX_LENGTHS
from models import db, Recipe, RecipePairing
from utils.sanitizer import sanitize_text

from .errors import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


def _clean_recipe_ids(recipe_ids):
    if not isinstance(recipe_ids, (list, tuple)):
        raise ValidationError('recipe ids must be a list')
    cleaned = []
    for recipe_id in recipe_ids:
        if isinstance(recipe_id, bool):
            raise ValidationError('recipe ids must be integers')
        try:
            cleaned.append(int(recipe_id))
        except (TypeError, ValueError):
            raise ValidationError('recipe ids must be integers') from None
    if not cleaned:
        raise ValidationError('at least one recipe required')
    return cleaned


def save_pairing(recipe_ids, name=None):
    """Store a pairing and return its id."""
    recipe_ids = _clean_recipe_ids(recipe_ids)
    name = sanitize_text(name) or None
    if name and len(name) > MAX_LENGTHS['pairing_name']:
        raise ValidationError(f"pairing name too long (max {MAX_LENGTHS['pairing_name']} characters)")

    pairing = RecipePairing(name=name, recipe_ids=recipe_ids)
    db.session.add(pairing)
    db.session.commit()
    logger.info("Saved pairing %s with %d recipes", pairing.id, len(recipe_ids))
    return pairing.id


def delete_pairing(pairing_id):
    pairing = db.session.get(RecipePairing, pairing_id)
    if pairing is None:
        raise NotFoundError(f'pairing {pairing_id} not found')
    db.session.delete(pairing)
    db.session.commit()
    logger.info("Deleted pairing %s", pairing_id)


def list_pairings():
    """Every pairing with the titles of the recipes that still exist."""
    titles = {r.id: r.title for r in Recipe.query.all()}
    result = []
    for pairing in RecipePairing.query.order_by(RecipePairing.id).all():
        result.append({
            'id': pairing.id,
            'name': pairing.name,
            'recipe_ids': list(pairing.recipe_ids or []),
            'recipes': [
                {'id': recipe_id, 'title': titles[recipe_id]}
                for recipe_id in pairing.recipe_ids or []
                if recipe_id in titles
            ],
        })
    return result
