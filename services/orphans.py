"""
Orphan Detection Service

Finds reference records that no recipe line points at, and deletes them on
request. Usage is computed by scanning every recipe on each call; there is
no usage index. A recipe saved between the scan and the delete can be left
pointing at a deleted record.
"""

import logging

from models import db, Recipe

from .auth import require_admin
from .errors import ConflictError, NotFoundError
from .normalization import entity_model

logger = logging.getLogger(__name__)


def _line_references(line, kind):
    if kind == 'ingredients':
        ingredient_id = line.get('ingredient_id')
        return [] if ingredient_id is None else [ingredient_id]
    if kind == 'units':
        unit_id = (line.get('quantity') or {}).get('unit_id')
        return [] if unit_id is None else [unit_id]
    return line.get('form_ids') or []


def used_ids(kind):
    """Ids of every record of kind referenced by at least one recipe line."""
    entity_model(kind)
    used = set()
    for recipe in Recipe.query.all():
        for line in recipe.ingredient_lines or []:
            used.update(_line_references(line, kind))
    return used


def is_used(kind, entity_id):
    return entity_id in used_ids(kind)


def list_unused(kind):
    """Records of kind that no recipe references, sorted by name."""
    model = entity_model(kind)
    used = used_ids(kind)
    return [e for e in model.query.order_by(model.name).all() if e.id not in used]


def remove_entity(kind, entity_id, admin_secret):
    """Delete one record, refusing while any recipe still uses it."""
    require_admin(admin_secret)
    model = entity_model(kind)
    entity = db.session.get(model, entity_id)
    if entity is None:
        raise NotFoundError(f'{kind} {entity_id} not found')

    if is_used(kind, entity_id):
        raise ConflictError('entity is in use')

    name = entity.name
    db.session.delete(entity)
    db.session.commit()
    logger.info("Deleted %s %r (id=%s)", kind, name, entity_id)


def remove_all_unused(kind, admin_secret):
    """Delete every unused record of kind."""
    require_admin(admin_secret)
    unused = list_unused(kind)
    for entity in unused:
        db.session.delete(entity)
    db.session.commit()

    if unused:
        logger.info("Removed %d unused %s", len(unused), kind)
    return {'deleted_count': len(unused)}
