"""
Normalization Service

Maps free-text ingredient, unit and form names onto shared reference
records. Every resolver is get-or-create: an exact, case-sensitive match on
the trimmed name wins, otherwise a new record is inserted and committed on
its own.
"""

import logging

from sqlalchemy.exc import IntegrityError

from constants import ENTITY_KINDS, MAX_LENGTHS
from models import db, Ingredient, Unit, IngredientForm
from utils.sanitizer import clean_name

from .errors import ValidationError, NotFoundError
from .parsing import parse_amount, is_gram_unit

logger = logging.getLogger(__name__)

ENTITY_MODELS = dict(zip(ENTITY_KINDS, (Ingredient, Unit, IngredientForm)))


def entity_model(kind):
    """Return the model class for an entity kind ('ingredients', 'units', 'forms')."""
    try:
        return ENTITY_MODELS[kind]
    except KeyError:
        raise NotFoundError(f'unknown entity kind: {kind}') from None


def _get_or_create(model, name, label, max_length):
    name = clean_name(name)
    if not name:
        raise ValidationError(f'{label} name required')
    if len(name) > max_length:
        raise ValidationError(f'{label} name too long (max {max_length} characters)')

    existing = model.query.filter_by(name=name).first()
    if existing:
        return existing.id

    entity = model(name=name)
    db.session.add(entity)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same name
        db.session.rollback()
        existing = model.query.filter_by(name=name).first()
        if existing is None:
            raise
        return existing.id

    logger.info("Created %s %r (id=%s)", label, name, entity.id)
    return entity.id


def resolve_ingredient_name(name):
    """Return the id of the ingredient called name, creating it if needed."""
    return _get_or_create(Ingredient, name, 'ingredient', MAX_LENGTHS['ingredient_name'])


def resolve_unit_name(name):
    """Return the id of the unit called name, creating it if needed."""
    return _get_or_create(Unit, name, 'unit', MAX_LENGTHS['unit_name'])


def resolve_form_name(name):
    """Return the id of the ingredient form called name, creating it if needed."""
    return _get_or_create(IngredientForm, name, 'form', MAX_LENGTHS['form_name'])


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'on', 'yes')
    return bool(value)


def _as_text(value):
    if value is None:
        return ''
    return str(value).strip()


def _form_names(raw_forms, index):
    if raw_forms is None:
        return []
    if isinstance(raw_forms, str):
        raw_forms = [raw_forms]
    if not isinstance(raw_forms, (list, tuple)):
        raise ValidationError('forms must be a list', index)
    names = []
    for form in raw_forms:
        form = clean_name(form)
        if form:
            names.append(form)
    return names


def _resolve_line(item, amount, unit, forms, core):
    line = {
        'ingredient_id': resolve_ingredient_name(item),
        'core': core,
    }

    form_ids = [resolve_form_name(form) for form in forms]
    if form_ids:
        line['form_ids'] = form_ids

    quantity = {}
    if amount is not None:
        quantity['amount'] = amount
    if unit:
        quantity['unit_id'] = resolve_unit_name(unit)
    if quantity:
        line['quantity'] = quantity

    return line


def build_ingredient_lines(raw_lines):
    """
    Turn submitted ingredient rows into stored ingredient lines.

    Each raw row is a mapping with 'item', 'amount', 'unit', 'forms' and
    'core'. Fully blank rows are dropped. Rows are validated and resolved
    one at a time, so records created for earlier rows stay in place when a
    later row is rejected; resubmitting reuses them.

    Raises:
        ValidationError: when raw_lines is not a list, and with the row's
            index for a malformed row, a missing or overlong name, a core
            row in a non-gram unit, or an amount that is not a number.
    """
    if raw_lines is None:
        raw_lines = []
    if not isinstance(raw_lines, (list, tuple)):
        raise ValidationError('ingredient lines must be a list')

    lines = []
    for index, raw in enumerate(raw_lines):
        if not isinstance(raw, dict):
            raise ValidationError('ingredient line must be an object', index)

        item = clean_name(raw.get('item'))
        amount_text = _as_text(raw.get('amount'))
        unit = clean_name(raw.get('unit'))
        forms = _form_names(raw.get('forms'), index)
        core = _as_bool(raw.get('core'))

        if not item and not amount_text and not unit and not forms:
            continue

        if not item:
            raise ValidationError('item name required', index)

        if core and unit and not is_gram_unit(unit):
            raise ValidationError('core ingredients must use gram', index)

        try:
            amount = parse_amount(amount_text)
        except ValueError:
            raise ValidationError('amount must be a number', index) from None

        try:
            lines.append(_resolve_line(item, amount, unit, forms, core))
        except ValidationError as error:
            raise ValidationError(error.message, index) from None

    return lines
