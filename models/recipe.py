"""
Recipe Models

Contains the Recipe model and the RecipePairing model that bookmarks a
group of recipes.
"""

from .base import db


class Recipe(db.Model):
    """
    Recipe with its ingredient lines embedded as a JSON document.

    Each entry of ingredient_lines looks like:
        {'ingredient_id': 3, 'core': True, 'form_ids': [1, 4],
         'quantity': {'amount': 200.0, 'unit_id': 2}}
    form_ids and quantity are omitted when empty. Always assign a new list
    rather than mutating in place so the change is flushed.
    """
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    instructions = db.Column(db.Text, default='')
    ingredient_lines = db.Column(db.JSON, nullable=False, default=list)


class RecipePairing(db.Model):
    """
    User-curated group of recipe ids.

    No foreign keys: deleting a recipe leaves its id in place and it is
    skipped when the pairing is resolved.
    """
    __tablename__ = 'recipe_pairing'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=True)
    recipe_ids = db.Column(db.JSON, nullable=False, default=list)
