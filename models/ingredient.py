"""
Reference Entity Models

Contains the Ingredient, Unit and IngredientForm models. Each is a flat
named record shared by every recipe that mentions it.
"""

from .base import db


class Ingredient(db.Model):
    """
    Normalized ingredient name with optional nutrition data.

    Names are unique by exact, case-sensitive match. The unique index is a
    backstop for the get-or-create lookup in services.normalization.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)

    # Grams of protein per 100g; only used for core lines measured in grams
    protein_per_100g = db.Column(db.Float, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'protein_per_100g': self.protein_per_100g,
        }


class Unit(db.Model):
    """Measurement unit name (e.g. 'grams', 'cup', 'each')."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False, index=True)

    def to_dict(self):
        return {'id': self.id, 'name': self.name}


class IngredientForm(db.Model):
    """Preparation form of an ingredient (e.g. 'diced', 'minced')."""
    __tablename__ = 'ingredient_form'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)

    def to_dict(self):
        return {'id': self.id, 'name': self.name}
