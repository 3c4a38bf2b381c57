"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient, Unit, IngredientForm
from .recipe import Recipe, RecipePairing

__all__ = [
    'db',
    'Ingredient',
    'Unit',
    'IngredientForm',
    'Recipe',
    'RecipePairing',
]
