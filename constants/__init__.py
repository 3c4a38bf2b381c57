"""
Constants Package

Static lookup tables and limits shared by services and routes.
"""

from .units import GRAM_SYNONYMS
from .validation import SERVING_OPTIONS, ENTITY_KINDS, MAX_LENGTHS

__all__ = [
    'GRAM_SYNONYMS',
    'SERVING_OPTIONS',
    'ENTITY_KINDS',
    'MAX_LENGTHS',
]
