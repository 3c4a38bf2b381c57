"""
Validation Constants

Contains whitelist values and limits for validating user input and
keeping stored data within sane bounds.
"""

# Serving counts offered by the public recipe view
SERVING_OPTIONS = (1, 2, 3, 4, 5, 6)

# Reference entity kinds addressable through the admin endpoints
ENTITY_KINDS = ('ingredients', 'units', 'forms')

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_name': 200,
    'unit_name': 50,
    'form_name': 100,
    'recipe_title': 200,
    'pairing_name': 200,
    'instructions': 50000,
}
