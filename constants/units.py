"""
Unit Constants

Unit names that the protein calculation understands.
"""

# Unit names (lowercase) accepted as grams for core ingredients
GRAM_SYNONYMS = {'gram', 'grams', 'g'}
