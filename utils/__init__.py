# Utility modules for the recipe catalog
from .sanitizer import sanitize_text, sanitize_instructions, clean_name
