"""
Filtering Service

Ingredient and form filters for the public recipe list, and the name
suggestions used by the admin autocomplete.
"""


def _line_matches(line, name, wanted_forms):
    if line.get('item') != name:
        return False
    return set(wanted_forms).issubset(line.get('forms') or [])


def filter_recipes_by_ingredients(recipes, selected_names, selected_forms_by_name=None):
    """
    Keep recipes that contain every selected ingredient.

    For an ingredient with selected forms, the matching line must carry all
    of those forms (it may carry more). Selecting nothing keeps every recipe.
    """
    selected_names = list(selected_names or [])
    if not selected_names:
        return list(recipes)
    forms_by_name = selected_forms_by_name or {}

    matched = []
    for recipe in recipes:
        lines = recipe.get('ingredients') or []
        if all(any(_line_matches(line, name, forms_by_name.get(name) or []) for line in lines)
               for name in selected_names):
            matched.append(recipe)
    return matched


def match_suggestions(items, search_term):
    """Case-insensitive substring match; a blank term matches everything."""
    term = (search_term or '').strip().lower()
    return [item for item in items if term in item.lower()]
