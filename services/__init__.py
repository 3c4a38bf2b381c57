"""
Services Package

Business logic modules for the recipe catalog.
"""

from .errors import (
    CatalogError,
    ValidationError,
    AuthError,
    NotFoundError,
    ConflictError,
)

from .parsing import (
    parse_amount,
    scale_amount,
    split_instructions,
)

from .normalization import (
    resolve_ingredient_name,
    resolve_unit_name,
    resolve_form_name,
    build_ingredient_lines,
)

from .recipes import (
    add_recipe,
    update_recipe,
    remove_recipe,
    update_ingredient,
    list_recipes,
    get_recipe,
    get_recipe_view,
    list_unique_names,
    list_ingredients,
)

from .orphans import (
    list_unused,
    remove_entity,
    remove_all_unused,
)

from .scaling import (
    total_protein,
    ServingScale,
    build_recipe_view,
)

from .filtering import (
    filter_recipes_by_ingredients,
    match_suggestions,
)

from .pairings import (
    save_pairing,
    delete_pairing,
    list_pairings,
)

__all__ = [
    # Errors
    'CatalogError',
    'ValidationError',
    'AuthError',
    'NotFoundError',
    'ConflictError',
    # Parsing
    'parse_amount',
    'scale_amount',
    'split_instructions',
    # Normalization
    'resolve_ingredient_name',
    'resolve_unit_name',
    'resolve_form_name',
    'build_ingredient_lines',
    # Recipes
    'add_recipe',
    'update_recipe',
    'remove_recipe',
    'update_ingredient',
    'list_recipes',
    'get_recipe',
    'get_recipe_view',
    'list_unique_names',
    'list_ingredients',
    # Orphans
    'list_unused',
    'remove_entity',
    'remove_all_unused',
    # Scaling
    'total_protein',
    'ServingScale',
    'build_recipe_view',
    # Filtering
    'filter_recipes_by_ingredients',
    'match_suggestions',
    # Pairings
    'save_pairing',
    'delete_pairing',
    'list_pairings',
]
