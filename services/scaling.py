"""
Scaling Service

Serving-size scaling and protein totals for the public recipe view. Works
on joined recipes (see services.recipes.join_recipe), where each line
carries its unit name rather than an id.
"""

from constants import SERVING_OPTIONS

from .errors import ValidationError
from .parsing import is_finite_number, is_gram_unit, scale_amount, split_instructions


def total_protein(lines, scale_factor=1):
    """
    Protein in grams contributed by the core lines at a given scale.

    Only core lines with a numeric protein_per_100g, a numeric amount and a
    gram unit count. Returns None when the recipe has no core lines at all,
    and 0 when it has some but none of them qualify.
    """
    total = 0.0
    has_core_lines = False

    for line in lines:
        if not line.get('core'):
            continue
        has_core_lines = True

        protein = line.get('protein_per_100g')
        quantity = line.get('quantity') or {}
        amount = quantity.get('amount')
        if (is_finite_number(protein) and is_finite_number(amount)
                and is_gram_unit(quantity.get('unit'))):
            total += (amount * scale_factor / 100) * protein

    return total if has_core_lines else None


class ServingScale:
    """
    The scale source chosen for one recipe view.

    Either a serving count from SERVING_OPTIONS or an absolute amount typed
    for one core line; choosing one clears the other.
    """

    def __init__(self, servings=1):
        self.servings = 1
        self.custom_quantities = {}
        self.choose_servings(servings)

    def choose_servings(self, servings):
        if servings not in SERVING_OPTIONS:
            raise ValidationError(
                f"servings must be one of {', '.join(str(s) for s in SERVING_OPTIONS)}")
        self.servings = servings
        self.custom_quantities = {}

    def set_custom_quantity(self, line_index, amount):
        """Override one line's amount; None removes the override for that line."""
        if amount is None:
            self.custom_quantities.pop(line_index, None)
            return
        if not is_finite_number(amount) or amount <= 0:
            raise ValidationError('custom amount must be a positive number')
        # Only one override at a time, and it replaces the serving count
        self.custom_quantities = {line_index: amount}
        self.servings = 1

    def scale_factor(self, lines):
        """
        Factor applied to every line of the recipe.

        An override on a core line with a positive original amount scales
        the whole recipe by custom / original. Otherwise the serving count
        is the factor.
        """
        for index, line in enumerate(lines):
            custom = self.custom_quantities.get(index)
            if custom is None or not line.get('core'):
                continue
            original = (line.get('quantity') or {}).get('amount')
            if is_finite_number(original) and original > 0 and custom > 0:
                return custom / original
        return self.servings


def quantity_text(line, scale_factor=1):
    """Scaled amount and unit joined for display, e.g. '200 grams'."""
    quantity = line.get('quantity') or {}
    parts = [scale_amount(quantity.get('amount'), scale_factor), (quantity.get('unit') or '').strip()]
    return ' '.join(part for part in parts if part)


def build_recipe_view(recipe, scale):
    """Joined recipe plus everything the detail view derives from it."""
    lines = recipe['ingredients']
    factor = scale.scale_factor(lines)

    view_lines = []
    for index, line in enumerate(lines):
        amount = (line.get('quantity') or {}).get('amount')
        view_line = dict(line)
        view_line['scaled_amount'] = scale_amount(amount, factor)
        view_line['quantity_text'] = quantity_text(line, factor)
        view_line['customizable'] = bool(line.get('core')) and is_finite_number(amount)
        view_line['custom_amount'] = scale.custom_quantities.get(index)
        view_lines.append(view_line)

    return {
        'id': recipe['id'],
        'title': recipe['title'],
        'instructions': recipe['instructions'],
        'steps': split_instructions(recipe['instructions']),
        'servings': scale.servings,
        'scale_factor': factor,
        'total_protein': total_protein(lines, factor),
        'ingredients': view_lines,
    }
