import pytest

from services import ValidationError
from services.scaling import ServingScale, build_recipe_view, quantity_text, total_protein


def _core(amount, unit='g', protein=20):
    return {'item': 'Chicken', 'core': True, 'protein_per_100g': protein, 'forms': [],
            'quantity': {'amount': amount, 'unit': unit}}


def _side(amount, unit='cup'):
    return {'item': 'Rice', 'core': False, 'protein_per_100g': 7, 'forms': [],
            'quantity': {'amount': amount, 'unit': unit}}


# ============================================
# PROTEIN TOTALS
# ============================================

def test_total_protein_none_without_core_lines():
    assert total_protein([_side(1)]) is None
    assert total_protein([]) is None


def test_total_protein_sums_core_gram_lines():
    assert total_protein([_core(200), _side(1)]) == 40
    assert total_protein([_core(200, unit='grams'), _core(50, protein=10)]) == 45


def test_total_protein_scales():
    assert total_protein([_core(200)], 2) == 80


@pytest.mark.parametrize('line', [
    _core(200, unit='ml'),
    _core(200, protein=None),
    _core(None),
    {'item': 'Tofu', 'core': True, 'protein_per_100g': 8, 'forms': []},
])
def test_total_protein_zero_when_no_core_line_qualifies(line):
    assert total_protein([line]) == 0


# ============================================
# SERVING SCALE
# ============================================

def test_default_scale_is_one_serving():
    scale = ServingScale()
    assert scale.servings == 1
    assert scale.custom_quantities == {}
    assert scale.scale_factor([_core(200)]) == 1


@pytest.mark.parametrize('servings', [0, 7, '2'])
def test_servings_outside_options_rejected(servings):
    with pytest.raises(ValidationError):
        ServingScale(servings)


def test_custom_quantity_on_core_line_sets_factor():
    lines = [_core(200), _side(1)]
    scale = ServingScale(4)
    scale.set_custom_quantity(0, 300)
    assert scale.servings == 1
    assert scale.scale_factor(lines) == 1.5


def test_custom_quantity_on_non_core_line_is_ignored():
    scale = ServingScale()
    scale.set_custom_quantity(1, 5)
    assert scale.scale_factor([_core(200), _side(1)]) == 1


def test_only_one_custom_quantity_is_kept():
    scale = ServingScale()
    scale.set_custom_quantity(0, 300)
    scale.set_custom_quantity(2, 50)
    assert scale.custom_quantities == {2: 50}


def test_choosing_servings_clears_custom_quantity():
    lines = [_core(200)]
    scale = ServingScale()
    scale.set_custom_quantity(0, 100)
    scale.choose_servings(3)
    assert scale.custom_quantities == {}
    assert scale.scale_factor(lines) == 3


def test_clearing_custom_quantity_falls_back_to_servings():
    scale = ServingScale()
    scale.set_custom_quantity(0, 100)
    scale.set_custom_quantity(0, None)
    assert scale.scale_factor([_core(200)]) == 1


@pytest.mark.parametrize('amount', [0, -5, float('nan')])
def test_custom_quantity_must_be_positive(amount):
    with pytest.raises(ValidationError):
        ServingScale().set_custom_quantity(0, amount)


def test_custom_quantity_ignored_when_original_has_no_amount():
    scale = ServingScale()
    scale.set_custom_quantity(0, 100)
    assert scale.scale_factor([_core(None)]) == 1


# ============================================
# DISPLAY
# ============================================

def test_quantity_text():
    assert quantity_text(_side(2), 1.5) == '3 cup'
    assert quantity_text({'quantity': {'unit': 'pinch'}}, 2) == 'pinch'
    assert quantity_text({'quantity': {'amount': 1}}, 2) == '2'
    assert quantity_text({}, 2) == ''


def test_build_recipe_view():
    recipe = {
        'id': 7,
        'title': 'Chicken Rice',
        'instructions': 'Cook rice.\nGrill chicken.',
        'ingredients': [_core(200), _side(1)],
    }
    scale = ServingScale()
    scale.set_custom_quantity(0, 100)

    view = build_recipe_view(recipe, scale)

    assert view['id'] == 7
    assert view['steps'] == ['Cook rice.', 'Grill chicken.']
    assert view['scale_factor'] == 0.5
    assert view['total_protein'] == 20
    chicken, rice = view['ingredients']
    assert chicken['customizable'] is True
    assert chicken['custom_amount'] == 100
    assert chicken['scaled_amount'] == '100'
    assert rice['customizable'] is False
    assert rice['custom_amount'] is None
    assert rice['quantity_text'] == '0.5 cup'
    # The joined lines themselves are left untouched
    assert recipe['ingredients'][1]['quantity']['amount'] == 1
