"""
End-to-end tests through the Flask test client.
"""

from conftest import ADMIN_SECRET

OMELETTE = {
    'title': 'Omelette',
    'instructions': 'Whisk eggs.\nCook gently.',
    'ingredient_lines': [
        {'item': 'Egg', 'amount': '3', 'unit': 'each', 'forms': ['beaten'], 'core': False},
        {'item': 'Butter', 'amount': '10', 'unit': 'g', 'core': True},
        {'item': '', 'amount': '', 'unit': '', 'forms': []},
    ],
}


def _create(client, admin_headers, payload=OMELETTE):
    response = client.post('/api/admin/recipes', json=payload, headers=admin_headers)
    assert response.status_code == 201
    return response.get_json()['id']


# ============================================
# ADMIN
# ============================================

def test_login(client):
    assert client.post('/api/admin/login', json={'admin_secret': ADMIN_SECRET}).status_code == 200
    response = client.post('/api/admin/login', json={'admin_secret': 'nope'})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'not authorized'}


def test_create_and_read_recipe(client, admin_headers):
    recipe_id = _create(client, admin_headers)

    recipes = client.get('/api/recipes').get_json()
    assert len(recipes) == 1
    recipe = recipes[0]
    assert recipe['id'] == recipe_id
    assert recipe['title'] == 'Omelette'
    egg, butter = recipe['ingredients']
    assert egg['item'] == 'Egg'
    assert egg['forms'] == ['beaten']
    assert egg['quantity'] == {'amount': 3, 'unit': 'each'}
    assert butter['core'] is True


def test_secret_in_body_is_accepted(client):
    payload = dict(OMELETTE, admin_secret=ADMIN_SECRET)
    assert client.post('/api/admin/recipes', json=payload).status_code == 201


def test_create_without_secret(client):
    response = client.post('/api/admin/recipes', json=OMELETTE)
    assert response.status_code == 401
    assert client.get('/api/recipes').get_json() == []


def test_create_reports_line_index(client, admin_headers):
    payload = {
        'title': 'Bad',
        'ingredient_lines': [
            {'item': 'Egg', 'amount': '2'},
            {'item': 'Milk', 'amount': '200', 'unit': 'ml', 'core': True},
        ],
    }
    response = client.post('/api/admin/recipes', json=payload, headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'core ingredients must use gram', 'line_index': 1}


def test_create_requires_an_ingredient(client, admin_headers):
    response = client.post('/api/admin/recipes', json={'title': 'Empty', 'ingredient_lines': []},
                           headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json()['error'] == 'at least one ingredient required'


def test_patch_recipe(client, admin_headers):
    recipe_id = _create(client, admin_headers)
    response = client.patch(f'/api/admin/recipes/{recipe_id}', json={'title': 'Fluffy Omelette'},
                            headers=admin_headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body['title'] == 'Fluffy Omelette'
    assert len(body['ingredients']) == 2

    missing = client.patch('/api/admin/recipes/999', json={'title': 'x'}, headers=admin_headers)
    assert missing.status_code == 404


def test_delete_recipe(client, admin_headers):
    recipe_id = _create(client, admin_headers)
    assert client.delete(f'/api/admin/recipes/{recipe_id}', headers=admin_headers).status_code == 204
    assert client.delete(f'/api/admin/recipes/{recipe_id}', headers=admin_headers).status_code == 404


def test_orphan_cleanup(client, admin_headers):
    recipe_id = _create(client, admin_headers)
    ingredients = {i['name']: i['id'] for i in client.get('/api/admin/ingredients').get_json()}

    response = client.delete(f"/api/admin/ingredients/{ingredients['Egg']}", headers=admin_headers)
    assert response.status_code == 409
    assert response.get_json() == {'error': 'entity is in use'}

    client.delete(f'/api/admin/recipes/{recipe_id}', headers=admin_headers)
    unused = client.get('/api/admin/units/unused').get_json()
    assert sorted(u['name'] for u in unused) == ['each', 'g']

    response = client.delete('/api/admin/units/unused', headers=admin_headers)
    assert response.get_json() == {'deleted_count': 2}
    assert client.get('/api/units/names').get_json() == []

    assert client.delete(f"/api/admin/ingredients/{ingredients['Egg']}", headers=admin_headers).status_code == 204


def test_unknown_kind_is_404(client, admin_headers):
    assert client.get('/api/admin/spices/unused').status_code == 404
    assert client.get('/api/spices/names').status_code == 404


def test_update_ingredient_protein(client, admin_headers):
    _create(client, admin_headers)
    butter = next(i for i in client.get('/api/admin/ingredients').get_json() if i['name'] == 'Butter')

    response = client.patch(f"/api/admin/ingredients/{butter['id']}", json={'protein_per_100g': 1},
                            headers=admin_headers)
    assert response.status_code == 200
    assert response.get_json()['protein_per_100g'] == 1

    response = client.patch(f"/api/admin/ingredients/{butter['id']}", json={'protein_per_100g': -3},
                            headers=admin_headers)
    assert response.status_code == 400


# ============================================
# PUBLIC
# ============================================

def test_filter_by_ingredient_and_form(client, admin_headers):
    _create(client, admin_headers)
    _create(client, admin_headers, {
        'title': 'Egg Salad',
        'ingredient_lines': [{'item': 'Egg', 'amount': '4', 'unit': 'each', 'forms': ['boiled']}],
    })

    titles = [r['title'] for r in client.get('/api/recipes?ingredient=Egg').get_json()]
    assert titles == ['Omelette', 'Egg Salad']

    titles = [r['title'] for r in client.get('/api/recipes?ingredient=Egg&form:Egg=boiled').get_json()]
    assert titles == ['Egg Salad']

    titles = [r['title'] for r in client.get('/api/recipes?ingredient=Egg&ingredient=Butter').get_json()]
    assert titles == ['Omelette']


def test_recipe_view(client, admin_headers):
    recipe_id = _create(client, admin_headers)

    view = client.get(f'/api/recipes/{recipe_id}?servings=2').get_json()
    assert view['steps'] == ['Whisk eggs.', 'Cook gently.']
    assert view['servings'] == 2
    assert [line['quantity_text'] for line in view['ingredients']] == ['6 each', '20 g']
    # Butter is core but has no protein value yet
    assert view['total_protein'] == 0

    view = client.get(f'/api/recipes/{recipe_id}?custom_line=1&custom_amount=15').get_json()
    assert view['scale_factor'] == 1.5
    assert view['ingredients'][0]['scaled_amount'] == '4.5'

    assert client.get(f'/api/recipes/{recipe_id}?servings=9').status_code == 400
    assert client.get('/api/recipes/999').status_code == 404


def test_names_with_query(client, admin_headers):
    _create(client, admin_headers)
    assert client.get('/api/ingredients/names').get_json() == ['Butter', 'Egg']
    assert client.get('/api/ingredients/names?q=eg').get_json() == ['Egg']
    assert client.get('/api/forms/names').get_json() == ['beaten']


def test_pairings(client, admin_headers):
    recipe_id = _create(client, admin_headers)

    response = client.post('/api/pairings', json={'recipe_ids': [recipe_id], 'name': 'Brunch'})
    assert response.status_code == 201
    pairing_id = response.get_json()['id']

    pairings = client.get('/api/pairings').get_json()
    assert pairings[0]['name'] == 'Brunch'
    assert pairings[0]['recipes'] == [{'id': recipe_id, 'title': 'Omelette'}]

    assert client.post('/api/pairings', json={'recipe_ids': []}).status_code == 400
    assert client.delete(f'/api/pairings/{pairing_id}').status_code == 204
    assert client.delete(f'/api/pairings/{pairing_id}').status_code == 404


# ============================================
# MALFORMED INPUT
# ============================================

def test_admin_body_must_be_an_object(client, admin_headers):
    response = client.post('/api/admin/recipes', json=['x'], headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'request body must be a JSON object'}


def test_non_list_ingredient_lines(client, admin_headers):
    response = client.post('/api/admin/recipes', json={'title': 'Bad', 'ingredient_lines': 5},
                           headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'ingredient lines must be a list'}


def test_non_list_forms(client, admin_headers):
    payload = {'title': 'Bad', 'ingredient_lines': [{'item': 'Onion', 'forms': 5}]}
    response = client.post('/api/admin/recipes', json=payload, headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'forms must be a list', 'line_index': 0}


def test_overlong_item_name(client, admin_headers):
    payload = {'title': 'Bad', 'ingredient_lines': [{'item': 'Rice'}, {'item': 'x' * 201}]}
    response = client.post('/api/admin/recipes', json=payload, headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json()['line_index'] == 1


def test_numeric_secret_is_not_authorized(client, app):
    app.config['ADMIN_SECRET'] = '123'
    response = client.post('/api/admin/login', json={'admin_secret': 123})
    assert response.status_code == 401


def test_pairing_body_must_be_an_object(client):
    response = client.post('/api/pairings', json=[1, 2])
    assert response.status_code == 400
    assert response.get_json() == {'error': 'request body must be a JSON object'}
