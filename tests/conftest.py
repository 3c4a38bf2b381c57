"""
Shared fixtures: an app on an in-memory SQLite database with tables
created, its test client, and the admin secret it accepts.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db

ADMIN_SECRET = 'test-secret'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return {'X-Admin-Secret': ADMIN_SECRET}


@pytest.fixture
def make_recipe(app):
    """Create a recipe through the service layer and return its id."""
    from services import add_recipe

    def _make(title='Test Recipe', lines=None, instructions=''):
        if lines is None:
            lines = [{'item': 'Salt', 'amount': '1', 'unit': 'pinch'}]
        return add_recipe(title, lines, instructions, ADMIN_SECRET)

    return _make
