import logging
import os

import click
from flask import Flask, jsonify
from flask_migrate import Migrate

from config import get_config
from models import db
from routes import public_bp, admin_bp
from services import CatalogError
from services.importer import (
    read_jsonl, import_ingredients, import_recipes, import_pairings, clear_all_data,
)

migrate = Migrate()


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger().setLevel(app.config['LOG_LEVEL'])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(public_bp)
    app.register_blueprint(admin_bp)

    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        return jsonify(error.to_dict()), error.status_code

    register_commands(app)
    return app


# ============================================
# CLI COMMANDS
# ============================================

def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Create all tables without running migrations."""
        db.create_all()
        click.echo('Initialized the database.')

    @app.cli.command('clear-data')
    def clear_data_command():
        """Delete every recipe, pairing and reference record."""
        counts = clear_all_data()
        for key, count in counts.items():
            click.echo(f'Deleted {count} {key}')

    @app.cli.command('import-data')
    @click.argument('directory', type=click.Path(exists=True, file_okay=False))
    @click.option('--clear', is_flag=True, help='Delete existing data first.')
    def import_data_command(directory, clear):
        """Import ingredients.jsonl, recipes.jsonl and pairings.jsonl from DIRECTORY."""
        if clear:
            clear_all_data()

        ingredients_path = os.path.join(directory, 'ingredients.jsonl')
        recipes_path = os.path.join(directory, 'recipes.jsonl')
        pairings_path = os.path.join(directory, 'pairings.jsonl')
        for path in (ingredients_path, recipes_path):
            if not os.path.exists(path):
                raise click.ClickException(f'File not found: {path}')

        ingredient_map = import_ingredients(read_jsonl(ingredients_path))
        click.echo(f'Imported {len(ingredient_map)} ingredients')

        recipe_map = import_recipes(read_jsonl(recipes_path), ingredient_map)
        click.echo(f'Imported {len(recipe_map)} recipes')

        if os.path.exists(pairings_path):
            pairing_ids = import_pairings(read_jsonl(pairings_path), recipe_map)
            click.echo(f'Imported {len(pairing_ids)} pairings')


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
