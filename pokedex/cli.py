"""
Flask CLI commands for setting up the database.

    flask --app app init-db
    flask --app app seed-pokemon
    flask --app app create-user ash pikachu --level 2
"""

import logging

import click
from pokedex.auth.services import prepare_password
from pokedex.extensions import db
from pokedex.gateway import get_gateway

logger = logging.getLogger(__name__)

DEFAULT_POKEMON = [
    ('Bulbasaur', 318),
    ('Charmander', 309),
    ('Squirtle', 314),
    ('Pikachu', 320),
    ('Eevee', 325),
    ('Snorlax', 540),
    ('Mewtwo', 680),
]


def register_commands(app):

    @app.cli.command('init-db')
    def init_db():
        """Create the pokemon and users tables."""
        db.create_all()
        click.echo('Tables created.')

    @app.cli.command('seed-pokemon')
    def seed_pokemon():
        """Insert a starter catalog when the pokemon table is empty."""
        gateway = get_gateway()
        if gateway.list_pokemon():
            click.echo('Catalog already has entries; nothing to do.')
            return
        for description, base_total in DEFAULT_POKEMON:
            gateway.add_pokemon(description, base_total)
        click.echo(f'Added {len(DEFAULT_POKEMON)} pokemon.')

    @app.cli.command('create-user')
    @click.argument('username')
    @click.argument('password')
    @click.option('--level', default=1, show_default=True, type=int,
                  help='Privilege tier for the new account.')
    def create_user(username, password, level):
        """Add a user account."""
        get_gateway().add_user(username, prepare_password(password), level)
        logger.info('Created user %s from the command line', username)
        click.echo(f'User {username} created (level {level}).')
