"""
Persistence Gateway

Every read and write against the ``pokemon`` and ``users`` tables goes
through a single PokedexGateway instance. Each method is one statement plus
a commit; SQLAlchemy failures are rolled back and re-raised as GatewayError
so route handlers only deal with one exception family.
"""

import logging

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from pokedex.models import Pokemon, User

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'pokedex_gateway'


class GatewayError(Exception):
    """Raised when a database operation fails."""


class RecordNotFound(GatewayError):
    """Raised when an update or delete matches no row."""

    def __init__(self, table, record_id):
        super().__init__(f'No {table} row with id {record_id}')
        self.table = table
        self.record_id = record_id


class PokedexGateway:
    """Query interface to the catalog and user tables."""

    def __init__(self, db, app=None):
        self.db = db
        self.app = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.app = app
        app.extensions[EXTENSION_KEY] = self

    def close(self):
        """Release pooled connections; called once at process shutdown."""
        if self.app is None:
            return
        with self.app.app_context():
            self.db.session.remove()
            self.db.engine.dispose()
        logger.info('Database connections closed')

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read(self, query, what):
        try:
            return query()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise GatewayError(f'Could not read {what}') from e

    def _write(self, statement, what):
        try:
            result = statement()
            self.db.session.commit()
            return result
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise GatewayError(f'Could not write {what}') from e

    # ------------------------------------------------------------------
    # Pokemon
    # ------------------------------------------------------------------

    def list_pokemon(self):
        return self._read(
            lambda: Pokemon.query.order_by(Pokemon.description.asc()).all(),
            'pokemon')

    def search_pokemon(self, name):
        """Case-insensitive exact match on description."""
        needle = (name or '').lower()
        return self._read(
            lambda: Pokemon.query.filter(func.lower(Pokemon.description) == needle).all(),
            'pokemon')

    def get_pokemon(self, pokemon_id):
        return self._read(lambda: self.db.session.get(Pokemon, pokemon_id), 'pokemon')

    def add_pokemon(self, description, base_total):
        pokemon = Pokemon(description=description, base_total=base_total)
        self._write(lambda: self.db.session.add(pokemon), 'pokemon')
        return pokemon

    def update_pokemon(self, pokemon_id, description, base_total):
        changed = self._write(
            lambda: Pokemon.query.filter_by(id=pokemon_id).update(
                {'description': description, 'base_total': base_total}),
            'pokemon')
        if not changed:
            raise RecordNotFound('pokemon', pokemon_id)

    def delete_pokemon(self, pokemon_id):
        deleted = self._write(
            lambda: Pokemon.query.filter_by(id=pokemon_id).delete(), 'pokemon')
        if not deleted:
            raise RecordNotFound('pokemon', pokemon_id)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def list_users(self):
        return self._read(lambda: User.query.order_by(User.id).all(), 'users')

    def find_users_by_username(self, username):
        return self._read(lambda: User.query.filter_by(username=username).all(), 'users')

    def get_user(self, user_id):
        return self._read(lambda: self.db.session.get(User, user_id), 'users')

    def add_user(self, username, password, level):
        user = User(username=username, password=password, level=level)
        self._write(lambda: self.db.session.add(user), 'users')
        return user

    def update_user(self, user_id, username, password=None):
        """Update a user; a password of None keeps the stored one."""
        values = {'username': username}
        if password is not None:
            values['password'] = password
        changed = self._write(
            lambda: User.query.filter_by(id=user_id).update(values), 'users')
        if not changed:
            raise RecordNotFound('users', user_id)

    def delete_user(self, user_id):
        deleted = self._write(lambda: User.query.filter_by(id=user_id).delete(), 'users')
        if not deleted:
            raise RecordNotFound('users', user_id)


def get_gateway(app=None):
    """Return the gateway registered on ``app`` (default: the current app)."""
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
