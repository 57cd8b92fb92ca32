"""
Pokédex Catalog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask
from pokedex.config import Config
from pokedex.extensions import db
from pokedex.gateway import PokedexGateway
from pokedex.sessions import MemorySessionStore, StoreSessionInterface


def create_app(config_class=Config, session_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        session_store: SessionStore for server-side sessions
            (default: a fresh MemorySessionStore)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    PokedexGateway(db, app)
    app.session_interface = StoreSessionInterface(
        session_store if session_store is not None else MemorySessionStore())

    # Register blueprints
    from pokedex.auth import auth_bp
    from pokedex.catalog import catalog_bp
    from pokedex.users import users_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(users_bp)

    from pokedex.cli import register_commands
    register_commands(app)

    if app.config.get('AUTO_CREATE_TABLES'):
        with app.app_context():
            db.create_all()

    return app


def _configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('pokedex').setLevel(level)
