"""
Auth Blueprint

Login state is a plain session flag: a request is authenticated only when
session['is_logged_in'] is True.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from pokedex.auth import routes  # noqa: E402, F401
