"""
Users Blueprint

Listing, adding, editing and deleting user accounts.
"""

from flask import Blueprint

users_bp = Blueprint('users', __name__)

from pokedex.users import routes  # noqa: E402, F401
