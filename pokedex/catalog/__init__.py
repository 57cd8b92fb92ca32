"""
Catalog Blueprint

Home page, search, and edit/delete of pokemon records.
"""

from flask import Blueprint

catalog_bp = Blueprint('catalog', __name__)

from pokedex.catalog import routes  # noqa: E402, F401
