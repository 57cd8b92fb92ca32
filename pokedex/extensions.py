"""
Flask Extensions

One SQLAlchemy instance shared by the models and the persistence gateway.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
