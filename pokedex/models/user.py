"""
User Model
"""

from pokedex.extensions import db


class User(db.Model):
    """User account; level is a privilege tier shown in the UI"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), nullable=False)
    # Plaintext unless HASH_PASSWORDS is on; hashes need the wider column
    password = db.Column(db.String(255), nullable=False)
    level = db.Column(db.Integer, default=1, nullable=False)

    def __repr__(self):
        return f'<User {self.username} level:{self.level}>'
