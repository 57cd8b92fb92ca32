"""
Pokemon Model
"""

from pokedex.extensions import db


class Pokemon(db.Model):
    """A catalog entry; description doubles as display name and search key"""
    __tablename__ = 'pokemon'

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(100), nullable=False)
    base_total = db.Column(db.Integer)

    def __repr__(self):
        return f'<Pokemon {self.description} base_total:{self.base_total}>'
