"""
Models Package

Exports all models for easy importing.
"""

from pokedex.models.pokemon import Pokemon
from pokedex.models.user import User

__all__ = ['Pokemon', 'User']
