"""
Credential checks.

Rows written before HASH_PASSWORDS was switched on hold plaintext, so
verification accepts both forms.
"""

import hmac

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

HASH_PREFIXES = ('pbkdf2:', 'scrypt:')


def is_password_hash(stored):
    return stored.startswith(HASH_PREFIXES)


def prepare_password(raw):
    """Value to persist for a submitted password."""
    if current_app.config.get('HASH_PASSWORDS'):
        return generate_password_hash(raw, method='pbkdf2:sha256')
    return raw


def verify_password(stored, supplied):
    if stored is None or supplied is None:
        return False
    if is_password_hash(stored):
        return check_password_hash(stored, supplied)
    return hmac.compare_digest(stored.encode('utf-8'), supplied.encode('utf-8'))


def authenticate(gateway, username, password):
    """Return the first user whose username and password both match, or None.

    Raises GatewayError if the lookup fails.
    """
    for user in gateway.find_users_by_username(username):
        if verify_password(user.password, password):
            return user
    return None
