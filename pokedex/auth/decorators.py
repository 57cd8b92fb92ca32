"""
Auth Decorators
"""

from functools import wraps
from flask import abort, current_app, redirect, session, url_for


def is_logged_in():
    return session.get('is_logged_in') is True


def login_required(f):
    """Decorator to ensure the request carries a logged-in session.

    Anonymous requests are sent back to the home page, which shows the
    login form.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not is_logged_in():
            return redirect(url_for('catalog.home'))
        return f(*args, **kwargs)
    return wrapper


def level_required(f):
    """Decorator gating user management on the session's privilege level.

    Only active when ENFORCE_USER_LEVEL is set; otherwise level stays
    informational and any logged-in user passes.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if current_app.config.get('ENFORCE_USER_LEVEL'):
            level = session.get('level') or 0
            if level < current_app.config['ADMIN_LEVEL']:
                abort(403)
        return f(*args, **kwargs)
    return wrapper
