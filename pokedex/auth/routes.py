"""
Auth Routes

Session-flag login and logout.
"""

import logging

from flask import render_template, request, redirect, url_for, session
from pokedex.auth import auth_bp
from pokedex.auth.services import authenticate
from pokedex.gateway import GatewayError, get_gateway

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Check credentials and mark the session as logged in."""
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        user = authenticate(get_gateway(), username, password)
    except GatewayError:
        logger.exception('Login lookup failed for %s', username)
        return render_template('login.html',
                               err_message='Unable to log in right now. Please try again.'), 500

    if user is None:
        logger.info('Rejected login for %s', username)
        return render_template('login.html', err_message='Invalid Credentials')

    session['is_logged_in'] = True
    session['username'] = user.username
    session['level'] = user.level
    logger.info('User %s logged in (level %s)', user.username, user.level)
    return redirect(url_for('catalog.home'))


@auth_bp.route('/logout')
def logout():
    """Flip the login flag; the session record itself is kept."""
    if session.get('is_logged_in'):
        logger.info('User %s logged out', session.get('username'))
    if session:
        session['is_logged_in'] = False
    return render_template('login.html', err_message='Please log in')
