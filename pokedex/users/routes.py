"""
User Management Routes

Gated by the login flag; the privilege level is only enforced when
ENFORCE_USER_LEVEL is set.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for, session
from pokedex.auth.decorators import level_required, login_required
from pokedex.auth.services import prepare_password
from pokedex.gateway import GatewayError, RecordNotFound, get_gateway
from pokedex.users import users_bp

logger = logging.getLogger(__name__)


def render_user_list(err_message='', status=200):
    """User list view; on failure paths the list is re-fetched, not blanked."""
    try:
        users = get_gateway().list_users()
    except GatewayError:
        logger.exception('Could not load the user list')
        users = []
        if not err_message:
            err_message = 'Error fetching users'
            status = 500
    return render_template('display_users.html',
                           users=users,
                           err_message=err_message,
                           user_level=session.get('level')), status


def _failure_status(error):
    return 404 if isinstance(error, RecordNotFound) else 500


@users_bp.route('/addUser', methods=['GET'])
@login_required
@level_required
def add_user_form():
    return render_template('add_user.html', err_message='')


@users_bp.route('/addUser', methods=['POST'])
@login_required
@level_required
def add_user():
    """Insert the submitted account as-is (no validation or uniqueness check)."""
    username = request.form.get('username', '')
    password = request.form.get('password', '')
    level = request.form.get('level', type=int)
    if level is None:
        level = current_app.config['DEFAULT_USER_LEVEL']

    try:
        get_gateway().add_user(username, prepare_password(password), level)
    except GatewayError:
        logger.exception('Could not add user %s', username)
        return render_template('add_user.html', err_message='Unable to add user.'), 500

    logger.info('Added user %s (level %s)', username, level)
    return redirect(url_for('catalog.home'))


@users_bp.route('/displayUsers')
@login_required
@level_required
def display_users():
    return render_user_list()


@users_bp.route('/editUser/<int:user_id>', methods=['GET'])
@login_required
@level_required
def edit_user_form(user_id):
    try:
        user = get_gateway().get_user(user_id)
    except GatewayError:
        logger.exception('Could not load user %s', user_id)
        return render_user_list('Unable to edit user', 500)

    if user is None:
        return render_user_list('Unable to edit user', 404)
    return render_template('edit_user.html', user=user, err_message='')


@users_bp.route('/editUser/<int:user_id>', methods=['POST'])
@login_required
@level_required
def edit_user(user_id):
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        # A blank password field keeps the current password
        new_password = prepare_password(password) if password else None
        get_gateway().update_user(user_id, username, new_password)
    except GatewayError as e:
        logger.error('Error updating user %s: %s', user_id, e)
        return render_user_list('Unable to update user.', _failure_status(e))

    return redirect(url_for('catalog.home'))


@users_bp.route('/deleteUser/<int:user_id>', methods=['POST'])
@login_required
@level_required
def delete_user(user_id):
    try:
        get_gateway().delete_user(user_id)
    except GatewayError as e:
        logger.error('Error deleting the user %s: %s', user_id, e)
        return render_user_list('Unable to delete the user.', _failure_status(e))

    logger.info('Deleted user %s', user_id)
    return redirect(url_for('catalog.home'))
