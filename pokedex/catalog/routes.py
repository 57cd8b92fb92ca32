"""
Catalog Routes
"""

import logging

from flask import render_template, request, redirect, url_for, session
from pokedex.auth.decorators import is_logged_in, login_required
from pokedex.catalog import catalog_bp
from pokedex.gateway import GatewayError, RecordNotFound, get_gateway

logger = logging.getLogger(__name__)


def render_home(err_message='', status=200):
    """Home view with the full catalog; a failed read shows an error, not an empty list."""
    try:
        pokemon = get_gateway().list_pokemon()
    except GatewayError:
        logger.exception('Could not load the pokemon list')
        pokemon = []
        if not err_message:
            err_message = 'Error loading pokemon'
            status = 500
    return render_template('index.html',
                           pokemon=pokemon,
                           err_message=err_message,
                           username=session.get('username'),
                           user_level=session.get('level')), status


@catalog_bp.route('/')
def home():
    """Catalog list for logged-in users, login form for everyone else."""
    if not is_logged_in():
        return render_template('login.html', err_message='')
    return render_home()


@catalog_bp.route('/searchPokemon')
@login_required
def search_pokemon():
    """Case-insensitive exact lookup by description."""
    name = request.args.get('pokemon', '')

    try:
        found = get_gateway().search_pokemon(name)
    except GatewayError:
        logger.exception('Search for %r failed', name)
        return render_home('An error occurred while searching for the pokemon', 500)

    if not found:
        return render_home(f'Cannot find {name}')

    match = found[0]
    return render_template('search_result.html',
                           pokemon={'description': match.description,
                                    'base_total': match.base_total})


@catalog_bp.route('/editPokemon/<int:pokemon_id>', methods=['GET'])
@login_required
def edit_pokemon_form(pokemon_id):
    try:
        pokemon = get_gateway().get_pokemon(pokemon_id)
    except GatewayError:
        logger.exception('Could not load pokemon %s', pokemon_id)
        return render_home('Error loading pokemon', 500)

    if pokemon is None:
        return render_home(f'Cannot find pokemon {pokemon_id}', 404)
    return render_template('edit_pokemon.html', pokemon=pokemon, err_message='')


@catalog_bp.route('/editPokemon/<int:pokemon_id>', methods=['POST'])
@login_required
def edit_pokemon(pokemon_id):
    description = request.form.get('description', '').strip()
    raw_total = request.form.get('base_total', '').strip()
    submitted = {'id': pokemon_id, 'description': description, 'base_total': raw_total}

    try:
        base_total = int(raw_total)
    except ValueError:
        return render_template('edit_pokemon.html', pokemon=submitted,
                               err_message='Base total must be a whole number'), 400

    try:
        get_gateway().update_pokemon(pokemon_id, description, base_total)
    except RecordNotFound as e:
        logger.error('Error updating pokemon: %s', e)
        return render_template('edit_pokemon.html', pokemon=submitted,
                               err_message='Error updating pokemon'), 404
    except GatewayError:
        logger.exception('Error updating pokemon %s', pokemon_id)
        return render_template('edit_pokemon.html', pokemon=submitted,
                               err_message='Error updating pokemon'), 500

    return redirect(url_for('catalog.home'))


@catalog_bp.route('/deletePokemon/<int:pokemon_id>', methods=['POST'])
@login_required
def delete_pokemon(pokemon_id):
    try:
        get_gateway().delete_pokemon(pokemon_id)
    except RecordNotFound as e:
        logger.error('Error deleting the pokemon: %s', e)
        return render_home('Error deleting pokemon', 404)
    except GatewayError:
        logger.exception('Error deleting the pokemon %s', pokemon_id)
        return render_home('Error deleting pokemon', 500)

    return redirect(url_for('catalog.home'))
