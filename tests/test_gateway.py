import pytest
from sqlalchemy.exc import OperationalError

from pokedex.extensions import db
from pokedex.gateway import GatewayError, RecordNotFound, get_gateway


@pytest.fixture()
def gateway(app):
    return get_gateway()


def test_list_pokemon_sorted_by_description(gateway, catalog):
    names = [p.description for p in gateway.list_pokemon()]
    assert names == sorted(names)
    assert len(names) == 4


def test_search_pokemon_ignores_case(gateway, catalog):
    assert [p.description for p in gateway.search_pokemon('PiKaChU')] == ['pikachu']
    assert gateway.search_pokemon('Nonexistent') == []
    assert gateway.search_pokemon(None) == []


def test_update_then_get(gateway, catalog):
    pokemon_id = catalog[1].id
    gateway.update_pokemon(pokemon_id, 'Bulbasaur', 318)
    gateway.update_pokemon(pokemon_id, 'Bulbasaur', 318)
    db.session.expire_all()
    fetched = gateway.get_pokemon(pokemon_id)
    assert (fetched.description, fetched.base_total) == ('Bulbasaur', 318)


def test_update_and_delete_unknown_ids(gateway):
    with pytest.raises(RecordNotFound):
        gateway.update_pokemon(42, 'x', 1)
    with pytest.raises(RecordNotFound):
        gateway.delete_pokemon(42)
    with pytest.raises(RecordNotFound):
        gateway.update_user(42, 'x', 'y')
    with pytest.raises(RecordNotFound) as excinfo:
        gateway.delete_user(42)
    assert excinfo.value.table == 'users'
    assert excinfo.value.record_id == 42


def test_user_round_trip(gateway):
    user = gateway.add_user('gary', 'eevee', 1)
    assert [u.username for u in gateway.find_users_by_username('gary')] == ['gary']
    gateway.delete_user(user.id)
    assert gateway.get_user(user.id) is None
    assert gateway.list_users() == []


def test_sqlalchemy_errors_become_gateway_errors(gateway, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError('SELECT 1', {}, Exception('connection lost'))

    monkeypatch.setattr(db.session, 'get', broken)
    with pytest.raises(GatewayError):
        gateway.get_pokemon(1)
