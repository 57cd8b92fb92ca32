import pytest

from pokedex import create_app
from pokedex.config import TestConfig
from pokedex.extensions import db
from pokedex.models import Pokemon, User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def alice(app):
    user = User(username='alice', password='correct', level=2)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture()
def catalog(app):
    rows = [
        Pokemon(description='pikachu', base_total=320),
        Pokemon(description='bulbasaur', base_total=318),
        Pokemon(description='snorlax', base_total=540),
        Pokemon(description='charmander', base_total=309),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows


@pytest.fixture()
def logged_in(client, alice):
    r = client.post('/login', data={'username': 'alice', 'password': 'correct'})
    assert r.status_code == 302
    return client
