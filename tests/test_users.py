from pokedex.extensions import db
from pokedex.gateway import GatewayError, PokedexGateway
from pokedex.models import User


def test_display_users(logged_in):
    r = logged_in.get('/displayUsers')
    assert r.status_code == 200
    assert 'alice' in r.get_data(as_text=True)


def test_add_user_form(logged_in):
    r = logged_in.get('/addUser')
    assert r.status_code == 200
    assert 'Add User' in r.get_data(as_text=True)


def test_add_user_inserts_row(logged_in):
    r = logged_in.post('/addUser', data={'username': 'brock', 'password': 'onix'})
    assert r.status_code == 302

    brock = User.query.filter_by(username='brock').one()
    assert brock.password == 'onix'
    assert brock.level == 1


def test_add_user_with_level(logged_in):
    logged_in.post('/addUser', data={'username': 'lance', 'password': 'dragonite', 'level': '3'})
    assert User.query.filter_by(username='lance').one().level == 3


def test_add_user_hashes_when_enabled(app, logged_in):
    app.config['HASH_PASSWORDS'] = True
    logged_in.post('/addUser', data={'username': 'erika', 'password': 'tangela'})
    erika = User.query.filter_by(username='erika').one()
    assert erika.password != 'tangela'
    assert erika.password.startswith('pbkdf2:')

    logged_in.get('/logout')
    r = logged_in.post('/login', data={'username': 'erika', 'password': 'tangela'})
    assert r.status_code == 302


def test_add_user_database_error(logged_in, monkeypatch):
    def broken(self, username, password, level):
        raise GatewayError('boom')

    monkeypatch.setattr(PokedexGateway, 'add_user', broken)
    r = logged_in.post('/addUser', data={'username': 'brock', 'password': 'onix'})
    assert r.status_code == 500
    assert 'Unable to add user.' in r.get_data(as_text=True)


def test_edit_user(logged_in, alice):
    r = logged_in.get(f'/editUser/{alice.id}')
    assert r.status_code == 200
    assert 'value="alice"' in r.get_data(as_text=True)

    r = logged_in.post(f'/editUser/{alice.id}', data={'username': 'alicia', 'password': 'new'})
    assert r.status_code == 302

    db.session.expire_all()
    user = db.session.get(User, alice.id)
    assert (user.username, user.password) == ('alicia', 'new')


def test_edit_unknown_user_keeps_list(logged_in):
    r = logged_in.get('/editUser/9999')
    assert r.status_code == 404
    body = r.get_data(as_text=True)
    assert 'Unable to edit user' in body
    assert 'alice' in body

    r = logged_in.post('/editUser/9999', data={'username': 'x', 'password': 'y'})
    assert r.status_code == 404
    assert 'Unable to update user.' in r.get_data(as_text=True)


def test_delete_user_removes_from_list(logged_in):
    brock = User(username='brock', password='onix', level=1)
    db.session.add(brock)
    db.session.commit()
    brock_id = brock.id

    r = logged_in.post(f'/deleteUser/{brock_id}')
    assert r.status_code == 302

    db.session.expire_all()
    ids = [u.id for u in User.query.all()]
    assert brock_id not in ids
    assert 'brock' not in logged_in.get('/displayUsers').get_data(as_text=True)


def test_delete_unknown_user_shows_error(logged_in):
    r = logged_in.post('/deleteUser/9999')
    assert r.status_code == 404
    body = r.get_data(as_text=True)
    assert 'Unable to delete the user.' in body
    # the list is re-fetched rather than blanked
    assert 'alice' in body


def test_user_list_failure(logged_in, monkeypatch):
    def broken(self):
        raise GatewayError('boom')

    monkeypatch.setattr(PokedexGateway, 'list_users', broken)
    r = logged_in.get('/displayUsers')
    assert r.status_code == 500
    assert 'Error fetching users' in r.get_data(as_text=True)


def test_edit_user_form_database_error(logged_in, alice, monkeypatch):
    def broken(self, user_id):
        raise GatewayError('boom')

    monkeypatch.setattr(PokedexGateway, 'get_user', broken)
    r = logged_in.get(f'/editUser/{alice.id}')
    assert r.status_code == 500
    body = r.get_data(as_text=True)
    assert 'Unable to edit user' in body
    assert 'alice' in body


def test_edit_user_blank_password_keeps_current(logged_in, alice):
    r = logged_in.post(f'/editUser/{alice.id}', data={'username': 'alicia', 'password': ''})
    assert r.status_code == 302

    db.session.expire_all()
    user = db.session.get(User, alice.id)
    assert (user.username, user.password) == ('alicia', 'correct')


def test_edit_user_blank_password_not_hashed(app, logged_in, alice):
    app.config['HASH_PASSWORDS'] = True
    logged_in.post(f'/editUser/{alice.id}', data={'username': 'alice'})

    db.session.expire_all()
    assert db.session.get(User, alice.id).password == 'correct'
