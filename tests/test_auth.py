# tests/test_auth.py
from datetime import timedelta
import pytest
from mangrove_backend.core.database import User

ADMIN_ROUTES = [
    ('get', '/'),
    ('get', '/users'),
    ('get', '/users/create'),
    ('post', '/users'),
    ('post', '/users/1/delete'),
    ('get', '/mangroves'),
    ('get', '/mangroves/create'),
    ('post', '/mangroves'),
    ('get', '/mangroves/1/edit'),
    ('post', '/mangroves/1/edit'),
    ('post', '/mangroves/1/delete'),
    ('get', '/configs'),
    ('post', '/configs'),
]

def session_user_id(client):
    with client.session_transaction() as sess:
        return sess.get('user_id')

@pytest.mark.parametrize('method,path', ADMIN_ROUTES)
def test_admin_routes_redirect_to_login_without_session(client, method, path):
    response = getattr(client, method)(path, data={'username': 'x', 'password': 'y', 'dataId': '99'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')

def test_unauthenticated_writes_change_nothing(app, client):
    client.post('/users', data={'username': 'intruder', 'password': 'pw'})
    client.post('/users/1/delete')
    with app.app_context():
        assert [u.username for u in User.query.all()] == ['admin']

def test_login_page_renders(client):
    response = client.get('/login')
    assert response.status_code == 200
    assert b'name="password"' in response.data

def test_login(app, client):
    response = client.post('/login', data={'username': 'admin', 'password': 'admin'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')

    with app.app_context():
        admin_id = User.query.filter_by(username='admin').first().id
    assert session_user_id(client) == admin_id
    assert client.get('/').status_code == 200

def test_session_lasts_two_days(app):
    assert app.permanent_session_lifetime == timedelta(days=2)
    assert app.config['SESSION_COOKIE_NAME'] == 'LOGIN_ID'

@pytest.mark.parametrize('username,password', [
    ('admin', 'wrong'),
    ('nobody', 'admin'),
    ('admin', ''),
])
def test_failed_login_sets_no_session(client, username, password):
    response = client.post('/login', data={'username': username, 'password': password})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    assert session_user_id(client) is None
    assert client.get('/users').status_code == 302

def test_login_when_already_logged_in_redirects_home(admin_client):
    for response in (admin_client.get('/login'), admin_client.post('/login', data={})):
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/')

def test_logout(admin_client):
    response = admin_client.get('/logout')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    assert session_user_id(admin_client) is None
    assert admin_client.get('/').status_code == 302

def test_logout_without_session(client):
    response = client.get('/logout')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')

def test_session_of_deleted_user_is_dropped(app, admin_client):
    admin_client.post('/users', data={'username': 'second', 'password': 'pw'})
    admin_client.get('/logout')
    admin_client.post('/login', data={'username': 'second', 'password': 'pw'})
    with app.app_context():
        second_id = User.query.filter_by(username='second').first().id
    assert session_user_id(admin_client) == second_id

    admin_client.post(f'/users/{second_id}/delete')
    response = admin_client.get('/users')
    assert response.status_code == 302
    assert session_user_id(admin_client) is None
