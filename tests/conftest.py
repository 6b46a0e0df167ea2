import pytest

from storefront import create_app, get_store
from storefront.core import accounts


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def admin_session(store):
    accounts.register(store, 'admin@example.com', 'secret', is_admin=True)
    return accounts.login(store, 'admin@example.com', 'secret')


@pytest.fixture
def customer_session(store):
    accounts.register(store, 'bob@example.com', 'hunter2')
    return accounts.login(store, 'bob@example.com', 'hunter2')


def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def login(client):
    """Registers (if needed) and logs in over HTTP, returning auth headers."""
    def _login(email, password='pw', is_admin=False):
        client.post('/users', json={'email': email, 'password': password, 'isAdmin': is_admin})
        response = client.post('/users/login', json={'email': email, 'password': password})
        assert response.status_code == 200
        return auth_headers(response.get_json()['access_token'])
    return _login
