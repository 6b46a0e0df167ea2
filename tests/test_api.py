import datetime

import jwt
import pytest

from storefront import create_app, get_store


def create_product(client, headers, **fields):
    body = {'name': 'Mug', 'description': 'Blue mug', 'price': 8}
    body.update(fields)
    response = client.post('/products', json=body, headers=headers)
    assert response.status_code == 201
    return response.get_json()['productId']


def test_hello(client):
    response = client.get('/api/hello')
    assert response.status_code == 200
    assert 'message' in response.get_json()


def test_register_and_duplicate(client):
    response = client.post('/users', json={'email': 'ann@example.com', 'password': 'pw'})
    assert response.status_code == 201
    assert response.get_json()['message'] == 'Registered successfully.'

    response = client.post('/users', json={'email': 'ann@example.com', 'password': 'pw'})
    assert response.status_code == 409
    assert response.get_json() == {
        'message': 'A user with the same email address is already registered.',
        'error': 'duplicate_email',
    }


def test_login_returns_token_and_user(client):
    client.post('/users', json={'email': 'ann@example.com', 'password': 'pw'})

    response = client.post('/users/login', json={'email': 'ann@example.com', 'password': 'pw'})

    body = response.get_json()
    assert response.status_code == 200
    assert body['message'] == 'Logged in successfully'
    assert body['user']['email'] == 'ann@example.com'
    assert 'password' not in body['user']
    assert body['access_token']


def test_bad_login(client):
    response = client.post('/users/login', json={'email': 'ann@example.com', 'password': 'nope'})
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Login failed. Incorrect email or password.'


def test_failed_login_revokes_presented_token(client, login):
    headers = login('ann@example.com')
    assert client.get('/cart', headers=headers).status_code == 200

    response = client.post('/users/login', json={'email': 'ann@example.com', 'password': 'bad'},
                           headers=headers)
    assert response.status_code == 401

    response = client.get('/cart', headers=headers)
    assert response.status_code == 403
    assert response.get_json()['error'] == 'unauthorized'


def test_sessions_are_independent(client, login):
    ann = login('ann@example.com')
    bob = login('bob@example.com')
    admin = login('root@example.com', is_admin=True)
    product_id = create_product(client, admin)

    client.post('/cart/add', json={'productId': product_id, 'quantity': 1}, headers=ann)

    assert len(client.get('/cart', headers=ann).get_json()) == 1
    assert client.get('/cart', headers=bob).get_json() == []


def test_me(client, login):
    headers = login('ann@example.com')
    assert client.get('/users/me', headers=headers).get_json()['email'] == 'ann@example.com'
    assert client.get('/users/me').status_code == 403


def test_invalid_and_expired_tokens_are_anonymous(app, client, login):
    login('ann@example.com')
    assert client.get('/cart', headers={'Authorization': 'Bearer not-a-jwt'}).status_code == 403

    with app.app_context():
        session = next(iter(get_store().sessions._sessions.values()))
    expired = jwt.encode(
        {'sid': session.id, 'user_id': session.user.id,
         'exp': datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(minutes=1)},
        app.config['SECRET_KEY'], algorithm='HS256',
    )
    assert client.get('/cart', headers={'Authorization': f'Bearer {expired}'}).status_code == 403

    forged = jwt.encode({'sid': session.id, 'user_id': session.user.id}, 'other-key', algorithm='HS256')
    assert client.get('/cart', headers={'Authorization': f'Bearer {forged}'}).status_code == 403


@pytest.mark.parametrize('method, path', [
    ('get', '/users'),
    ('put', '/users/some-id/setadmin'),
    ('post', '/products'),
    ('put', '/products/some-id'),
    ('put', '/products/some-id/archive'),
    ('get', '/orders'),
])
def test_admin_endpoints_reject_non_admins(client, login, method, path):
    headers = login('ann@example.com')
    for kwargs in ({}, {'headers': headers}):
        response = getattr(client, method)(path, json={}, **kwargs)
        assert response.status_code == 403
        assert response.get_json()['error'] == 'unauthorized'


def test_admin_user_management(client, login):
    admin = login('root@example.com', is_admin=True)
    ann = login('ann@example.com')

    users = client.get('/users', headers=admin).get_json()
    assert [u['email'] for u in users] == ['root@example.com', 'ann@example.com']
    ann_id = users[1]['id']

    response = client.put(f'/users/{ann_id}/setadmin', headers=admin)
    assert response.get_json()['message'] == 'User set as admin successfully'
    assert client.get('/users', headers=ann).status_code == 200

    response = client.put('/users/missing/setadmin', headers=admin)
    assert response.status_code == 404
    assert response.get_json()['message'] == 'User not found'


def test_product_lifecycle(client, login):
    admin = login('root@example.com', is_admin=True)
    product_id = create_product(client, admin, isActive=False)

    product = client.get(f'/products/{product_id}').get_json()
    assert product['isActive'] is True

    response = client.put(f'/products/{product_id}', json={'price': 0, 'name': 'Big mug'}, headers=admin)
    assert response.get_json()['message'] == 'Product updated successfully.'
    product = client.get(f'/products/{product_id}').get_json()
    assert (product['name'], product['price']) == ('Big mug', 8)

    response = client.put(f'/products/{product_id}/archive', headers=admin)
    assert response.get_json()['message'] == 'Product archived successfully.'
    assert client.get('/products/active').get_json() == []
    assert [p['id'] for p in client.get('/products').get_json()] == [product_id]
    assert client.get(f'/products/{product_id}').status_code == 200

    client.put(f'/products/{product_id}', json={'isActive': True}, headers=admin)
    assert len(client.get('/products/active').get_json()) == 1


def test_unknown_product(client, login):
    admin = login('root@example.com', is_admin=True)
    assert client.get('/products/missing').status_code == 404
    assert client.put('/products/missing', json={'name': 'x'}, headers=admin).status_code == 404
    response = client.put('/products/missing/archive', headers=admin)
    assert response.status_code == 404
    assert response.get_json()['message'] == 'Product not found.'


def test_cart_flow(client, login):
    admin = login('root@example.com', is_admin=True)
    a = create_product(client, admin, name='A', price=10)
    b = create_product(client, admin, name='B', price=5)
    ann = login('ann@example.com')

    for product_id, quantity in ((a, 3), (b, 3), (a, -1)):
        response = client.post('/cart/add', json={'productId': product_id, 'quantity': quantity},
                               headers=ann)
        assert response.get_json()['message'] == 'Product added to cart.'

    assert client.get('/cart', headers=ann).get_json() == [
        {'productId': a, 'quantity': 2}, {'productId': b, 'quantity': 3},
    ]

    subtotal = client.get('/cart/subtotal', headers=ann).get_json()
    assert subtotal == {'message': 'Subtotal: $35', 'subtotal': 35}
    total = client.get('/cart/total', headers=ann).get_json()
    assert total == {'message': 'Total: $35.00', 'total': '35.00'}

    response = client.put(f'/cart/quantity/{b}', json={'quantity': 1}, headers=ann)
    assert response.get_json()['message'] == 'Cart item quantity updated.'
    response = client.delete(f'/cart/remove/{a}', headers=ann)
    assert response.get_json()['message'] == 'Product removed from cart'
    assert client.get('/cart', headers=ann).get_json() == [{'productId': b, 'quantity': 1}]

    response = client.delete(f'/cart/remove/{a}', headers=ann)
    assert response.status_code == 404
    assert response.get_json()['message'] == 'Cart item not found.'
    assert client.put(f'/cart/quantity/{a}', json={'quantity': 1}, headers=ann).status_code == 404
    assert client.post('/cart/add', json={'productId': 'nope', 'quantity': 1},
                       headers=ann).status_code == 404


def test_cart_requires_login(client):
    response = client.get('/cart/total')
    assert response.status_code == 403
    assert response.get_json()['message'] == 'Unauthorized. Access Denied.'
    assert client.get('/cart/subtotal').get_json()['message'] == 'Unauthorized. Access denied.'


def test_orders(client, login):
    admin = login('root@example.com', is_admin=True)
    ann = login('ann@example.com')

    response = client.post('/orders', json={'userId': 'someone-else', 'products': ['p1'], 'quantity': 2},
                           headers=ann)
    assert response.status_code == 201
    assert response.get_json()['message'] == 'Your order has been placed successfully.'
    order_id = response.get_json()['orderId']

    orders = client.get('/orders', headers=admin).get_json()
    assert len(orders) == 1
    assert orders[0]['id'] == order_id
    assert orders[0]['userId'] == 'someone-else'
    assert orders[0]['purchasedOn']
    assert client.get('/users/me', headers=ann).get_json()['orders'] == [order_id]

    assert client.post('/orders', json={}).status_code == 403


def test_missing_body_is_treated_as_empty(client, login):
    admin = login('root@example.com', is_admin=True)
    response = client.post('/products', data='not json', headers=admin)
    assert response.status_code == 201
    product = client.get(f"/products/{response.get_json()['productId']}").get_json()
    assert product['name'] is None and product['isActive'] is True


def test_seeded_app(monkeypatch):
    monkeypatch.setattr('config.TestingConfig.SEED_DATA', True)
    app = create_app('testing')
    client = app.test_client()

    names = [p['name'] for p in client.get('/products').get_json()]
    assert names == ['Widget Pro', 'Mega Cable']

    response = client.post('/users/login', json={
        'email': app.config['ADMIN_EMAIL'], 'password': app.config['ADMIN_PASSWORD'],
    })
    token = response.get_json()['access_token']
    assert client.get('/users', headers={'Authorization': f'Bearer {token}'}).status_code == 200


def test_cart_add_without_quantity(client, login):
    admin = login('root@example.com', is_admin=True)
    product_id = create_product(client, admin, price=4)
    ann = login('ann@example.com')

    response = client.post('/cart/add', json={'productId': product_id}, headers=ann)
    assert response.status_code == 400
    assert response.get_json() == {'message': 'Quantity must be a number.', 'error': 'invalid_quantity'}

    client.post('/cart/add', json={'productId': product_id, 'quantity': 2}, headers=ann)
    response = client.put(f'/cart/quantity/{product_id}', json={}, headers=ann)
    assert response.status_code == 400
    assert client.get('/cart/subtotal', headers=ann).get_json()['subtotal'] == 8


def test_priceless_product_in_cart_totals(client, login):
    admin = login('root@example.com', is_admin=True)
    response = client.post('/products', json={'name': 'A'}, headers=admin)
    priceless = response.get_json()['productId']
    priced = create_product(client, admin, name='B', price=2.5)
    ann = login('ann@example.com')
    client.post('/cart/add', json={'productId': priceless, 'quantity': 1}, headers=ann)
    client.post('/cart/add', json={'productId': priced, 'quantity': 2}, headers=ann)

    response = client.get('/cart/subtotal', headers=ann)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Subtotal: $5', 'subtotal': 5.0}
    assert client.get('/cart/total', headers=ann).get_json()['message'] == 'Total: $5.00'
