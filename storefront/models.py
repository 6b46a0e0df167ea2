# storefront/models.py
import uuid
from datetime import datetime, timezone


def new_id():
    """Opaque unique identifier for users, products and orders."""
    return str(uuid.uuid4())


class User:
    """Represents a registered account, its cart and its order ids."""

    def __init__(self, email, password, isAdmin=False, id=None):
        self.id = id or new_id()
        self.email = email
        self.password = password  # Stored and compared as plain text
        self.isAdmin = isAdmin
        self.cart = []    # CartLine objects, at most one per productId
        self.orders = []  # Order ids, in placement order

    def find_cart_line(self, product_id):
        for line in self.cart:
            if line.productId == product_id:
                return line
        return None

    def to_dict(self):
        """Returns user data as a dictionary, excluding password."""
        return {
            'id': self.id,
            'email': self.email,
            'isAdmin': self.isAdmin,
            'cart': [line.to_dict() for line in self.cart],
            'orders': list(self.orders),
        }


class Product:
    """A catalog entry. Archiving flips isActive, products are never deleted."""

    def __init__(self, name, description, price, isActive=True, id=None):
        self.id = id or new_id()
        self.name = name
        self.description = description
        self.price = price
        self.isActive = isActive

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'isActive': self.isActive,
        }


class CartLine:
    def __init__(self, productId, quantity):
        self.productId = productId  # Not re-validated after the line is created
        self.quantity = quantity

    def to_dict(self):
        return {'productId': self.productId, 'quantity': self.quantity}


class Order:
    """An immutable record of a placed order."""

    def __init__(self, userId, products, quantity, purchasedOn=None, id=None):
        self.id = id or new_id()
        self.userId = userId
        self.products = products
        self.quantity = quantity
        self.purchasedOn = purchasedOn or datetime.now(timezone.utc)

    def to_dict(self):
        purchased_on = self.purchasedOn
        if isinstance(purchased_on, datetime):
            purchased_on = purchased_on.isoformat()
        return {
            'id': self.id,
            'userId': self.userId,
            'products': self.products,
            'quantity': self.quantity,
            'purchasedOn': purchased_on,
        }


class Session:
    """One logged-in identity, keyed by its session id in the session registry."""

    def __init__(self, id, user, expires_at=None):
        self.id = id
        self.user = user
        self.expires_at = expires_at  # None never expires

    def is_expired(self, now=None):
        if self.expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= self.expires_at

    def __repr__(self):
        return f'<Session {self.id} user={self.user.id}>'
