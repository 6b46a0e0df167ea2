# storefront/core/catalog.py
import logging

from ..errors import NotFound
from ..models import Product
from .gate import require_admin

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = 'Product not found.'

# Distinguishes "isActive not sent" from an explicit false/null in updates
MISSING = object()


def create_product(store, session, name, description, price, is_active=None):
    """
    Adds a product to the catalog and returns its id.

    ``is_active`` is OR-coalesced with True, so every new product starts
    active whatever the caller sends. Use ``archive_product`` to hide one.
    """
    require_admin(session)
    product = Product(name=name, description=description, price=price,
                      isActive=is_active or True)
    with store.lock:
        store.products.append(product)
    logger.info(f"Admin {session.user.id} created product {product.id} ({name})")
    return product.id


def list_products(store):
    with store.lock:
        return list(store.products)


def list_active_products(store):
    with store.lock:
        return [p for p in store.products if p.isActive]


def get_product(store, product_id):
    with store.lock:
        product = store.find_product(product_id)
    if product is None:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


def update_product(store, session, product_id, name=None, description=None,
                   price=None, is_active=MISSING):
    """
    Partially updates a product.

    name, description and price are only replaced by truthy values (an empty
    string or a price of 0 leaves the field untouched). isActive is replaced
    whenever it was sent at all.
    """
    require_admin(session)
    with store.lock:
        product = store.find_product(product_id)
        if product is None:
            raise NotFound(PRODUCT_NOT_FOUND)
        product.name = name or product.name
        product.description = description or product.description
        product.price = price or product.price
        if is_active is not MISSING:
            product.isActive = is_active
    logger.info(f"Admin {session.user.id} updated product {product_id}")
    return product


def archive_product(store, session, product_id):
    require_admin(session)
    with store.lock:
        product = store.find_product(product_id)
        if product is None:
            raise NotFound(PRODUCT_NOT_FOUND)
        product.isActive = False
    logger.info(f"Admin {session.user.id} archived product {product_id}")
    return product
