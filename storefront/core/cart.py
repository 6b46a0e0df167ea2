# storefront/core/cart.py
"""
Cart engine. Operates on the cart embedded in the session's user.

Cart lines reference products by id only; a line keeps pointing at its
product after the product is archived, and archived products still count
towards the cart amounts.
"""
import logging
import numbers

from ..errors import InvalidQuantity, NotFound
from ..models import CartLine
from .gate import require_session

logger = logging.getLogger(__name__)

CART_ITEM_NOT_FOUND = 'Cart item not found.'


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_quantity(quantity):
    if not _is_number(quantity):
        raise InvalidQuantity()


def add_item(store, session, product_id, quantity):
    """Adds quantity of a product, merging into the existing line for that product."""
    require_session(session)
    _check_quantity(quantity)
    with store.lock:
        if store.find_product(product_id) is None:
            raise NotFound('Product not found.')
        cart = session.user.cart
        line = session.user.find_cart_line(product_id)
        if line is not None:
            line.quantity += quantity
        else:
            line = CartLine(productId=product_id, quantity=quantity)
            cart.append(line)
    logger.debug(f"User {session.user.id} cart: {product_id} x{line.quantity}")
    return line


def get_cart(store, session):
    require_session(session)
    with store.lock:
        return list(session.user.cart)


def set_quantity(store, session, product_id, quantity):
    """Replaces a line's quantity. Zero and negative quantities are kept as given."""
    require_session(session)
    _check_quantity(quantity)
    with store.lock:
        line = session.user.find_cart_line(product_id)
        if line is None:
            raise NotFound(CART_ITEM_NOT_FOUND)
        line.quantity = quantity
    return line


def remove_item(store, session, product_id):
    require_session(session)
    with store.lock:
        line = session.user.find_cart_line(product_id)
        if line is None:
            raise NotFound(CART_ITEM_NOT_FOUND)
        session.user.cart.remove(line)
    return line


def _cart_amount(store, user):
    amount = 0
    for line in user.cart:
        product = store.find_product(line.productId)
        # Products without a numeric price contribute nothing
        if product is not None and _is_number(product.price):
            amount += product.price * line.quantity
    return amount


def subtotal(store, session):
    require_session(session)
    with store.lock:
        return _cart_amount(store, session.user)


def total(store, session):
    # Same amount as subtotal; only the rendering differs (always two decimals).
    require_session(session, 'Unauthorized. Access Denied.')
    with store.lock:
        return _cart_amount(store, session.user)


def format_subtotal(amount):
    """Renders an amount without rounding: 35 -> '35', 12.5 -> '12.5'."""
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f'Subtotal: ${amount}'


def format_total(amount):
    return f'Total: ${amount:.2f}'
