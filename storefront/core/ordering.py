# storefront/core/ordering.py
import logging

from ..models import Order
from .gate import require_admin, require_session

logger = logging.getLogger(__name__)


def place_order(store, session, user_id, products, quantity, purchased_on=None):
    """
    Records an order and returns its id.

    The order's userId is whatever the caller sent, while the order id is
    appended to the session user's own order list.
    """
    require_session(session)
    order = Order(userId=user_id, products=products, quantity=quantity,
                  purchasedOn=purchased_on)
    with store.lock:
        store.orders.append(order)
        session.user.orders.append(order.id)
    logger.info(f"Order {order.id} placed by user {session.user.id} for userId {user_id}")
    return order.id


def list_orders(store, session):
    require_admin(session)
    with store.lock:
        return list(store.orders)
