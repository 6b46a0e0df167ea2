# storefront/orders.py
from flask import Blueprint, jsonify, g
from . import get_store, request_data
from .core import ordering
from .decorators import with_session

orders_bp = Blueprint('orders', __name__)


@orders_bp.route('', methods=['POST'])
@with_session
def create_order():
    """Records an order for the logged-in caller. Nothing is charged or shipped."""
    data = request_data()
    order_id = ordering.place_order(
        get_store(),
        g.current_session,
        data.get('userId'),
        data.get('products'),
        data.get('quantity'),
        purchased_on=data.get('purchasedOn'),
    )
    return jsonify({'message': 'Your order has been placed successfully.', 'orderId': order_id}), 201


@orders_bp.route('', methods=['GET'])
@with_session
def get_all_orders():
    orders = ordering.list_orders(get_store(), g.current_session)
    return jsonify([order.to_dict() for order in orders]), 200
