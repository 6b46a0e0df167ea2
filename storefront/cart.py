# storefront/cart.py
from flask import Blueprint, jsonify, g
from . import get_store, request_data
from .core import cart
from .decorators import with_session

cart_bp = Blueprint('cart', __name__)


@cart_bp.route('/add', methods=['POST'])
@with_session
def add_to_cart():
    data = request_data()
    cart.add_item(get_store(), g.current_session, data.get('productId'), data.get('quantity'))
    return jsonify({'message': 'Product added to cart.'}), 200


@cart_bp.route('', methods=['GET'])
@with_session
def get_cart():
    lines = cart.get_cart(get_store(), g.current_session)
    return jsonify([line.to_dict() for line in lines]), 200


@cart_bp.route('/quantity/<string:product_id>', methods=['PUT'])
@with_session
def update_quantity(product_id):
    data = request_data()
    cart.set_quantity(get_store(), g.current_session, product_id, data.get('quantity'))
    return jsonify({'message': 'Cart item quantity updated.'}), 200


@cart_bp.route('/remove/<string:product_id>', methods=['DELETE'])
@with_session
def remove_from_cart(product_id):
    cart.remove_item(get_store(), g.current_session, product_id)
    return jsonify({'message': 'Product removed from cart'}), 200


@cart_bp.route('/subtotal', methods=['GET'])
@with_session
def get_subtotal():
    amount = cart.subtotal(get_store(), g.current_session)
    return jsonify({'message': cart.format_subtotal(amount), 'subtotal': amount}), 200


@cart_bp.route('/total', methods=['GET'])
@with_session
def get_total():
    amount = cart.total(get_store(), g.current_session)
    return jsonify({'message': cart.format_total(amount), 'total': f'{amount:.2f}'}), 200
