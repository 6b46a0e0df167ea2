# storefront/products.py
from flask import Blueprint, jsonify, g
from . import get_store, request_data
from .core import catalog
from .decorators import with_session

products_bp = Blueprint('products', __name__)


@products_bp.route('', methods=['POST'])
@with_session
def create_product():
    data = request_data()
    product_id = catalog.create_product(
        get_store(),
        g.current_session,
        data.get('name'),
        data.get('description'),
        data.get('price'),
        is_active=data.get('isActive'),
    )
    return jsonify({'message': 'Product created successfully.', 'productId': product_id}), 201


@products_bp.route('', methods=['GET'])
def list_products():
    return jsonify([p.to_dict() for p in catalog.list_products(get_store())]), 200


@products_bp.route('/active', methods=['GET'])
def list_active_products():
    return jsonify([p.to_dict() for p in catalog.list_active_products(get_store())]), 200


@products_bp.route('/<string:product_id>', methods=['GET'])
def get_product(product_id):
    return jsonify(catalog.get_product(get_store(), product_id).to_dict()), 200


@products_bp.route('/<string:product_id>', methods=['PUT'])
@with_session
def update_product(product_id):
    data = request_data()
    catalog.update_product(
        get_store(),
        g.current_session,
        product_id,
        name=data.get('name'),
        description=data.get('description'),
        price=data.get('price'),
        is_active=data.get('isActive', catalog.MISSING),
    )
    return jsonify({'message': 'Product updated successfully.'}), 200


@products_bp.route('/<string:product_id>/archive', methods=['PUT'])
@with_session
def archive_product(product_id):
    catalog.archive_product(get_store(), g.current_session, product_id)
    return jsonify({'message': 'Product archived successfully.'}), 200
