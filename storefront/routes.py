from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)


@main_bp.route('/hello')
def hello():
    """Simple health check or hello route."""
    return jsonify({"message": "Hello from the Storefront API!"})
