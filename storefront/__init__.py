# storefront/__init__.py
import os
from flask import Flask, current_app, jsonify, request
from flask_cors import CORS
from config import config_by_name
from .errors import ShopError
from .store import ShopStore


def get_store():
    """Returns the in-memory store owned by the current app."""
    return current_app.extensions['storefront']


def request_data():
    """The request's JSON object body, or {} when absent or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def handle_shop_error(error):
    """Renders core errors as {'message', 'error'} with the error's status."""
    current_app.logger.warning(f"{request.method} {request.path} -> {error.status_code} {error.kind}: {error.message}")
    return jsonify(error.to_dict()), error.status_code


def create_app(config_name=None):
    """Application Factory Function"""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'default')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    # Keep responses in insertion order (id, name, ... like the original API)
    app.json.sort_keys = False

    # app.logger is the 'storefront' logger, so core module loggers
    # (storefront.core.*) propagate to Flask's handler and share its level.
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    store = ShopStore(session_lifetime=app.config['TOKEN_EXPIRATION_DELTA'])
    app.extensions['storefront'] = store
    if app.config.get('SEED_DATA'):
        from .seed import seed_store
        seed_store(store, app.config['ADMIN_EMAIL'], app.config['ADMIN_PASSWORD'])

    CORS(
        app,
        origins=app.config.get('FRONTEND_URL', '*'),
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"]
    )

    app.register_error_handler(ShopError, handle_shop_error)

    # Import and register Blueprints
    from .auth import users_bp
    from .products import products_bp
    from .orders import orders_bp
    from .cart import cart_bp
    from .routes import main_bp

    app.register_blueprint(main_bp, url_prefix='/api')
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(products_bp, url_prefix='/products')
    app.register_blueprint(orders_bp, url_prefix='/orders')
    app.register_blueprint(cart_bp, url_prefix='/cart')

    app.logger.info(f"Storefront app created with config '{config_name}'")
    return app
