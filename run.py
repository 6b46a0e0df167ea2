# run.py
import os
from storefront import create_app, get_store

config_name = os.getenv('FLASK_ENV') or 'default'
app = create_app(config_name)


# --- Flask CLI Commands ---
@app.shell_context_processor
def make_shell_context():
    """Makes variables available in the 'flask shell' context."""
    from storefront import models
    from storefront.core import accounts, cart, catalog, ordering
    return {'get_store': get_store, 'models': models, 'accounts': accounts,
            'catalog': catalog, 'cart': cart, 'ordering': ordering, 'app': app}


if __name__ == '__main__':
    # Use app.run() for development only. Use Gunicorn/WSGI for production.
    # The reloader would start a second process with its own empty store.
    is_production = os.getenv('FLASK_ENV') == 'production'
    if not is_production:
        app.run(host='0.0.0.0', port=app.config['PORT'],
                debug=app.config.get('DEBUG', False),
                use_reloader=False)
