# storefront/seed.py
"""Demo data loaded into a fresh store when SEED_DATA is enabled."""
import logging

from .core import accounts, catalog
from .errors import DuplicateEmail

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {'name': 'Widget Pro', 'description': 'A premium widget', 'price': 29.99},
    {'name': 'Mega Cable', 'description': '10ft braided USB-C', 'price': 12.5},
]


def seed_store(store, admin_email, admin_password):
    """
    Creates the admin account and the sample products if they are missing.

    Safe to call again on a store that was already seeded: existing accounts
    and products (matched by email and name) are left as they are.
    """
    created = []
    try:
        accounts.register(store, admin_email, admin_password, is_admin=True)
        created.append(admin_email)
    except DuplicateEmail:
        pass

    session = accounts.login(store, admin_email, admin_password)
    try:
        existing = {p.name for p in catalog.list_products(store)}
        for sample in SAMPLE_PRODUCTS:
            if sample['name'] not in existing:
                catalog.create_product(store, session, **sample)
                created.append(sample['name'])
    finally:
        store.sessions.close(session.id)

    logger.info(f"Seeded: {', '.join(created) if created else 'nothing new'}")
    return created
