# storefront/core/gate.py
"""Authorization predicates consulted before every protected operation."""
import logging

from ..errors import Unauthorized

logger = logging.getLogger(__name__)


def is_authenticated(session):
    return session is not None


def is_admin(session):
    return is_authenticated(session) and bool(session.user.isAdmin)


def require_session(session, message=None):
    if not is_authenticated(session):
        logger.warning("Rejected anonymous call to a protected operation")
        raise Unauthorized(message)
    return session


def require_admin(session, message=None):
    if not is_admin(session):
        logger.warning(
            f"Non-admin access attempt: User ID {session.user.id if session else 'Unknown'}"
        )
        raise Unauthorized(message)
    return session
