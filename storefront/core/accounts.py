# storefront/core/accounts.py
import logging

from ..errors import AuthFailure, DuplicateEmail, NotFound
from ..models import User
from .gate import require_admin, require_session

logger = logging.getLogger(__name__)

FORBIDDEN = 'Unauthorized. Action forbidden'


def register(store, email, password, is_admin=None):
    """Creates a user unless the email is already taken. Returns the new user id."""
    with store.lock:
        if store.find_user_by_email(email) is not None:
            raise DuplicateEmail()
        user = User(email=email, password=password, isAdmin=bool(is_admin))
        store.users.append(user)
    logger.info(f"User {email} registered (admin={user.isAdmin}).")
    return user.id


def login(store, email, password, session_id=None):
    """
    Opens a session for the user matching email and password exactly.

    A failed attempt closes the session the caller presented (if any), so a
    client that fails to log in is left anonymous.
    """
    with store.lock:
        user = next(
            (u for u in store.users if u.email == email and u.password == password),
            None,
        )
        if user is None:
            if session_id:
                store.sessions.close(session_id)
            logger.warning(f"Failed login attempt for email: {email}")
            raise AuthFailure()
        session = store.sessions.open(user)
    logger.info(f"User {email} logged in successfully.")
    return session


def list_users(store, session):
    require_admin(session, FORBIDDEN)
    with store.lock:
        return list(store.users)


def promote_user(store, session, user_id):
    """Grants admin rights to user_id. Promoting an admin again is a no-op."""
    require_admin(session, FORBIDDEN)
    with store.lock:
        user = store.find_user(user_id)
        if user is None:
            raise NotFound('User not found')
        user.isAdmin = True
    logger.info(f"Admin {session.user.id} promoted user {user_id}")
    return user


def whoami(store, session):
    require_session(session)
    return session.user
