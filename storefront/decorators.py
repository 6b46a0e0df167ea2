# storefront/decorators.py
import jwt
from functools import wraps
from flask import request, current_app, g
from . import get_store
from .tokens import read_session_id


def bearer_token():
    """Returns the token from 'Authorization: Bearer <token>', or None."""
    auth_header = request.headers.get('Authorization')
    if auth_header and auth_header.startswith('Bearer '):
        parts = auth_header.split(" ")
        if len(parts) == 2 and parts[1]:
            return parts[1]
    return None


def with_session(f):
    """
    Decorator resolving the bearer token to a Session and attaching it to
    flask.g.current_session. Anonymous, expired and revoked tokens all
    resolve to None; the core decides whether the operation needs a session.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.current_session = None
        g.session_id = None
        token = bearer_token()

        if token:
            try:
                g.session_id = read_session_id(token)
                g.current_session = get_store().sessions.resolve(g.session_id)
            except jwt.ExpiredSignatureError:
                current_app.logger.info("Expired token received")
            except jwt.InvalidTokenError as e:
                current_app.logger.warning(f"Invalid token received: {e}")

        return f(*args, **kwargs)
    return decorated_function
