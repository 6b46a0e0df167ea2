# storefront/tokens.py
import datetime

import jwt
from flask import current_app


def issue_token(session):
    """Wraps a session id in a signed, expiring JWT handed to the client."""
    expires_at = session.expires_at or (
        datetime.datetime.now(datetime.timezone.utc) + current_app.config['TOKEN_EXPIRATION_DELTA']
    )
    payload = {'sid': session.id, 'user_id': session.user.id, 'exp': expires_at}
    return jwt.encode(payload, current_app.config['SECRET_KEY'], algorithm="HS256")


def read_session_id(token):
    """
    Returns the session id carried by token. Raises jwt.InvalidTokenError
    (or its subclass ExpiredSignatureError) when the token can't be trusted.
    """
    data = jwt.decode(token, current_app.config['SECRET_KEY'], algorithms=["HS256"])
    session_id = data.get('sid')
    if not session_id:
        raise jwt.InvalidTokenError('Token payload invalid (missing sid)')
    return session_id
