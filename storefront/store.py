# storefront/store.py
"""
In-memory state for the storefront.

All records live in plain lists owned by a ``ShopStore``; nothing is persisted
and everything is lost when the process exits. The store's ``lock`` serializes
every core operation, so threaded servers never observe a half-applied
mutation.
"""
import threading
import uuid
from datetime import datetime, timezone

from .models import Session


class SessionRegistry:
    """
    Sessions keyed by session id. One entry per successful login.

    Sessions live for ``lifetime`` (a timedelta, or forever when None).
    Expired entries are dropped when looked up and swept on every login.
    """

    def __init__(self, lifetime=None):
        self.lifetime = lifetime
        self._sessions = {}

    def open(self, user):
        now = datetime.now(timezone.utc)
        self.evict_expired(now)
        expires_at = now + self.lifetime if self.lifetime is not None else None
        session = Session(uuid.uuid4().hex, user, expires_at=expires_at)
        self._sessions[session.id] = session
        return session

    def close(self, session_id):
        """Drops a session. Returns True if it existed."""
        return self._sessions.pop(session_id, None) is not None

    def resolve(self, session_id):
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is not None and session.is_expired():
            self.close(session_id)
            return None
        return session

    def evict_expired(self, now=None):
        """Drops every expired session. Returns how many were dropped."""
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for session_id in expired:
            del self._sessions[session_id]
        return len(expired)

    def __len__(self):
        return len(self._sessions)


class ShopStore:
    def __init__(self, session_lifetime=None):
        self.users = []
        self.products = []
        self.orders = []
        self.sessions = SessionRegistry(session_lifetime)
        self.lock = threading.RLock()

    def find_user(self, user_id):
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email):
        return next((u for u in self.users if u.email == email), None)

    def find_product(self, product_id):
        return next((p for p in self.products if p.id == product_id), None)
