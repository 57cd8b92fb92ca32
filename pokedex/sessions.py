"""
Server-side Sessions

The browser only holds a signed, opaque token. Session state lives in a
SessionStore keyed by that token, with an inactivity deadline taken from
PERMANENT_SESSION_LIFETIME.
"""

import logging
import secrets
import threading
import time

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class SessionStore:
    """Storage capability used by StoreSessionInterface."""

    def get(self, token):
        raise NotImplementedError

    def set(self, token, state, lifetime):
        raise NotImplementedError

    def destroy(self, token):
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """In-process store; entries expire ``lifetime`` after their last write."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._entries = {}
        self._lock = threading.Lock()

    def get(self, token):
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            deadline, state = entry
            if deadline <= self._clock():
                del self._entries[token]
                return None
            return dict(state)

    def set(self, token, state, lifetime):
        deadline = self._clock() + lifetime.total_seconds()
        with self._lock:
            self._entries[token] = (deadline, dict(state))
            self._purge_expired()

    def destroy(self, token):
        with self._lock:
            self._entries.pop(token, None)

    def _purge_expired(self):
        now = self._clock()
        for token in [t for t, (deadline, _) in self._entries.items() if deadline <= now]:
            del self._entries[token]

    def __len__(self):
        with self._lock:
            return len(self._entries)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its token and whether it changed."""

    def __init__(self, initial=None, token=None, new=False):
        def on_update(self):
            self.modified = True
            self.accessed = True

        super().__init__(initial, on_update)
        self.token = token
        self.new = new
        self.modified = False
        self.accessed = False

    def __getitem__(self, key):
        self.accessed = True
        return super().__getitem__(key)

    def get(self, key, default=None):
        self.accessed = True
        return super().get(key, default)


class StoreSessionInterface(SessionInterface):
    """Flask session interface backed by a SessionStore."""

    salt = 'pokedex-session'

    def __init__(self, store):
        self.store = store

    def _signer(self, app):
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt)

    def _new_session(self):
        return ServerSideSession(token=secrets.token_urlsafe(32), new=True)

    def open_session(self, app, request):
        signer = self._signer(app)
        if signer is None:
            return None

        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return self._new_session()

        try:
            token = signer.unsign(cookie).decode('utf-8')
        except BadSignature:
            logger.warning('Rejected session cookie with a bad signature')
            return self._new_session()

        state = self.store.get(token)
        if state is None:
            return self._new_session()
        return ServerSideSession(state, token=token)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.accessed:
            response.vary.add('Cookie')

        if not session:
            if session.modified and not session.new:
                self.store.destroy(session.token)
                response.delete_cookie(name, domain=domain, path=path)
            return

        # Every write pushes the inactivity deadline forward
        self.store.set(session.token, dict(session), app.permanent_session_lifetime)

        if session.new or self.should_set_cookie(app, session):
            value = self._signer(app).sign(session.token).decode('utf-8')
            response.set_cookie(
                name,
                value,
                expires=self.get_expiration_time(app, session),
                httponly=self.get_cookie_httponly(app),
                domain=domain,
                path=path,
                secure=self.get_cookie_secure(app),
                samesite=self.get_cookie_samesite(app),
            )
