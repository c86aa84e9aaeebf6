"""
Sessions Module - In-memory admin session store

Tokens map to the identity of the admin who logged in. Each token expires a
fixed lifetime after creation; use does not renew it. A single timer sweeps
expired tokens, and validation also checks the deadline. State lives in the
process only and is lost on restart.
"""

import secrets
import threading
import time
from datetime import timedelta
from flask_login import UserMixin


class AdminIdentity(UserMixin):
    """Identity attached to a request by a valid session token"""

    def __init__(self, admin_id, username):
        self.id = admin_id
        self.username = username

    def to_dict(self):
        return {'id': self.id, 'username': self.username}

    def __eq__(self, other):
        return isinstance(other, AdminIdentity) and other.to_dict() == self.to_dict()

    def __repr__(self):
        return f'<AdminIdentity {self.username}>'


class SessionManager:
    """Owns the token mapping and a single expiry sweeper"""

    def __init__(self, app=None, clock=time.time):
        self.clock = clock
        self.lifetime = timedelta(hours=24)
        self.header = 'Authorization'
        self._sessions = {}  # token -> (identity, expires_at)
        self._lock = threading.Lock()
        self._sweeper = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.lifetime = app.config.get('SESSION_LIFETIME', self.lifetime)
        self.header = app.config.get('SESSION_HEADER', self.header)
        app.extensions['sessions'] = self

    def create(self, admin):
        """Create a session for an Admin record and return its token"""
        token = secrets.token_bytes(16).hex()
        seconds = self.lifetime.total_seconds()
        identity = AdminIdentity(admin.id, admin.username)
        self.prune()
        with self._lock:
            self._sessions[token] = (identity, self.clock() + seconds)
        self._schedule_sweep(seconds)
        return token

    def validate(self, token):
        """Return the AdminIdentity for a live token, otherwise None"""
        if not token:
            return None
        entry = self._sessions.get(token)
        if entry is None:
            return None
        identity, expires_at = entry
        if self.clock() >= expires_at:
            self.destroy(token)
            return None
        return identity

    def destroy(self, token):
        with self._lock:
            self._sessions.pop(token, None)

    def prune(self):
        """Drop every session past its deadline"""
        now = self.clock()
        with self._lock:
            expired = [token for token, (_, expires_at) in self._sessions.items() if now >= expires_at]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def _schedule_sweep(self, delay):
        # At most one sweeper thread is pending at a time
        with self._lock:
            if self._sweeper is not None:
                return
            timer = threading.Timer(delay, self._sweep)
            timer.daemon = True
            self._sweeper = timer
        timer.start()

    def _sweep(self):
        with self._lock:
            self._sweeper = None
        self.prune()
        with self._lock:
            deadlines = [expires_at for _, expires_at in self._sessions.values()]
        if deadlines:
            self._schedule_sweep(max(min(deadlines) - self.clock(), 1))

    def stop(self):
        """Cancel the pending sweeper, if any"""
        with self._lock:
            timer, self._sweeper = self._sweeper, None
        if timer is not None:
            timer.cancel()

    def token_from_request(self, request):
        """Raw token from the session header; a 'Bearer ' prefix is tolerated"""
        token = request.headers.get(self.header, '').strip()
        if token.lower().startswith('bearer '):
            token = token[7:].strip()
        return token or None

    def __len__(self):
        return len(self._sessions)


__all__ = ['AdminIdentity', 'SessionManager']
