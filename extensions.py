"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Initialize extensions without binding to app
db = SQLAlchemy()
login_manager = LoginManager()
# Identity comes from the session header only, never from cookies
login_manager.session_protection = None

from utils.sessions import SessionManager  # noqa: E402
from utils.assets import AssetStore  # noqa: E402

sessions = SessionManager()
assets = AssetStore()


@login_manager.request_loader
def load_admin_from_request(request):
    """Resolve the current admin from the session token header"""
    return sessions.validate(sessions.token_from_request(request))


@login_manager.unauthorized_handler
def unauthorized():
    from utils.errors import AuthenticationRequired
    raise AuthenticationRequired()


__all__ = ['db', 'login_manager', 'sessions', 'assets']
