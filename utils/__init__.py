"""
Utils Package - Centralized utility modules initialization

Modules that touch the database (data, visitors, assets) are imported
directly by their callers.
"""

from .errors import (
    PortfolioError,
    ValidationError,
    AuthenticationRequired,
    InvalidCredentials,
    NotFound,
    Conflict,
    UploadFailed,
    InternalError
)
from .decorators import admin_required, api_errors, best_effort
from .helpers import (
    get_payload,
    parse_technologies,
    parse_flag,
    parse_active,
    parse_leading_int
)
from .security import get_client_ip, hash_password, verify_password
from .sessions import AdminIdentity, SessionManager

__all__ = [
    # Errors
    'PortfolioError',
    'ValidationError',
    'AuthenticationRequired',
    'InvalidCredentials',
    'NotFound',
    'Conflict',
    'UploadFailed',
    'InternalError',

    # Decorators
    'admin_required',
    'api_errors',
    'best_effort',

    # Helpers
    'get_payload',
    'parse_technologies',
    'parse_flag',
    'parse_active',
    'parse_leading_int',

    # Security
    'get_client_ip',
    'hash_password',
    'verify_password',

    # Sessions
    'AdminIdentity',
    'SessionManager'
]
