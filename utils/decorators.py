"""
Decorators Module - Authentication gate and error policy decorators
"""

from functools import wraps
from flask import current_app
from flask_login import current_user
from werkzeug.exceptions import HTTPException
from .errors import AuthenticationRequired, InternalError, PortfolioError


def admin_required(f):
    """Decorator to require a valid admin session token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthenticationRequired()
        return f(*args, **kwargs)
    return decorated_function


def api_errors(failure_message):
    """
    Map unexpected failures of an API handler to a generic InternalError.

    API errors and HTTP exceptions pass through untouched. Anything else is
    logged with its traceback, the database session is rolled back and the
    client only sees ``failure_message``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except (PortfolioError, HTTPException):
                raise
            except Exception as e:
                from extensions import db
                current_app.logger.exception(f"{failure_message}: {str(e)}")
                db.session.rollback()
                raise InternalError(failure_message)
        return decorated_function
    return decorator


def best_effort(description, rollback=False):
    """
    Mark a detached side effect whose failure must never reach the caller.

    Failures are logged as warnings and the call returns None.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except Exception as e:
                current_app.logger.warning(f"{description}: {str(e)}")
                if rollback:
                    from extensions import db
                    db.session.rollback()
                return None
        decorated_function.best_effort = True
        return decorated_function
    return decorator
