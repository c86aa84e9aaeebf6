"""
Errors Module - API error taxonomy

Every error carries the HTTP status it maps to and a message that is safe
to show to the client. Details of unexpected failures stay in the logs.
"""

from flask import jsonify


class PortfolioError(Exception):
    """Base class for errors rendered as JSON API responses"""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_response(self):
        return jsonify({'success': False, 'error': self.message}), self.status_code


class ValidationError(PortfolioError):
    status_code = 400
    message = 'Invalid request'


class AuthenticationRequired(PortfolioError):
    status_code = 401
    message = 'Authentication required'


class InvalidCredentials(AuthenticationRequired):
    # Same message for unknown username and wrong password
    message = 'Invalid credentials'


class NotFound(PortfolioError):
    status_code = 404
    message = 'Not found'


class Conflict(PortfolioError):
    status_code = 400
    message = 'Duplicate value'


class UploadFailed(PortfolioError):
    status_code = 500
    message = 'Image upload failed'


class InternalError(PortfolioError):
    status_code = 500


__all__ = [
    'PortfolioError',
    'ValidationError',
    'AuthenticationRequired',
    'InvalidCredentials',
    'NotFound',
    'Conflict',
    'UploadFailed',
    'InternalError'
]
