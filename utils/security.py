"""
Security Module - Client IP resolution and password hashing
"""

from flask import request
from werkzeug.security import generate_password_hash, check_password_hash

MIN_PASSWORD_LENGTH = 6


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR', '')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR')


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


__all__ = [
    'MIN_PASSWORD_LENGTH',
    'get_client_ip',
    'hash_password',
    'verify_password'
]
