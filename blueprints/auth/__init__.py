"""
Auth Blueprint - Admin authentication
Handles: Login, session verification, logout, password change
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/admin')

from . import routes
