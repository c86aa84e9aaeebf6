"""
Dashboard Blueprint - Admin dashboard data
Handles: Statistics and recent activity
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api')

from . import routes
