"""
Sites Blueprint - External profile and site links
"""

from flask import Blueprint

sites_bp = Blueprint('sites', __name__, url_prefix='/api/sites')

from . import routes
