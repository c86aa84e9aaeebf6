"""
Pages Blueprint - Static frontend
Handles: Site files, legacy uploads and the single-page fallback
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
