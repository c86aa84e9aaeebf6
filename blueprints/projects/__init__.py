"""
Projects Blueprint - Portfolio project management
Handles: Public listing, admin create/update/delete with image uploads
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/api/projects')

from . import routes
