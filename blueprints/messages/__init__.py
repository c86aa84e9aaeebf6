"""
Messages Blueprint - Contact form messages
Handles: Public submission, admin inbox listing and deletion
"""

from flask import Blueprint

messages_bp = Blueprint('messages', __name__, url_prefix='/api/messages')

from . import routes
