"""
Portfolio Blueprint - Public site data
Handles: Aggregate portfolio read, visitor tracking, site settings, health
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
