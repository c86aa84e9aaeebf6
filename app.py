"""
Portfolio CMS - Main Application Entry Point
Application Factory Pattern for a modular JSON API

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, login_manager, sessions, assets
from utils.data import ensure_defaults
from utils.errors import PortfolioError, NotFound, ValidationError

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.dashboard import dashboard_bp
from blueprints.messages import messages_bp
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp
from blueprints.projects import projects_bp
from blueprints.sites import sites_bp
from blueprints.skills import skills_bp

CORS_ALLOW_HEADERS = 'Content-Type, Authorization'
CORS_ALLOW_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'


def create_app(config_name=None, config_overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        config_overrides (dict): Extra settings applied after the config class (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if config_overrides:
        app.config.update(config_overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)
    sessions.init_app(app)
    assets.init_app(app)

    # Create tables and seed the admin account and settings
    with app.app_context():
        try:
            from sqlalchemy import text
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            ensure_defaults()
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(skills_bp)
    app.register_blueprint(sites_bp)
    app.register_blueprint(messages_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(portfolio_bp)
    # Catch-all routes last
    app.register_blueprint(pages_bp)


def _is_api_request():
    return request.path == '/api' or request.path.startswith('/api/')


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(PortfolioError)
    def portfolio_error(e):
        if e.status_code >= 500:
            app.logger.error(f"Server Error: {e.message}")
        return e.to_response()

    @app.errorhandler(413)
    def file_too_large(e):
        return ValidationError('File too large. Maximum size is 5MB.').to_response()

    @app.errorhandler(404)
    def page_not_found(e):
        if _is_api_request():
            return NotFound('API endpoint not found').to_response()
        return NotFound().to_response()

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'success': False, 'error': 'Internal server error'}), 500

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'success': False, 'error': e.description or e.name}), e.code


def register_hooks(app):
    """Register request/response hooks"""

    @app.before_request
    def answer_preflight():
        """Answer CORS preflight requests before routing"""
        if request.method == 'OPTIONS':
            return app.make_default_options_response()

    @app.after_request
    def add_cors_and_security_headers(response):
        """Add CORS headers for allowed origins and security headers to all responses"""
        origin = request.headers.get('Origin')
        if origin and origin in app.config.get('CORS_ORIGINS', []):
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Credentials'] = 'true'
            response.headers['Access-Control-Allow-Headers'] = CORS_ALLOW_HEADERS
            response.headers['Access-Control-Allow-Methods'] = CORS_ALLOW_METHODS
            response.vary.add('Origin')
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
