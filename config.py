import os
from datetime import timedelta

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

DEFAULT_CORS_ORIGINS = [
    'http://localhost:3000',
    'http://127.0.0.1:3000',
    'http://localhost:5500',
    'http://127.0.0.1:5500',
    'http://localhost:5000',
]


def _env_origins():
    raw = os.environ.get('FRONTEND_URL', '')
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    JSON_AS_ASCII = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///' + os.path.join(BASE_DIR, 'portfolio.db')
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin Settings
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'password123')
    SESSION_HEADER = 'Authorization'
    SESSION_LIFETIME = timedelta(hours=24)

    # Visitor counting: 'every-visit' or 'unique-ip'
    VISITOR_COUNT_MODE = os.environ.get('VISITOR_COUNT_MODE', 'every-visit')

    # Upload Settings
    MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5MB per image
    MAX_CONTENT_LENGTH = 8 * 1024 * 1024
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'uploads'))
    FRONTEND_FOLDER = os.environ.get('FRONTEND_FOLDER', os.path.join(BASE_DIR, 'frontend'))

    # Cloudinary Settings
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD') or os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_KEY') or os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_SECRET') or os.environ.get('CLOUDINARY_API_SECRET')

    # CORS Settings
    CORS_ORIGINS = DEFAULT_CORS_ORIGINS + _env_origins()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')
    VISITOR_COUNT_MODE = os.environ.get('VISITOR_COUNT_MODE', 'unique-ip')


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing pool settings that SQLite's StaticPool rejects.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'password123'
    VISITOR_COUNT_MODE = 'every-visit'
    CLOUDINARY_CLOUD_NAME = 'demo'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(env=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = env or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
