# config.py
import os
import datetime
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(basedir, '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)


class Config:
    """Base configuration."""
    # Signs the session tokens handed out at login. Set via environment in production!
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a-very-insecure-fallback-key-for-dev-only'

    # Lifetime of a session token issued by POST /users/login
    TOKEN_EXPIRATION_DELTA = datetime.timedelta(
        hours=int(os.environ.get('TOKEN_EXPIRATION_HOURS', '1'))
    )

    # Frontend URL allowed by CORS ('*' when unset)
    FRONTEND_URL = os.environ.get('FRONTEND_URL', '*')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Load a demo admin account and sample products into the fresh store
    SEED_DATA = os.environ.get('SEED_DATA', '').lower() in ('1', 'true', 'yes')
    # Admin account created when SEED_DATA is on
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@example.com')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin')

    PORT = int(os.environ.get('PORT', '3000'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SEED_DATA = os.environ.get('SEED_DATA', 'true').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    TOKEN_EXPIRATION_DELTA = datetime.timedelta(minutes=5)
    LOG_LEVEL = 'WARNING'
    SEED_DATA = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


# Dictionary to access config classes by name
config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig  # Default to Development if FLASK_ENV is not set
}
