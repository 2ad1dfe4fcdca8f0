import os
from datetime import timedelta


def _float_or_none(value):
    return float(value) if value else None


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Gym API
    API_BASE_URL = os.environ.get('API_BASE_URL') or 'http://localhost:8000'
    API_LOGIN_PATH = os.environ.get('API_LOGIN_PATH') or '/user/api/login/'
    API_AUTH_SCHEME = os.environ.get('API_AUTH_SCHEME') or 'Bearer'
    # Seconds; unset means wait for the API as long as it takes
    API_TIMEOUT = _float_or_none(os.environ.get('API_TIMEOUT'))

    # Session
    PERMANENT_SESSION_LIFETIME = timedelta(hours=12)
    REMEMBER_COOKIE_DURATION = PERMANENT_SESSION_LIFETIME

    # Display
    GYM_NAME = os.environ.get('GYM_NAME') or 'Trung Hieu Gym'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    WTF_CSRF_ENABLED = False
    API_BASE_URL = 'http://api.test'
    LOG_LEVEL = 'WARNING'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
