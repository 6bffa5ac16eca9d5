import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Backend Settings
    _backend_url = os.environ.get('BACKEND_URL')
    BACKEND_URL = _backend_url or 'http://localhost:8000'
    # No timeout: a request waits until the network layer gives up
    BACKEND_TIMEOUT = None

    # Status message lifetime (seconds)
    STATUS_CLEAR_SECONDS = 1.5
    DELETE_STATUS_CLEAR_SECONDS = 1.2

    # JSON Settings
    JSON_AS_ASCII = False


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing'
    BACKEND_URL = 'http://backend.test'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
