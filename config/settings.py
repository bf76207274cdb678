"""
Configuration settings for AI Readiness Assessment
"""

import os
from datetime import timedelta


def _optional_int(name):
    value = os.environ.get(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Base configuration"""
    # App
    APP_NAME = "AI Readiness Assessment"
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Rate limiting
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', "100 per minute")
    RATELIMIT_STORAGE_URL = os.environ.get('REDIS_URL', 'memory://')

    # Session (the assessment snapshot lives in the signed session cookie)
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Assessment engine
    # Seed for randomized expected impact; unset keeps impact derived from priority
    ASSESSMENT_IMPACT_SEED = _optional_int('ASSESSMENT_IMPACT_SEED')
    # Keep answered questions whose dependency no longer holds
    ASSESSMENT_RETAIN_ANSWERED = os.environ.get('ASSESSMENT_RETAIN_ANSWERED', 'true').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True

    # Ensure secret key is set in production
    SECRET_KEY = os.environ.get('SECRET_KEY')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    RATELIMIT_ENABLED = False
    ASSESSMENT_IMPACT_SEED = None
    ASSESSMENT_RETAIN_ANSWERED = True


# Config mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get config based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
