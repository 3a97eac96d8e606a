"""
Test settings for the Fish-Smart members project.
"""
from .base import *

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

AUTO_SEED_REFERENCE_DATA = False

# Keep test output quiet and off the rotating file handler
LOGGING['root']['handlers'] = ['console']
for logger_config in LOGGING['loggers'].values():
    logger_config['handlers'] = ['console']
    logger_config['level'] = 'WARNING'
