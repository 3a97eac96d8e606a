"""
Development settings for the Fish-Smart members project.
"""
from .base import *

# Override DEBUG for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Email backend for development (prints to console)
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Seed colors and species on startup so a fresh database is usable immediately
AUTO_SEED_REFERENCE_DATA = os.getenv('AUTO_SEED_REFERENCE_DATA', 'True') == 'True'

# Disable template caching in development
for template_engine in TEMPLATES:
    template_engine['OPTIONS']['debug'] = True

# Logging - more verbose in development
LOGGING['loggers']['django']['level'] = 'DEBUG'
LOGGING['loggers']['fishsmart']['level'] = 'DEBUG'
LOGGING['loggers']['species']['level'] = 'DEBUG'
LOGGING['loggers']['theme']['level'] = 'DEBUG'
LOGGING['loggers']['fishing']['level'] = 'DEBUG'
LOGGING['loggers']['billing']['level'] = 'DEBUG'
