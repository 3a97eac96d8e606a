"""
Production settings for the Fish-Smart members project.
"""
from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

# Security Settings
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Reference data is seeded by the release step, never at boot
AUTO_SEED_REFERENCE_DATA = False

# Logging - less verbose in production
LOGGING['loggers']['django']['level'] = 'WARNING'
LOGGING['loggers']['fishsmart']['level'] = 'INFO'
LOGGING['loggers']['species']['level'] = 'INFO'
LOGGING['loggers']['theme']['level'] = 'INFO'
LOGGING['loggers']['fishing']['level'] = 'INFO'
LOGGING['loggers']['billing']['level'] = 'INFO'

# Static files
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.ManifestStaticFilesStorage',
    },
}

# Admin site security
ADMIN_URL = os.getenv('ADMIN_URL', 'admin/')  # Can use custom admin URL for security
