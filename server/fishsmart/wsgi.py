"""
WSGI config for the Fish-Smart members project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'fishsmart.settings.development')

application = get_wsgi_application()
