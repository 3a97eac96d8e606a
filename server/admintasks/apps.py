"""
Admin tasks app configuration.
"""
from django.apps import AppConfig


class AdminTasksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'admintasks'
    verbose_name = 'Admin Tasks'
