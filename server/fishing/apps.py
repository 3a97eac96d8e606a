"""
Fishing app configuration.
"""
from django.apps import AppConfig


class FishingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'fishing'
    verbose_name = 'Fishing Log'

    def ready(self):
        """Import signals when app is ready."""
        import fishing.signals  # noqa
