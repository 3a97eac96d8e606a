"""
Species app configuration.
"""
import logging
from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SpeciesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'species'
    verbose_name = 'Fish Species'

    def ready(self):
        """Seed reference data on startup when enabled."""
        from django.conf import settings
        if getattr(settings, 'AUTO_SEED_REFERENCE_DATA', False):
            self._seed_reference_data()

    def _seed_reference_data(self):
        """Seed colors and species if their tables exist."""
        # Import here to avoid AppRegistryNotReady errors
        from django.db import connection
        from fishsmart.seeding import seed_reference_data_safely

        # Only run after all migrations are complete
        try:
            table_names = connection.introspection.table_names()
        except Exception as e:
            logger.warning(f"Skipping reference data seeding, database unavailable: {e}")
            return

        if 'fish_species' in table_names and 'color_vars' in table_names:
            seed_reference_data_safely()
