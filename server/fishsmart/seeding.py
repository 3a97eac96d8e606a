"""
Reference data seeding run by the release step (and optionally at startup).

Color variables and fish species are loaded under a single-writer lock so
two instances starting against the same database cannot both seed.
"""
import logging
from contextlib import contextmanager
from django.db import connection, transaction

logger = logging.getLogger(__name__)

# Arbitrary application-wide key for pg_advisory_xact_lock
REFERENCE_DATA_LOCK_ID = 48151623


@contextmanager
def reference_data_lock():
    """
    Hold a transaction-scoped lock for the duration of the block.

    PostgreSQL gets an advisory lock that is released at commit or rollback.
    Other engines rely on the enclosing transaction alone.
    """
    with transaction.atomic():
        if connection.vendor == 'postgresql':
            with connection.cursor() as cursor:
                cursor.execute('SELECT pg_advisory_xact_lock(%s)', [REFERENCE_DATA_LOCK_ID])
        yield


def run_reference_seeders(css_path=None):
    """
    Seed color variables, then fish species.

    Returns:
        Dict of inserted row counts keyed by seeder
    """
    from species.services import FishSpeciesSeeder
    from theme.services import ColorVarSeeder

    logger.info("Seeding reference data...")
    with reference_data_lock():
        colors = ColorVarSeeder.seed_from_file(css_path)
        species = FishSpeciesSeeder.seed()
    logger.info("Reference data seeding complete")

    return {'color_vars': colors, 'fish_species': species}


def seed_reference_data_safely(css_path=None):
    """Run the seeders, logging failures instead of raising them."""
    try:
        return run_reference_seeders(css_path)
    except Exception as e:
        logger.error(f"An error occurred while seeding reference data: {e}", exc_info=True)
        return None
