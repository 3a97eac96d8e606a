# species/services.py
import logging
from decimal import Decimal
from django.db import transaction
from species.models import FishSpecies
from species.reference_data import FISH_SPECIES, FISH_SPECIES_FIELDS

logger = logging.getLogger(__name__)


class FishSpeciesSeeder:
    """One-time loader for the fish species reference catalog"""

    @classmethod
    def build_species(cls):
        """Build unsaved FishSpecies instances from the reference list"""
        species = []
        for row in FISH_SPECIES:
            data = dict(zip(FISH_SPECIES_FIELDS, row))
            data['min_size'] = Decimal(data['min_size'])
            data['max_size'] = Decimal(data['max_size'])
            species.append(FishSpecies(is_active=True, **data))
        return species

    @classmethod
    def seed(cls) -> int:
        """
        Insert the reference species when the table is empty.

        Any existing row means the catalog has already been seeded (or is
        being curated by hand), so nothing is merged or updated.

        Returns:
            Number of species inserted
        """
        with transaction.atomic():
            if FishSpecies.objects.exists():
                logger.info("Fish species already seeded, skipping")
                return 0

            created = FishSpecies.objects.bulk_create(cls.build_species())

        logger.info(f"Seeded {len(created)} fish species")
        return len(created)
