"""
Management command to seed the fish species reference catalog.
Does nothing once any species exists.
"""
from django.core.management.base import BaseCommand
from species.services import FishSpeciesSeeder


class Command(BaseCommand):
    help = 'Seeds the fish species reference catalog into an empty table'

    def handle(self, *args, **options):
        self.stdout.write('Seeding fish species...')

        created = FishSpeciesSeeder.seed()

        if created:
            self.stdout.write(self.style.SUCCESS(f'Created {created} fish species'))
        else:
            self.stdout.write(self.style.WARNING('Fish species already present, nothing to do'))
