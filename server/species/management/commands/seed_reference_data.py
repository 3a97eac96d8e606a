"""
Management command to seed all reference data as a release step.

Runs the color variable seeder and then the fish species seeder under a
single-writer lock. Both seeders are idempotent, so the command is safe to
run on every deploy.
"""
from django.core.management.base import BaseCommand
from fishsmart.seeding import run_reference_seeders


class Command(BaseCommand):
    help = 'Seeds color variables and fish species reference data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--css',
            dest='css_path',
            default=None,
            help='Stylesheet to read color variables from (default: COLOR_VARS_CSS_PATH)',
        )

    def handle(self, *args, **options):
        self.stdout.write('Seeding reference data...')

        try:
            counts = run_reference_seeders(options['css_path'])
        except Exception as e:
            self.stdout.write(self.style.ERROR(f'✗ Error: {str(e)}'))
            self.stdout.write(self.style.ERROR('Transaction rolled back - no changes made'))
            raise

        self.stdout.write(self.style.SUCCESS(f"✓ Added {counts['color_vars']} color variable(s)"))
        self.stdout.write(self.style.SUCCESS(f"✓ Added {counts['fish_species']} fish species"))
