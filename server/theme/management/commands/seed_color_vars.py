"""
Management command to load site colors from a stylesheet.
Only colors whose names are not stored yet are inserted.
"""
from django.core.management.base import BaseCommand
from theme.services import ColorVarSeeder


class Command(BaseCommand):
    help = 'Seeds color variables from the var() fallbacks in a stylesheet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--css',
            dest='css_path',
            default=None,
            help='Stylesheet to read (default: COLOR_VARS_CSS_PATH)',
        )

    def handle(self, *args, **options):
        created = ColorVarSeeder.seed_from_file(options['css_path'])

        if created:
            self.stdout.write(self.style.SUCCESS(f'Added {created} color variable(s)'))
        else:
            self.stdout.write('All color variables already present')
