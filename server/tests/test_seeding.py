"""
Tests for reference data seeding commands and the startup hook.
"""
from io import StringIO
from unittest import mock
import pytest
from django.apps import apps
from django.core.management import call_command
from django.db import connection
from django.test import override_settings
from fishsmart.seeding import run_reference_seeders, seed_reference_data_safely
from species.models import FishSpecies
from species.reference_data import FISH_SPECIES
from theme.models import ColorVar

pytestmark = pytest.mark.django_db

STYLESHEET = '.a { color: var(--brand-blue, #1a2b3c); } .b { color: var(--brand-red, #ff0000); }'


@pytest.fixture
def css_file(tmp_path):
    path = tmp_path / 'colors.css'
    path.write_text(STYLESHEET, encoding='utf-8')
    return path


class TestRunReferenceSeeders:

    def test_seeds_colors_then_species(self, css_file):
        counts = run_reference_seeders(css_file)

        assert counts == {'color_vars': 2, 'fish_species': len(FISH_SPECIES)}

    def test_second_run_inserts_nothing(self, css_file):
        run_reference_seeders(css_file)

        assert run_reference_seeders(css_file) == {'color_vars': 0, 'fish_species': 0}
        assert FishSpecies.objects.count() == len(FISH_SPECIES)

    def test_missing_stylesheet_rolls_back(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run_reference_seeders(tmp_path / 'missing.css')

        assert not FishSpecies.objects.exists()

    def test_safe_variant_logs_and_returns_none(self, tmp_path):
        with mock.patch('fishsmart.seeding.logger') as logger:
            result = seed_reference_data_safely(tmp_path / 'missing.css')

        assert result is None
        assert logger.error.called


class TestCommands:

    def test_seed_reference_data(self, css_file):
        out = StringIO()
        call_command('seed_reference_data', css=str(css_file), stdout=out)

        assert 'Added 2 color variable(s)' in out.getvalue()
        assert f'Added {len(FISH_SPECIES)} fish species' in out.getvalue()

    def test_seed_reference_data_propagates_failure(self, tmp_path):
        out = StringIO()
        with pytest.raises(FileNotFoundError):
            call_command('seed_reference_data', css=str(tmp_path / 'missing.css'), stdout=out)

        assert 'Error' in out.getvalue()

    def test_seed_fish_species(self):
        out = StringIO()
        call_command('seed_fish_species', stdout=out)
        call_command('seed_fish_species', stdout=out)

        assert FishSpecies.objects.count() == len(FISH_SPECIES)

    def test_seed_color_vars(self, css_file):
        out = StringIO()
        call_command('seed_color_vars', css=str(css_file), stdout=out)
        call_command('seed_color_vars', css=str(css_file), stdout=out)

        assert ColorVar.objects.count() == 2
        assert 'All color variables already present' in out.getvalue()


class TestStartupHook:

    def test_disabled_by_default(self):
        with mock.patch('fishsmart.seeding.seed_reference_data_safely') as seeder:
            apps.get_app_config('species').ready()

        assert not seeder.called

    @override_settings(AUTO_SEED_REFERENCE_DATA=True)
    def test_enabled_seeds_when_tables_exist(self):
        with mock.patch('fishsmart.seeding.seed_reference_data_safely') as seeder:
            apps.get_app_config('species').ready()

        assert seeder.called

    @override_settings(AUTO_SEED_REFERENCE_DATA=True)
    def test_skipped_when_tables_missing(self):
        with mock.patch.object(connection.introspection, 'table_names', return_value=['users']), \
                mock.patch('fishsmart.seeding.seed_reference_data_safely') as seeder:
            apps.get_app_config('species').ready()

        assert not seeder.called

    @override_settings(AUTO_SEED_REFERENCE_DATA=True)
    def test_skipped_when_database_unavailable(self):
        with mock.patch.object(connection.introspection, 'table_names', side_effect=Exception('connection refused')), \
                mock.patch('fishsmart.seeding.seed_reference_data_safely') as seeder:
            apps.get_app_config('species').ready()

        assert not seeder.called

    @override_settings(AUTO_SEED_REFERENCE_DATA=True, COLOR_VARS_CSS_PATH='/nonexistent/colors.css')
    def test_startup_failure_is_not_fatal(self):
        apps.get_app_config('species').ready()

        assert not FishSpecies.objects.exists()
