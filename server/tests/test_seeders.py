"""
Tests for the color variable and fish species seeders.
"""
from decimal import Decimal
from unittest import mock
import pytest
from species.models import FishSpecies
from species.reference_data import FISH_SPECIES
from species.services import FishSpeciesSeeder
from theme.models import ColorVar
from theme.services import ColorVarSeeder

STYLESHEET = """
.header { color: var(--brand-blue, #1a2b3c); }
.footer { color: var(--brand-blue, #1a2b3c); }
.alert  { color: var(--brand-red, #ff0000); }
"""


class TestColorVarSeeder:

    def test_extract_color_vars(self):
        assert ColorVarSeeder.extract_color_vars(STYLESHEET) == [
            ('--brand-blue', '#1a2b3c'),
            ('--brand-blue', '#1a2b3c'),
            ('--brand-red', '#ff0000'),
        ]

    def test_extract_ignores_non_hex_fallbacks(self):
        css = '.a { color: var(--accent, red); margin: var(--gap, 4px); }'
        assert ColorVarSeeder.extract_color_vars(css) == []

    @pytest.mark.django_db
    def test_no_matches_inserts_nothing(self):
        assert ColorVarSeeder.seed('body { color: #333; }') == 0
        assert ColorVarSeeder.seed('') == 0
        assert not ColorVar.objects.exists()

    @pytest.mark.django_db
    def test_overlong_name_is_skipped(self):
        css = STYLESHEET + '.x { color: var(--' + 'a' * 60 + ', #abcdef); }'

        with mock.patch('theme.services.logger') as logger:
            created = ColorVarSeeder.seed(css)

        assert created == 2
        assert logger.warning.called
        assert not ColorVar.objects.filter(name__startswith='--aaaa').exists()

    @pytest.mark.django_db
    def test_only_new_names_are_inserted(self):
        ColorVar.objects.create(name='--brand-blue', value='#1a2b3c')

        created = ColorVarSeeder.seed(STYLESHEET)

        assert created == 1
        assert ColorVar.objects.count() == 2
        assert ColorVar.objects.get(name='--brand-red').value == '#ff0000'

    @pytest.mark.django_db
    def test_duplicates_in_one_stylesheet_are_inserted_once(self):
        created = ColorVarSeeder.seed(STYLESHEET)

        assert created == 2
        assert ColorVar.objects.filter(name='--brand-blue').count() == 1

    @pytest.mark.django_db
    def test_existing_values_are_not_updated(self):
        ColorVar.objects.create(name='--brand-blue', value='#000000')

        ColorVarSeeder.seed(STYLESHEET)

        assert ColorVar.objects.get(name='--brand-blue').value == '#000000'

    @pytest.mark.django_db
    def test_seed_from_file(self, tmp_path):
        css_file = tmp_path / 'colors.css'
        css_file.write_text(STYLESHEET, encoding='utf-8')

        assert ColorVarSeeder.seed_from_file(css_file) == 2
        assert ColorVarSeeder.seed_from_file(css_file) == 0

    @pytest.mark.django_db
    def test_seed_from_default_stylesheet(self):
        created = ColorVarSeeder.seed_from_file()

        assert created > 0
        assert ColorVar.objects.count() == created
        assert ColorVar.objects.filter(name='--brand-primary').count() == 1


@pytest.mark.django_db
class TestFishSpeciesSeeder:

    def test_seeding_twice_inserts_one_set(self):
        first = FishSpeciesSeeder.seed()
        second = FishSpeciesSeeder.seed()

        assert first == len(FISH_SPECIES)
        assert second == 0
        assert FishSpecies.objects.count() == len(FISH_SPECIES)

    def test_skips_when_any_species_exists(self, species):
        assert FishSpeciesSeeder.seed() == 0
        assert FishSpecies.objects.count() == 1

    def test_seeded_rows_are_active_with_decimal_sizes(self):
        FishSpeciesSeeder.seed()

        redfish = FishSpecies.objects.get(common_name='Redfish')
        assert redfish.is_active
        assert isinstance(redfish.min_size, Decimal)
        assert redfish.min_size <= redfish.max_size

    def test_reference_rows_are_valid(self):
        for fish in FishSpeciesSeeder.build_species():
            fish.full_clean()
