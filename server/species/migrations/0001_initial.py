# Generated for the Fish-Smart members schema

from decimal import Decimal
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FishSpecies',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('common_name', models.CharField(max_length=100)),
                ('scientific_name', models.CharField(blank=True, max_length=100, null=True)),
                ('water_type', models.CharField(choices=[('Fresh', 'Fresh'), ('Salt', 'Salt'), ('Both', 'Both')], help_text='Fresh, Salt or Both', max_length=20)),
                ('region', models.CharField(blank=True, max_length=100, null=True)),
                ('min_size', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('999.99'))])),
                ('max_size', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('999.99'))])),
                ('season_start', models.PositiveSmallIntegerField(blank=True, help_text='Month the season opens (1-12)', null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('season_end', models.PositiveSmallIntegerField(blank=True, help_text='Month the season closes (1-12)', null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('stock_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('regulation_notes', models.CharField(blank=True, max_length=1000, null=True)),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Fish Species',
                'verbose_name_plural': 'Fish Species',
                'db_table': 'fish_species',
                'ordering': ['common_name'],
                'indexes': [
                    models.Index(fields=['water_type', 'region'], name='fish_species_water_region_idx'),
                    models.Index(fields=['is_active'], name='fish_species_active_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('min_size__isnull', True), models.Q(('min_size__gte', 0), ('min_size__lte', Decimal('999.99'))), _connector='OR'), name='fish_species_min_size_range'),
                    models.CheckConstraint(condition=models.Q(('max_size__isnull', True), models.Q(('max_size__gte', 0), ('max_size__lte', Decimal('999.99'))), _connector='OR'), name='fish_species_max_size_range'),
                    models.CheckConstraint(condition=models.Q(('season_start__isnull', True), models.Q(('season_start__gte', 1), ('season_start__lte', 12)), _connector='OR'), name='fish_species_season_start_month'),
                    models.CheckConstraint(condition=models.Q(('season_end__isnull', True), models.Q(('season_end__gte', 1), ('season_end__lte', 12)), _connector='OR'), name='fish_species_season_end_month'),
                ],
            },
        ),
    ]
