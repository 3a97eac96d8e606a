# Generated for the Fish-Smart members schema

from decimal import Decimal
from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('catalog', '0001_initial'),
        ('species', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SmartCatchProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('display_name', models.CharField(blank=True, max_length=100, null=True)),
                ('subscription_type', models.CharField(choices=[('Free', 'Free'), ('Premium', 'Premium')], default='Free', max_length=20)),
                ('preferred_water_type', models.CharField(choices=[('Fresh', 'Fresh'), ('Salt', 'Salt'), ('Both', 'Both')], default='Both', max_length=20)),
                ('default_region', models.CharField(blank=True, max_length=100, null=True)),
                ('voice_activation_enabled', models.BooleanField(default=False)),
                ('auto_location_enabled', models.BooleanField(default=False)),
                ('watermark_enabled', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='smart_catch_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Smart Catch Profile',
                'verbose_name_plural': 'Smart Catch Profiles',
                'db_table': 'smart_catch_profiles',
            },
        ),
        migrations.CreateModel(
            name='UserAvatar',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=100, null=True)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('is_user_uploaded', models.BooleanField(default=False)),
                ('is_default', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='fishing_avatars', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'User Avatar',
                'verbose_name_plural': 'User Avatars',
                'db_table': 'user_avatars',
                'ordering': ['-is_default', '-created_at'],
                'indexes': [models.Index(fields=['user'], name='user_avatars_user_idx')],
            },
        ),
        migrations.CreateModel(
            name='FishingSession',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('session_date', models.DateTimeField()),
                ('water_type', models.CharField(choices=[('Fresh', 'Fresh'), ('Salt', 'Salt'), ('Both', 'Both')], max_length=20)),
                ('location_name', models.CharField(blank=True, max_length=200, null=True)),
                ('latitude', models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('-90')), django.core.validators.MaxValueValidator(Decimal('90'))])),
                ('longitude', models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True, validators=[django.core.validators.MinValueValidator(Decimal('-180')), django.core.validators.MaxValueValidator(Decimal('180'))])),
                ('weather_conditions', models.CharField(blank=True, max_length=200, null=True)),
                ('temperature', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ('tide_conditions', models.CharField(blank=True, max_length=100, null=True)),
                ('wind_direction', models.CharField(blank=True, max_length=50, null=True)),
                ('wind_speed', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ('moon_phase', models.CharField(blank=True, max_length=50, null=True)),
                ('barometric_pressure', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('notes', models.CharField(blank=True, max_length=1000, null=True)),
                ('voice_notes_url', models.CharField(blank=True, max_length=500, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('is_completed', models.BooleanField(default=False)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('primary_bait_lure', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='fishing_sessions', to='catalog.baitslures')),
                ('rod_reel_setup', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='fishing_sessions', to='catalog.fishingequipment')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='fishing_sessions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Fishing Session',
                'verbose_name_plural': 'Fishing Sessions',
                'db_table': 'fishing_sessions',
                'ordering': ['-session_date'],
                'indexes': [models.Index(fields=['user', 'session_date', 'water_type'], name='fishing_sess_user_date_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('latitude__isnull', True), models.Q(('latitude__gte', -90), ('latitude__lte', 90)), _connector='OR'), name='fishing_session_latitude_range'),
                    models.CheckConstraint(condition=models.Q(('longitude__isnull', True), models.Q(('longitude__gte', -180), ('longitude__lte', 180)), _connector='OR'), name='fishing_session_longitude_range'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Catch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('size', models.DecimalField(decimal_places=2, help_text='Length in inches', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('999.99'))])),
                ('weight', models.DecimalField(blank=True, decimal_places=2, help_text='Weight in pounds', max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('999.99'))])),
                ('catch_time', models.DateTimeField(blank=True, null=True)),
                ('rig_used', models.CharField(blank=True, max_length=200, null=True)),
                ('lure_used', models.CharField(blank=True, max_length=200, null=True)),
                ('photo_url', models.CharField(blank=True, max_length=500, null=True)),
                ('composite_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('watermarked_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('show_species_name', models.BooleanField(default=False)),
                ('show_size', models.BooleanField(default=False)),
                ('is_shared', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('weather_conditions', models.CharField(blank=True, max_length=200, null=True)),
                ('temperature', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ('wind_direction', models.CharField(blank=True, max_length=50, null=True)),
                ('wind_speed', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ('barometric_pressure', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('humidity', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(100)])),
                ('weather_description', models.CharField(blank=True, max_length=500, null=True)),
                ('weather_captured_at', models.DateTimeField(blank=True, null=True)),
                ('moon_phase_name', models.CharField(blank=True, max_length=50, null=True)),
                ('moon_illumination', models.FloatField(blank=True, null=True)),
                ('moon_age', models.FloatField(blank=True, null=True)),
                ('moon_icon', models.CharField(blank=True, max_length=10, null=True)),
                ('fishing_quality', models.CharField(blank=True, max_length=20, null=True)),
                ('moon_fishing_tip', models.CharField(blank=True, max_length=500, null=True)),
                ('moon_data_captured_at', models.DateTimeField(blank=True, null=True)),
                ('avatar', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='catches', to='fishing.useravatar')),
                ('background', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='catches', to='catalog.background')),
                ('outfit', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='catches', to='catalog.outfit')),
                ('pose', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='catches', to='catalog.avatarpose')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='catches', to='fishing.fishingsession')),
                ('species', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='catches', to='species.fishspecies')),
            ],
            options={
                'verbose_name': 'Catch',
                'verbose_name_plural': 'Catches',
                'db_table': 'catches',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['session'], name='catches_session_idx'),
                    models.Index(fields=['species'], name='catches_species_idx'),
                    models.Index(fields=['is_shared'], name='catches_is_shared_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('size__gte', 0), ('size__lte', Decimal('999.99'))), name='catch_size_range'),
                    models.CheckConstraint(condition=models.Q(('weight__isnull', True), models.Q(('weight__gte', 0), ('weight__lte', Decimal('999.99'))), _connector='OR'), name='catch_weight_range'),
                    models.CheckConstraint(condition=models.Q(('humidity__isnull', True), ('humidity__lte', 100), _connector='OR'), name='catch_humidity_range'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CatchAlbum',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('description', models.CharField(blank=True, max_length=500, null=True)),
                ('cover_image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('is_public', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('is_session_album', models.BooleanField(default=False)),
                ('fishing_session', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='albums', to='fishing.fishingsession')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='catch_albums', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Catch Album',
                'verbose_name_plural': 'Catch Albums',
                'db_table': 'catch_albums',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['user'], name='catch_albums_user_idx')],
            },
        ),
        migrations.CreateModel(
            name='AlbumCatch',
            fields=[
                ('pk', models.CompositePrimaryKey('album_id', 'catch_id', blank=True, editable=False, primary_key=True, serialize=False)),
                ('added_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('album', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='album_catches', to='fishing.catchalbum')),
                ('catch', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='album_entries', to='fishing.catch')),
            ],
            options={
                'verbose_name': 'Album Catch',
                'verbose_name_plural': 'Album Catches',
                'db_table': 'album_catches',
                'ordering': ['added_at'],
            },
        ),
    ]
