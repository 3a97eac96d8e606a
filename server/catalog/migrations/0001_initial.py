# Generated for the Fish-Smart members schema

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Sponsor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('category', models.CharField(blank=True, choices=[('Clothing', 'Clothing'), ('Equipment', 'Equipment'), ('BaitsLures', 'Baits & Lures')], max_length=50, null=True)),
                ('logo_url', models.CharField(blank=True, max_length=500, null=True)),
                ('website_url', models.CharField(blank=True, max_length=500, null=True)),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Sponsor',
                'verbose_name_plural': 'Sponsors',
                'db_table': 'sponsors',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='AvatarPose',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('description', models.CharField(blank=True, max_length=200, null=True)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('category', models.CharField(blank=True, choices=[('TwoHands', 'Two Hands'), ('HangingLine', 'Hanging Line'), ('CloseUp', 'Close Up'), ('Custom', 'Custom')], max_length=50, null=True)),
                ('is_premium', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': 'Avatar Pose',
                'verbose_name_plural': 'Avatar Poses',
                'db_table': 'avatar_poses',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Background',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('description', models.CharField(blank=True, max_length=200, null=True)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('category', models.CharField(blank=True, choices=[('Seawall', 'Seawall'), ('Beach', 'Beach'), ('Pier', 'Pier'), ('Boat', 'Boat')], max_length=50, null=True)),
                ('water_type', models.CharField(blank=True, choices=[('Fresh', 'Fresh'), ('Salt', 'Salt'), ('Both', 'Both')], max_length=20, null=True)),
                ('is_premium', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': 'Background',
                'verbose_name_plural': 'Backgrounds',
                'db_table': 'backgrounds',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['water_type', 'is_premium'], name='backgrounds_water_premium_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Outfit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('description', models.CharField(blank=True, max_length=200, null=True)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('brand_name', models.CharField(blank=True, max_length=100, null=True)),
                ('is_ai_generated', models.BooleanField(default=False)),
                ('is_premium', models.BooleanField(default=False)),
                ('sponsor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='outfits', to='catalog.sponsor')),
            ],
            options={
                'verbose_name': 'Outfit',
                'verbose_name_plural': 'Outfits',
                'db_table': 'outfits',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='FishingEquipment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('type', models.CharField(choices=[('SpinCasting', 'Spin Casting'), ('BaitCasting', 'Bait Casting'), ('FlyRod', 'Fly Rod'), ('Spearfishing', 'Spearfishing')], max_length=50)),
                ('brand', models.CharField(blank=True, max_length=100, null=True)),
                ('model', models.CharField(blank=True, max_length=100, null=True)),
                ('is_ai_generated', models.BooleanField(default=False)),
                ('is_premium', models.BooleanField(default=False)),
                ('sponsor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='fishing_equipment', to='catalog.sponsor')),
            ],
            options={
                'verbose_name': 'Fishing Equipment',
                'verbose_name_plural': 'Fishing Equipment',
                'db_table': 'fishing_equipment',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['type', 'is_premium'], name='fishing_equip_type_premium_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BaitsLures',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('type', models.CharField(blank=True, choices=[('Bait', 'Bait'), ('Lure', 'Lure')], max_length=50, null=True)),
                ('brand', models.CharField(blank=True, max_length=100, null=True)),
                ('color', models.CharField(blank=True, max_length=50, null=True)),
                ('size', models.CharField(blank=True, max_length=50, null=True)),
                ('is_ai_generated', models.BooleanField(default=False)),
                ('is_premium', models.BooleanField(default=False)),
                ('sponsor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='baits_lures', to='catalog.sponsor')),
            ],
            options={
                'verbose_name': 'Bait or Lure',
                'verbose_name_plural': 'Baits & Lures',
                'db_table': 'baits_lures',
                'ordering': ['name'],
            },
        ),
    ]
