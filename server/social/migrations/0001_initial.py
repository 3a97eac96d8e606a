# Generated for the Fish-Smart members schema

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FishingBuddy',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('Pending', 'Pending'), ('Accepted', 'Accepted'), ('Blocked', 'Blocked')], default='Pending', max_length=20)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('buddy', models.ForeignKey(help_text='User who received the buddy request', on_delete=django.db.models.deletion.CASCADE, related_name='received_buddy_requests', to=settings.AUTH_USER_MODEL)),
                ('owner', models.ForeignKey(help_text='User who sent the buddy request', on_delete=django.db.models.deletion.CASCADE, related_name='sent_buddy_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Fishing Buddy',
                'verbose_name_plural': 'Fishing Buddies',
                'db_table': 'fishing_buddies',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['buddy', 'status'], name='fishing_buddies_buddy_idx')],
                'constraints': [
                    models.UniqueConstraint(fields=('owner', 'buddy'), name='fishing_buddies_owner_buddy_uniq'),
                    models.CheckConstraint(condition=models.Q(('owner', models.F('buddy')), _negated=True), name='fishing_buddies_not_self'),
                ],
            },
        ),
    ]
