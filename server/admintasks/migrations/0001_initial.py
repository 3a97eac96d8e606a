# Generated for the Fish-Smart members schema

from django.conf import settings
import django.core.validators
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
            name='AdminTask',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('task_name', models.CharField(max_length=200)),
                ('description', models.CharField(blank=True, max_length=1000, null=True)),
                ('frequency', models.IntegerField(choices=[(0, 'Monthly'), (1, 'Quarterly'), (2, 'Annually'), (3, 'As Needed')], default=0)),
                ('day_of_month_start', models.PositiveSmallIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(31)])),
                ('day_of_month_end', models.PositiveSmallIntegerField(default=31, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(31)])),
                ('priority', models.IntegerField(choices=[(0, 'Low'), (1, 'Medium'), (2, 'High')], default=1)),
                ('page_url', models.CharField(blank=True, max_length=200, null=True)),
                ('action_handler', models.CharField(blank=True, max_length=100, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('can_automate', models.BooleanField(default=False)),
                ('is_automated', models.BooleanField(default=False)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Admin Task',
                'verbose_name_plural': 'Admin Tasks',
                'db_table': 'admin_tasks',
                'ordering': ['-priority', 'task_name'],
            },
        ),
        migrations.CreateModel(
            name='AdminTaskInstance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('year', models.PositiveSmallIntegerField()),
                ('month', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('status', models.IntegerField(choices=[(0, 'Pending'), (1, 'In Progress'), (2, 'Completed'), (3, 'Skipped')], default=0)),
                ('completed_date', models.DateTimeField(blank=True, null=True)),
                ('notes', models.CharField(blank=True, max_length=1000, null=True)),
                ('is_automated_completion', models.BooleanField(default=False)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('assigned_to', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_admin_tasks', to=settings.AUTH_USER_MODEL)),
                ('completed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='completed_admin_tasks', to=settings.AUTH_USER_MODEL)),
                ('task', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='instances', to='admintasks.admintask')),
            ],
            options={
                'verbose_name': 'Admin Task Instance',
                'verbose_name_plural': 'Admin Task Instances',
                'db_table': 'admin_task_instances',
                'ordering': ['-year', '-month'],
                'constraints': [
                    models.UniqueConstraint(fields=('task', 'year', 'month'), name='admin_task_instance_period_uniq'),
                    models.CheckConstraint(condition=models.Q(('month__gte', 1), ('month__lte', 12)), name='admin_task_instance_month_range'),
                ],
            },
        ),
        migrations.CreateModel(
            name='TaskStatusMessage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('dismissed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('dismissal_count', models.PositiveIntegerField(default=0)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='task_status_messages', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Task Status Message',
                'verbose_name_plural': 'Task Status Messages',
                'db_table': 'task_status_messages',
            },
        ),
    ]
