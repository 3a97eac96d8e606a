# Generated for the Fish-Smart members schema

from decimal import Decimal
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
            name='Invoice',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reason_for_cancellation', models.CharField(blank=True, max_length=250, null=True)),
                ('invoice_date', models.DateField()),
                ('due_date', models.DateField()),
                ('description', models.CharField(max_length=1000)),
                ('amount_due', models.DecimalField(decimal_places=2, max_digits=18)),
                ('amount_paid', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=18)),
                ('status', models.IntegerField(choices=[(0, 'Draft'), (1, 'Due'), (2, 'Paid'), (3, 'Overdue'), (4, 'Cancelled')], default=1)),
                ('type', models.IntegerField(choices=[(0, 'Dues'), (1, 'Fee'), (2, 'Background Removal'), (3, 'Other')], default=0)),
                ('batch_id', models.CharField(blank=True, max_length=100, null=True)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='invoices', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Invoice',
                'verbose_name_plural': 'Invoices',
                'db_table': 'invoices',
                'ordering': ['-invoice_date'],
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('payment_date', models.DateField()),
                ('amount', models.DecimalField(decimal_places=2, max_digits=18)),
                ('method', models.IntegerField(choices=[(0, 'Cash'), (1, 'Check'), (2, 'Credit Card'), (3, 'Online'), (4, 'Other')])),
                ('reference_number', models.CharField(blank=True, max_length=1000, null=True)),
                ('notes', models.CharField(blank=True, max_length=200, null=True)),
                ('date_recorded', models.DateTimeField(default=django.utils.timezone.now)),
                ('is_voided', models.BooleanField(default=False)),
                ('voided_date', models.DateTimeField(blank=True, null=True)),
                ('reason_for_voiding', models.CharField(blank=True, max_length=250, null=True)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('invoice', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='payments', to='billing.invoice')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Payment',
                'verbose_name_plural': 'Payments',
                'db_table': 'payments',
                'ordering': ['-payment_date'],
            },
        ),
        migrations.CreateModel(
            name='UserCredit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('credit_date', models.DateField()),
                ('amount', models.DecimalField(decimal_places=2, max_digits=18)),
                ('reason', models.CharField(max_length=250)),
                ('is_applied', models.BooleanField(default=False)),
                ('applied_date', models.DateTimeField(blank=True, null=True)),
                ('application_notes', models.CharField(blank=True, max_length=250, null=True)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('is_voided', models.BooleanField(default=False)),
                ('applied_to_invoice', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='applied_credits', to='billing.invoice')),
                ('source_payment', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='credits', to='billing.payment')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='credits', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'User Credit',
                'verbose_name_plural': 'User Credits',
                'db_table': 'user_credits',
                'ordering': ['-credit_date'],
            },
        ),
        migrations.CreateModel(
            name='CreditApplication',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount_applied', models.DecimalField(decimal_places=2, max_digits=18)),
                ('application_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('is_reversed', models.BooleanField(default=False)),
                ('reversed_date', models.DateTimeField(blank=True, null=True)),
                ('notes', models.CharField(blank=True, max_length=255, null=True)),
                ('invoice', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='credit_applications', to='billing.invoice')),
                ('user_credit', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='applications', to='billing.usercredit')),
            ],
            options={
                'verbose_name': 'Credit Application',
                'verbose_name_plural': 'Credit Applications',
                'db_table': 'credit_applications',
            },
        ),
        migrations.CreateModel(
            name='BillableAsset',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('plot_id', models.CharField(max_length=100, unique=True)),
                ('description', models.CharField(blank=True, max_length=250, null=True)),
                ('assessment_fee', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=18)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='billable_assets', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Billable Asset',
                'verbose_name_plural': 'Billable Assets',
                'db_table': 'billable_assets',
                'ordering': ['plot_id'],
            },
        ),
        migrations.CreateModel(
            name='BackgroundRemovalUsage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('usage_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('usage_month', models.PositiveSmallIntegerField()),
                ('usage_year', models.PositiveSmallIntegerField()),
                ('service_used', models.CharField(max_length=50)),
                ('cost', models.DecimalField(decimal_places=3, help_text='Provider API cost', max_digits=10)),
                ('charge_amount', models.DecimalField(decimal_places=2, help_text='Amount charged to the member', max_digits=10)),
                ('is_within_free_limit', models.BooleanField(default=False)),
                ('has_been_invoiced', models.BooleanField(default=False)),
                ('notes', models.CharField(blank=True, max_length=500, null=True)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('date_invoiced', models.DateTimeField(blank=True, null=True)),
                ('invoice', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='background_removal_usage', to='billing.invoice')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='background_removal_usage', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Background Removal Usage',
                'verbose_name_plural': 'Background Removal Usage',
                'db_table': 'background_removal_usage',
                'ordering': ['-usage_date'],
                'indexes': [
                    models.Index(fields=['user', 'usage_year', 'usage_month'], name='bg_removal_user_period_idx'),
                    models.Index(fields=['has_been_invoiced', 'is_within_free_limit'], name='bg_removal_billing_idx'),
                ],
            },
        ),
    ]
