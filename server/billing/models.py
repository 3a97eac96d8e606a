"""
Invoicing and credit models.
"""
from decimal import Decimal
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class InvoiceStatus(models.IntegerChoices):
    DRAFT = 0, 'Draft'
    DUE = 1, 'Due'
    PAID = 2, 'Paid'
    OVERDUE = 3, 'Overdue'
    CANCELLED = 4, 'Cancelled'


class InvoiceType(models.IntegerChoices):
    DUES = 0, 'Dues'
    FEE = 1, 'Fee'
    BACKGROUND_REMOVAL = 2, 'Background Removal'
    OTHER = 3, 'Other'


class PaymentMethod(models.IntegerChoices):
    CASH = 0, 'Cash'
    CHECK = 1, 'Check'
    CREDIT_CARD = 2, 'Credit Card'
    ONLINE = 3, 'Online'
    OTHER = 4, 'Other'


class Invoice(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='invoices'
    )
    reason_for_cancellation = models.CharField(max_length=250, null=True, blank=True)
    invoice_date = models.DateField()
    due_date = models.DateField()
    description = models.CharField(max_length=1000)
    amount_due = models.DecimalField(max_digits=18, decimal_places=2)
    amount_paid = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal('0.00'))
    status = models.IntegerField(choices=InvoiceStatus.choices, default=InvoiceStatus.DUE)
    type = models.IntegerField(choices=InvoiceType.choices, default=InvoiceType.DUES)
    batch_id = models.CharField(max_length=100, null=True, blank=True)
    date_created = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'invoices'
        verbose_name = _('Invoice')
        verbose_name_plural = _('Invoices')
        ordering = ['-invoice_date']

    def __str__(self):
        return f"Invoice {self.pk} - {self.user.username} ({self.get_status_display()})"

    @property
    def balance_due(self):
        return self.amount_due - self.amount_paid


class Payment(models.Model):
    invoice = models.ForeignKey(
        Invoice,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='payments'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payments'
    )
    payment_date = models.DateField()
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    method = models.IntegerField(choices=PaymentMethod.choices)
    reference_number = models.CharField(max_length=1000, null=True, blank=True)
    notes = models.CharField(max_length=200, null=True, blank=True)
    date_recorded = models.DateTimeField(default=timezone.now)
    is_voided = models.BooleanField(default=False)
    voided_date = models.DateTimeField(null=True, blank=True)
    reason_for_voiding = models.CharField(max_length=250, null=True, blank=True)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        verbose_name = _('Payment')
        verbose_name_plural = _('Payments')
        ordering = ['-payment_date']

    def __str__(self):
        return f"Payment {self.pk} - {self.amount}"


class UserCredit(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='credits'
    )
    credit_date = models.DateField()
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    source_payment = models.ForeignKey(
        Payment,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='credits'
    )
    reason = models.CharField(max_length=250)
    is_applied = models.BooleanField(default=False)
    applied_date = models.DateTimeField(null=True, blank=True)
    applied_to_invoice = models.ForeignKey(
        Invoice,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='applied_credits'
    )
    application_notes = models.CharField(max_length=250, null=True, blank=True)
    date_created = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(auto_now=True)
    is_voided = models.BooleanField(default=False)

    class Meta:
        db_table = 'user_credits'
        verbose_name = _('User Credit')
        verbose_name_plural = _('User Credits')
        ordering = ['-credit_date']

    def __str__(self):
        return f"Credit {self.pk} - {self.amount} ({self.user.username})"


class CreditApplication(models.Model):
    """A portion of a credit applied against an invoice."""
    user_credit = models.ForeignKey(
        UserCredit,
        on_delete=models.RESTRICT,
        related_name='applications'
    )
    invoice = models.ForeignKey(
        Invoice,
        on_delete=models.RESTRICT,
        related_name='credit_applications'
    )
    amount_applied = models.DecimalField(max_digits=18, decimal_places=2)
    application_date = models.DateTimeField(default=timezone.now)
    is_reversed = models.BooleanField(default=False)
    reversed_date = models.DateTimeField(null=True, blank=True)
    notes = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        db_table = 'credit_applications'
        verbose_name = _('Credit Application')
        verbose_name_plural = _('Credit Applications')

    def __str__(self):
        return f"{self.amount_applied} of credit {self.user_credit_id} to invoice {self.invoice_id}"


class BillableAsset(models.Model):
    plot_id = models.CharField(max_length=100, unique=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='billable_assets'
    )
    description = models.CharField(max_length=250, null=True, blank=True)
    assessment_fee = models.DecimalField(max_digits=18, decimal_places=2, default=Decimal('0.00'))
    date_created = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'billable_assets'
        verbose_name = _('Billable Asset')
        verbose_name_plural = _('Billable Assets')
        ordering = ['plot_id']

    def __str__(self):
        return self.plot_id


class BackgroundRemovalUsage(models.Model):
    """
    One paid background-removal call.
    Usage inside the monthly free allowance is recorded with no charge.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='background_removal_usage'
    )
    usage_date = models.DateTimeField(default=timezone.now)
    usage_month = models.PositiveSmallIntegerField()
    usage_year = models.PositiveSmallIntegerField()
    service_used = models.CharField(max_length=50)
    cost = models.DecimalField(max_digits=10, decimal_places=3, help_text=_('Provider API cost'))
    charge_amount = models.DecimalField(max_digits=10, decimal_places=2, help_text=_('Amount charged to the member'))
    is_within_free_limit = models.BooleanField(default=False)
    has_been_invoiced = models.BooleanField(default=False)
    invoice = models.ForeignKey(
        Invoice,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='background_removal_usage'
    )
    notes = models.CharField(max_length=500, null=True, blank=True)
    date_created = models.DateTimeField(default=timezone.now)
    date_invoiced = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'background_removal_usage'
        verbose_name = _('Background Removal Usage')
        verbose_name_plural = _('Background Removal Usage')
        ordering = ['-usage_date']
        indexes = [
            models.Index(fields=['user', 'usage_year', 'usage_month'], name='bg_removal_user_period_idx'),
            models.Index(fields=['has_been_invoiced', 'is_within_free_limit'], name='bg_removal_billing_idx'),
        ]

    def __str__(self):
        return f"{self.service_used} - {self.user.username} ({self.usage_year}-{self.usage_month:02d})"
