# billing/services.py
import logging
from datetime import timedelta
from decimal import Decimal
from typing import Optional
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Sum
from django.utils import timezone
from billing.models import (
    BackgroundRemovalUsage,
    CreditApplication,
    Invoice,
    InvoiceStatus,
    InvoiceType,
    UserCredit,
)
from fishing.models import SmartCatchProfile

logger = logging.getLogger(__name__)


class BackgroundRemovalBillingService:
    """Meters background removal for premium members and invoices the overage"""

    FREE_MONTHLY_LIMIT = 5
    CHARGE_PER_IMAGE = Decimal('0.50')
    PAYMENT_TERMS_DAYS = 30

    @classmethod
    def is_user_premium(cls, user) -> bool:
        return SmartCatchProfile.objects.filter(user=user, subscription_type='Premium').exists()

    @classmethod
    def track_usage(cls, user, service_name: str, api_cost: Decimal) -> Optional[BackgroundRemovalUsage]:
        """
        Record one background removal and bill it when over the free allowance

        Args:
            user: Member who used the service
            service_name: Provider name, e.g. "Remove.bg"
            api_cost: What the provider charged us

        Returns:
            The usage row, or None when the user is not premium
        """
        if not cls.is_user_premium(user):
            logger.warning(f"Non-premium user {user.pk} attempted to use background removal")
            return None

        today = timezone.localdate()

        with transaction.atomic():
            # Serialize a user's concurrent uses so the monthly count stays exact
            get_user_model().objects.select_for_update().filter(pk=user.pk).first()

            used_this_month = BackgroundRemovalUsage.objects.filter(
                user=user,
                usage_year=today.year,
                usage_month=today.month
            ).count()

            is_free = used_this_month < cls.FREE_MONTHLY_LIMIT
            usage = BackgroundRemovalUsage.objects.create(
                user=user,
                usage_month=today.month,
                usage_year=today.year,
                service_used=service_name,
                cost=api_cost,
                charge_amount=Decimal('0.00') if is_free else cls.CHARGE_PER_IMAGE,
                is_within_free_limit=is_free,
                # Free usage needs no invoice
                has_been_invoiced=is_free,
                notes=f"Free usage ({used_this_month + 1}/{cls.FREE_MONTHLY_LIMIT})" if is_free else "Billable overage usage",
            )

            if not is_free:
                cls._create_usage_invoice(usage)

        logger.info(
            f"Background removal tracked for user {user.pk}: {service_name}, "
            f"cost {api_cost}, charge {usage.charge_amount}, free {is_free}"
        )
        return usage

    @classmethod
    def _create_usage_invoice(cls, usage: BackgroundRemovalUsage) -> Invoice:
        today = timezone.localdate()
        invoice = Invoice.objects.create(
            user_id=usage.user_id,
            invoice_date=today,
            due_date=today + timedelta(days=cls.PAYMENT_TERMS_DAYS),
            description=f"Background Removal Service - {usage.service_used} ({usage.usage_date:%b %d, %Y})",
            amount_due=usage.charge_amount,
            amount_paid=Decimal('0.00'),
            status=InvoiceStatus.DUE,
            type=InvoiceType.BACKGROUND_REMOVAL,
        )

        usage.invoice = invoice
        usage.has_been_invoiced = True
        usage.date_invoiced = timezone.now()
        usage.save(update_fields=['invoice', 'has_been_invoiced', 'date_invoiced'])

        cls._apply_available_credits(invoice)

        logger.info(f"Created background removal invoice {invoice.pk} for user {usage.user_id}, amount {invoice.amount_due}")
        return invoice

    @classmethod
    def _apply_available_credits(cls, invoice: Invoice) -> None:
        """Pay down an invoice from the user's unapplied credits, oldest first."""
        credits = UserCredit.objects.filter(
            user_id=invoice.user_id,
            is_applied=False,
            is_voided=False,
            amount__gt=0
        ).order_by('credit_date', 'pk')

        remaining = invoice.amount_due - invoice.amount_paid
        for credit in credits:
            if remaining <= 0:
                break

            amount_to_apply = min(remaining, credit.amount)
            CreditApplication.objects.create(
                user_credit=credit,
                invoice=invoice,
                amount_applied=amount_to_apply,
                notes=f"Auto-applied to Background Removal charge (INV-{invoice.pk:05d}). Original Credit: {credit.reason}"[:255],
            )

            credit.amount -= amount_to_apply
            if credit.amount <= 0:
                credit.amount = Decimal('0.00')
                credit.is_applied = True
                credit.applied_date = timezone.now()
            credit.save(update_fields=['amount', 'is_applied', 'applied_date', 'last_updated'])

            invoice.amount_paid += amount_to_apply
            remaining -= amount_to_apply

        if invoice.amount_paid >= invoice.amount_due:
            invoice.amount_paid = invoice.amount_due
            invoice.status = InvoiceStatus.PAID
        invoice.save(update_fields=['amount_paid', 'status', 'last_updated'])

    @classmethod
    def get_monthly_usage_summary(cls, user, year=None, month=None) -> dict:
        """
        Usage counts and billable charges for one month (default: this month)

        Returns:
            {'free_used': int, 'total_used': int, 'total_charges': Decimal}
        """
        today = timezone.localdate()
        usage = BackgroundRemovalUsage.objects.filter(
            user=user,
            usage_year=year or today.year,
            usage_month=month or today.month
        )

        total_charges = usage.filter(is_within_free_limit=False).aggregate(
            total=Sum('charge_amount')
        )['total']

        return {
            'free_used': usage.filter(is_within_free_limit=True).count(),
            'total_used': usage.count(),
            'total_charges': total_charges or Decimal('0.00'),
        }

    @classmethod
    def get_user_usage_history(cls, user, year=None, month=None):
        usage = BackgroundRemovalUsage.objects.filter(user=user).select_related('invoice')
        if year is not None:
            usage = usage.filter(usage_year=year)
        if month is not None:
            usage = usage.filter(usage_month=month)
        return usage.order_by('-usage_date', '-pk')
