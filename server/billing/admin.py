"""
Admin configuration for billing app.
"""
from django.contrib import admin
from .models import (
    BackgroundRemovalUsage,
    BillableAsset,
    CreditApplication,
    Invoice,
    Payment,
    UserCredit,
)


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    fields = ['payment_date', 'amount', 'method', 'is_voided']


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """Admin interface for Invoice model."""
    list_display = ['id', 'user', 'invoice_date', 'due_date', 'amount_due', 'amount_paid', 'status', 'type']
    list_filter = ['status', 'type', 'invoice_date']
    search_fields = ['user__username', 'description', 'batch_id']
    readonly_fields = ['date_created', 'last_updated']
    date_hierarchy = 'invoice_date'
    inlines = [PaymentInline]

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('user')


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'invoice', 'payment_date', 'amount', 'method', 'is_voided']
    list_filter = ['method', 'is_voided']
    search_fields = ['user__username', 'reference_number']
    readonly_fields = ['date_recorded', 'last_updated']


@admin.register(UserCredit)
class UserCreditAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'credit_date', 'amount', 'is_applied', 'is_voided']
    list_filter = ['is_applied', 'is_voided']
    search_fields = ['user__username', 'reason']


@admin.register(CreditApplication)
class CreditApplicationAdmin(admin.ModelAdmin):
    list_display = ['id', 'user_credit', 'invoice', 'amount_applied', 'application_date', 'is_reversed']
    list_filter = ['is_reversed']


@admin.register(BillableAsset)
class BillableAssetAdmin(admin.ModelAdmin):
    list_display = ['plot_id', 'user', 'assessment_fee', 'date_created']
    search_fields = ['plot_id', 'description', 'user__username']


@admin.register(BackgroundRemovalUsage)
class BackgroundRemovalUsageAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'user', 'usage_date', 'service_used', 'cost', 'charge_amount',
        'is_within_free_limit', 'has_been_invoiced',
    ]
    list_filter = ['service_used', 'is_within_free_limit', 'has_been_invoiced', 'usage_year', 'usage_month']
    search_fields = ['user__username', 'notes']
    date_hierarchy = 'usage_date'
