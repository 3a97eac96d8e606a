"""
Admin configuration for social app.
"""
from django.contrib import admin
from .models import FishingBuddy


@admin.register(FishingBuddy)
class FishingBuddyAdmin(admin.ModelAdmin):
    """Admin interface for FishingBuddy model."""
    list_display = ['owner', 'buddy', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['owner__username', 'buddy__username']
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('owner', 'buddy')

    actions = ['accept_requests']

    def accept_requests(self, request, queryset):
        """Bulk accept buddy requests."""
        count = 0
        for link in queryset.filter(status='Pending'):
            link.accept()
            count += 1
        self.message_user(request, f'{count} buddy requests accepted.')

    accept_requests.short_description = 'Accept selected buddy requests'
