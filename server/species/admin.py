"""
Admin configuration for species app.
"""
from django.contrib import admin
from .models import FishSpecies


@admin.register(FishSpecies)
class FishSpeciesAdmin(admin.ModelAdmin):
    """Admin interface for FishSpecies model."""
    list_display = [
        'common_name',
        'scientific_name',
        'water_type',
        'region',
        'min_size',
        'max_size',
        'season_start',
        'season_end',
        'is_active',
    ]
    list_filter = ['water_type', 'is_active', 'region']
    search_fields = ['common_name', 'scientific_name', 'region']
    ordering = ['common_name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('common_name', 'scientific_name', 'water_type', 'region')
        }),
        ('Size & Season', {
            'fields': ('min_size', 'max_size', 'season_start', 'season_end')
        }),
        ('Details', {
            'fields': ('stock_image_url', 'regulation_notes', 'is_active')
        }),
    )

    actions = ['mark_active', 'mark_inactive']

    def mark_active(self, request, queryset):
        """Mark selected species as active."""
        updated = queryset.update(is_active=True)
        self.message_user(request, f'{updated} species marked as active.')

    mark_active.short_description = 'Mark selected species as active'

    def mark_inactive(self, request, queryset):
        """Mark selected species as inactive."""
        updated = queryset.update(is_active=False)
        self.message_user(request, f'{updated} species marked as inactive.')

    mark_inactive.short_description = 'Mark selected species as inactive'
