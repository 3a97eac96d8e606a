"""
Admin configuration for theme app.
"""
from django.contrib import admin
from .models import ColorVar


@admin.register(ColorVar)
class ColorVarAdmin(admin.ModelAdmin):
    """Admin interface for ColorVar model."""
    list_display = ['name', 'value']
    search_fields = ['name', 'value']
    ordering = ['name']
