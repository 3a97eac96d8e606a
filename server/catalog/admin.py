"""
Admin configuration for catalog app.
"""
from django.contrib import admin
from .models import AvatarPose, Background, BaitsLures, FishingEquipment, Outfit, Sponsor


@admin.register(Sponsor)
class SponsorAdmin(admin.ModelAdmin):
    """Admin interface for Sponsor model."""
    list_display = ['name', 'category', 'is_active']
    list_filter = ['category', 'is_active']
    search_fields = ['name']
    ordering = ['name']


@admin.register(AvatarPose)
class AvatarPoseAdmin(admin.ModelAdmin):
    """Admin interface for AvatarPose model."""
    list_display = ['name', 'category', 'is_premium']
    list_filter = ['category', 'is_premium']
    search_fields = ['name', 'description']


@admin.register(Background)
class BackgroundAdmin(admin.ModelAdmin):
    """Admin interface for Background model."""
    list_display = ['name', 'category', 'water_type', 'is_premium']
    list_filter = ['category', 'water_type', 'is_premium']
    search_fields = ['name', 'description']


class SponsoredItemAdmin(admin.ModelAdmin):
    """Shared options for catalog items that may carry a sponsor."""
    list_filter = ['is_premium', 'is_ai_generated', 'sponsor']
    search_fields = ['name', 'sponsor__name']

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('sponsor')


@admin.register(Outfit)
class OutfitAdmin(SponsoredItemAdmin):
    """Admin interface for Outfit model."""
    list_display = ['name', 'brand_name', 'sponsor', 'is_premium', 'is_ai_generated']


@admin.register(FishingEquipment)
class FishingEquipmentAdmin(SponsoredItemAdmin):
    """Admin interface for FishingEquipment model."""
    list_display = ['name', 'type', 'brand', 'model', 'sponsor', 'is_premium']
    list_filter = ['type', 'is_premium', 'is_ai_generated', 'sponsor']


@admin.register(BaitsLures)
class BaitsLuresAdmin(SponsoredItemAdmin):
    """Admin interface for BaitsLures model."""
    list_display = ['name', 'type', 'brand', 'color', 'size', 'sponsor', 'is_premium']
    list_filter = ['type', 'is_premium', 'is_ai_generated', 'sponsor']
