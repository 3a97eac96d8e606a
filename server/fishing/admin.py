"""
Admin configuration for fishing app.
"""
from django.contrib import admin
from .models import Catch, CatchAlbum, FishingSession, SmartCatchProfile, UserAvatar


@admin.register(SmartCatchProfile)
class SmartCatchProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'display_name', 'subscription_type', 'preferred_water_type', 'created_at']
    list_filter = ['subscription_type', 'preferred_water_type']
    search_fields = ['user__username', 'display_name']
    readonly_fields = ['created_at']


@admin.register(UserAvatar)
class UserAvatarAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'is_user_uploaded', 'is_default', 'created_at']
    list_filter = ['is_user_uploaded', 'is_default']
    search_fields = ['name', 'user__username']


class CatchInline(admin.TabularInline):
    model = Catch
    extra = 0
    fields = ['species', 'size', 'weight', 'catch_time', 'is_shared']
    show_change_link = True


@admin.register(FishingSession)
class FishingSessionAdmin(admin.ModelAdmin):
    """Admin interface for FishingSession model."""
    list_display = ['id', 'user', 'session_date', 'water_type', 'location_name', 'is_completed']
    list_filter = ['water_type', 'is_completed', 'session_date']
    search_fields = ['user__username', 'location_name', 'notes']
    readonly_fields = ['id', 'created_at', 'completed_at']
    ordering = ['-session_date']
    date_hierarchy = 'session_date'
    inlines = [CatchInline]

    fieldsets = (
        ('Session', {
            'fields': ('id', 'user', 'session_date', 'water_type', 'is_completed', 'completed_at')
        }),
        ('Location', {
            'fields': ('location_name', 'latitude', 'longitude'),
        }),
        ('Conditions', {
            'fields': (
                'weather_conditions', 'temperature', 'tide_conditions',
                'wind_direction', 'wind_speed', 'moon_phase', 'barometric_pressure',
            ),
            'classes': ('collapse',)
        }),
        ('Equipment', {
            'fields': ('rod_reel_setup', 'primary_bait_lure'),
            'classes': ('collapse',)
        }),
        ('Notes', {
            'fields': ('notes', 'voice_notes_url', 'created_at'),
        }),
    )

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('user')


@admin.register(Catch)
class CatchAdmin(admin.ModelAdmin):
    """Admin interface for Catch model."""
    list_display = ['id', 'species', 'size', 'weight', 'session', 'is_shared', 'created_at']
    list_filter = ['is_shared', 'fishing_quality', 'created_at']
    search_fields = ['species__common_name', 'session__user__username', 'rig_used', 'lure_used']
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']

    fieldsets = (
        ('Catch', {
            'fields': ('id', 'session', 'species', 'size', 'weight', 'catch_time', 'rig_used', 'lure_used')
        }),
        ('Photo', {
            'fields': (
                'photo_url', 'composite_image_url', 'watermarked_image_url',
                'avatar', 'pose', 'background', 'outfit',
                'show_species_name', 'show_size', 'is_shared',
            )
        }),
        ('Weather', {
            'fields': (
                'weather_conditions', 'temperature', 'wind_direction', 'wind_speed',
                'barometric_pressure', 'humidity', 'weather_description', 'weather_captured_at',
            ),
            'classes': ('collapse',)
        }),
        ('Moon', {
            'fields': (
                'moon_phase_name', 'moon_illumination', 'moon_age', 'moon_icon',
                'fishing_quality', 'moon_fishing_tip', 'moon_data_captured_at',
            ),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('species', 'session__user')


@admin.register(CatchAlbum)
class CatchAlbumAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'is_public', 'is_session_album', 'fishing_session', 'created_at']
    list_filter = ['is_public', 'is_session_album']
    search_fields = ['name', 'user__username']
    readonly_fields = ['created_at']
