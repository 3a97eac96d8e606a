"""
Fishing log models for Fish-Smart.
A session holds catches; albums collect catches through AlbumCatch.
"""
from decimal import Decimal
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from catalog.models import AvatarPose, Background, BaitsLures, FishingEquipment, Outfit
from species.models import MAX_MEASUREMENT, FishSpecies, WaterType

MEASUREMENT_VALIDATORS = [MinValueValidator(Decimal('0')), MaxValueValidator(MAX_MEASUREMENT)]


class SmartCatchProfile(models.Model):
    """
    Fish-Smart settings for a member. Exactly one per user.
    """
    SUBSCRIPTION_CHOICES = [
        ('Free', 'Free'),
        ('Premium', 'Premium'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='smart_catch_profile'
    )
    display_name = models.CharField(max_length=100, null=True, blank=True)
    subscription_type = models.CharField(
        max_length=20,
        choices=SUBSCRIPTION_CHOICES,
        default='Free'
    )
    preferred_water_type = models.CharField(
        max_length=20,
        choices=WaterType.choices,
        default=WaterType.BOTH
    )
    default_region = models.CharField(max_length=100, null=True, blank=True)
    voice_activation_enabled = models.BooleanField(default=False)
    auto_location_enabled = models.BooleanField(default=False)
    watermark_enabled = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'smart_catch_profiles'
        verbose_name = _('Smart Catch Profile')
        verbose_name_plural = _('Smart Catch Profiles')

    def __str__(self):
        return f"{self.display_name or self.user.username} ({self.subscription_type})"

    @property
    def is_premium(self):
        return self.subscription_type == 'Premium'

    @classmethod
    def get_or_create_for_user(cls, user):
        """Return the user's profile, creating a free one on first use."""
        profile, _created = cls.objects.get_or_create(user=user)
        return profile


class UserAvatar(models.Model):
    """An avatar image a member can place into composed catch photos."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='fishing_avatars'
    )
    name = models.CharField(max_length=100, null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    is_user_uploaded = models.BooleanField(default=False)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'user_avatars'
        verbose_name = _('User Avatar')
        verbose_name_plural = _('User Avatars')
        ordering = ['-is_default', '-created_at']
        indexes = [
            models.Index(fields=['user'], name='user_avatars_user_idx'),
        ]

    def __str__(self):
        return self.name or f"Avatar {self.pk}"

    def make_default(self):
        """Make this the user's default avatar, clearing any previous default."""
        UserAvatar.objects.filter(user_id=self.user_id, is_default=True).exclude(pk=self.pk).update(is_default=False)
        self.is_default = True
        self.save(update_fields=['is_default'])


class FishingSession(models.Model):
    """
    One outing by a member.
    Deleting a session deletes its catches and its session album.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='fishing_sessions'
    )
    session_date = models.DateTimeField()
    water_type = models.CharField(max_length=20, choices=WaterType.choices)
    location_name = models.CharField(max_length=200, null=True, blank=True)
    latitude = models.DecimalField(
        max_digits=10,
        decimal_places=8,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('-90')), MaxValueValidator(Decimal('90'))]
    )
    longitude = models.DecimalField(
        max_digits=11,
        decimal_places=8,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('-180')), MaxValueValidator(Decimal('180'))]
    )

    # Environmental snapshot
    weather_conditions = models.CharField(max_length=200, null=True, blank=True)
    temperature = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    tide_conditions = models.CharField(max_length=100, null=True, blank=True)
    wind_direction = models.CharField(max_length=50, null=True, blank=True)
    wind_speed = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    moon_phase = models.CharField(max_length=50, null=True, blank=True)
    barometric_pressure = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)

    # Equipment used
    rod_reel_setup = models.ForeignKey(
        FishingEquipment,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fishing_sessions'
    )
    primary_bait_lure = models.ForeignKey(
        BaitsLures,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fishing_sessions'
    )

    notes = models.CharField(max_length=1000, null=True, blank=True)
    voice_notes_url = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'fishing_sessions'
        verbose_name = _('Fishing Session')
        verbose_name_plural = _('Fishing Sessions')
        ordering = ['-session_date']
        indexes = [
            models.Index(fields=['user', 'session_date', 'water_type'], name='fishing_sess_user_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(latitude__isnull=True) | models.Q(latitude__gte=-90, latitude__lte=90),
                name='fishing_session_latitude_range',
            ),
            models.CheckConstraint(
                condition=models.Q(longitude__isnull=True) | models.Q(longitude__gte=-180, longitude__lte=180),
                name='fishing_session_longitude_range',
            ),
        ]

    def __str__(self):
        return f"{self.user.username} - {self.location_name or self.water_type} ({self.session_date.date()})"

    @property
    def has_location(self):
        """Check if session has valid location data."""
        return self.latitude is not None and self.longitude is not None

    def get_location_coords(self):
        """Return location as a (lat, lon) tuple of Decimals or None."""
        if self.has_location:
            return (self.latitude, self.longitude)
        return None

    def complete(self):
        """Mark the session finished."""
        self.is_completed = True
        self.completed_at = timezone.now()
        self.save(update_fields=['is_completed', 'completed_at'])


class Catch(models.Model):
    """
    A fish recorded during a session.
    Reference links (species, avatar, pose, background, outfit) are
    restricted: the referenced row cannot be deleted while catches use it.
    """
    session = models.ForeignKey(
        FishingSession,
        on_delete=models.CASCADE,
        related_name='catches'
    )
    species = models.ForeignKey(
        FishSpecies,
        on_delete=models.RESTRICT,
        related_name='catches'
    )
    size = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=MEASUREMENT_VALIDATORS,
        help_text=_('Length in inches')
    )
    weight = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=MEASUREMENT_VALIDATORS,
        help_text=_('Weight in pounds')
    )
    catch_time = models.DateTimeField(null=True, blank=True)
    rig_used = models.CharField(max_length=200, null=True, blank=True)
    lure_used = models.CharField(max_length=200, null=True, blank=True)

    # Photos
    photo_url = models.CharField(max_length=500, null=True, blank=True)
    composite_image_url = models.CharField(max_length=500, null=True, blank=True)
    watermarked_image_url = models.CharField(max_length=500, null=True, blank=True)

    # Photo composition selections
    avatar = models.ForeignKey(
        UserAvatar,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='catches'
    )
    pose = models.ForeignKey(
        AvatarPose,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='catches'
    )
    background = models.ForeignKey(
        Background,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='catches'
    )
    outfit = models.ForeignKey(
        Outfit,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='catches'
    )

    show_species_name = models.BooleanField(default=False)
    show_size = models.BooleanField(default=False)
    is_shared = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    # Weather at catch time
    weather_conditions = models.CharField(max_length=200, null=True, blank=True)
    temperature = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    wind_direction = models.CharField(max_length=50, null=True, blank=True)
    wind_speed = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    barometric_pressure = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)
    humidity = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MaxValueValidator(100)]
    )
    weather_description = models.CharField(max_length=500, null=True, blank=True)
    weather_captured_at = models.DateTimeField(null=True, blank=True)

    # Moon phase at catch time
    moon_phase_name = models.CharField(max_length=50, null=True, blank=True)
    moon_illumination = models.FloatField(null=True, blank=True)
    moon_age = models.FloatField(null=True, blank=True)
    moon_icon = models.CharField(max_length=10, null=True, blank=True)
    fishing_quality = models.CharField(max_length=20, null=True, blank=True)
    moon_fishing_tip = models.CharField(max_length=500, null=True, blank=True)
    moon_data_captured_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'catches'
        verbose_name = _('Catch')
        verbose_name_plural = _('Catches')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['session'], name='catches_session_idx'),
            models.Index(fields=['species'], name='catches_species_idx'),
            models.Index(fields=['is_shared'], name='catches_is_shared_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(size__gte=0, size__lte=MAX_MEASUREMENT),
                name='catch_size_range',
            ),
            models.CheckConstraint(
                condition=models.Q(weight__isnull=True) | models.Q(weight__gte=0, weight__lte=MAX_MEASUREMENT),
                name='catch_weight_range',
            ),
            models.CheckConstraint(
                condition=models.Q(humidity__isnull=True) | models.Q(humidity__lte=100),
                name='catch_humidity_range',
            ),
        ]

    def __str__(self):
        return f"{self.species.common_name} - {self.size}in ({self.session_id})"

    @property
    def display_image_url(self):
        """Get URL for display image (watermarked, composite or original photo)."""
        return self.watermarked_image_url or self.composite_image_url or self.photo_url


class CatchAlbum(models.Model):
    """
    A member's collection of catches.
    Session albums are created with their session and deleted with it.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='catch_albums'
    )
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, null=True, blank=True)
    cover_image_url = models.CharField(max_length=500, null=True, blank=True)
    is_public = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)
    fishing_session = models.ForeignKey(
        FishingSession,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='albums'
    )
    is_session_album = models.BooleanField(default=False)

    class Meta:
        db_table = 'catch_albums'
        verbose_name = _('Catch Album')
        verbose_name_plural = _('Catch Albums')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user'], name='catch_albums_user_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.user.username})"


class AlbumCatch(models.Model):
    """
    Membership of a catch in an album, keyed by (album, catch).
    Deleting an album removes its memberships; a catch that still belongs
    to an album cannot be deleted.
    """
    pk = models.CompositePrimaryKey('album_id', 'catch_id')
    album = models.ForeignKey(
        CatchAlbum,
        on_delete=models.CASCADE,
        related_name='album_catches'
    )
    catch = models.ForeignKey(
        Catch,
        on_delete=models.RESTRICT,
        related_name='album_entries'
    )
    added_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'album_catches'
        verbose_name = _('Album Catch')
        verbose_name_plural = _('Album Catches')
        ordering = ['added_at']

    def __str__(self):
        return f"Album {self.album_id} - Catch {self.catch_id}"
