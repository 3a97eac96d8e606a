"""
Catalog models for composing catch photos.
Sponsors supply outfits, equipment and baits; poses and backgrounds are
picked when a catch photo is composed.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _
from species.models import WaterType


class Sponsor(models.Model):
    """Brand that sponsors outfits, equipment or baits."""
    CATEGORY_CHOICES = [
        ('Clothing', 'Clothing'),
        ('Equipment', 'Equipment'),
        ('BaitsLures', 'Baits & Lures'),
    ]

    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES, null=True, blank=True)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    website_url = models.CharField(max_length=500, null=True, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'sponsors'
        verbose_name = _('Sponsor')
        verbose_name_plural = _('Sponsors')
        ordering = ['name']

    def __str__(self):
        return self.name


class AvatarPose(models.Model):
    """How the angler's avatar holds the fish in a composed photo."""
    CATEGORY_CHOICES = [
        ('TwoHands', 'Two Hands'),
        ('HangingLine', 'Hanging Line'),
        ('CloseUp', 'Close Up'),
        ('Custom', 'Custom'),
    ]

    name = models.CharField(max_length=100)
    description = models.CharField(max_length=200, null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES, null=True, blank=True)
    is_premium = models.BooleanField(default=False)

    class Meta:
        db_table = 'avatar_poses'
        verbose_name = _('Avatar Pose')
        verbose_name_plural = _('Avatar Poses')
        ordering = ['name']

    def __str__(self):
        return self.name


class Background(models.Model):
    """Scene placed behind the angler in a composed photo."""
    CATEGORY_CHOICES = [
        ('Seawall', 'Seawall'),
        ('Beach', 'Beach'),
        ('Pier', 'Pier'),
        ('Boat', 'Boat'),
    ]

    name = models.CharField(max_length=100)
    description = models.CharField(max_length=200, null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES, null=True, blank=True)
    water_type = models.CharField(max_length=20, choices=WaterType.choices, null=True, blank=True)
    is_premium = models.BooleanField(default=False)

    class Meta:
        db_table = 'backgrounds'
        verbose_name = _('Background')
        verbose_name_plural = _('Backgrounds')
        ordering = ['name']
        indexes = [
            models.Index(fields=['water_type', 'is_premium'], name='backgrounds_water_premium_idx'),
        ]

    def __str__(self):
        return self.name


class Outfit(models.Model):
    """Clothing worn by the avatar, optionally sponsored."""
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=200, null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    sponsor = models.ForeignKey(
        Sponsor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='outfits'
    )
    brand_name = models.CharField(max_length=100, null=True, blank=True)
    is_ai_generated = models.BooleanField(default=False)
    is_premium = models.BooleanField(default=False)

    class Meta:
        db_table = 'outfits'
        verbose_name = _('Outfit')
        verbose_name_plural = _('Outfits')
        ordering = ['name']

    def __str__(self):
        return self.name


class FishingEquipment(models.Model):
    """Rod and reel setup used during a fishing session."""
    TYPE_CHOICES = [
        ('SpinCasting', 'Spin Casting'),
        ('BaitCasting', 'Bait Casting'),
        ('FlyRod', 'Fly Rod'),
        ('Spearfishing', 'Spearfishing'),
    ]

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=50, choices=TYPE_CHOICES)
    brand = models.CharField(max_length=100, null=True, blank=True)
    model = models.CharField(max_length=100, null=True, blank=True)
    sponsor = models.ForeignKey(
        Sponsor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fishing_equipment'
    )
    is_ai_generated = models.BooleanField(default=False)
    is_premium = models.BooleanField(default=False)

    class Meta:
        db_table = 'fishing_equipment'
        verbose_name = _('Fishing Equipment')
        verbose_name_plural = _('Fishing Equipment')
        ordering = ['name']
        indexes = [
            models.Index(fields=['type', 'is_premium'], name='fishing_equip_type_premium_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"


class BaitsLures(models.Model):
    """Bait or lure used during a fishing session."""
    TYPE_CHOICES = [
        ('Bait', 'Bait'),
        ('Lure', 'Lure'),
    ]

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=50, choices=TYPE_CHOICES, null=True, blank=True)
    brand = models.CharField(max_length=100, null=True, blank=True)
    color = models.CharField(max_length=50, null=True, blank=True)
    size = models.CharField(max_length=50, null=True, blank=True)
    sponsor = models.ForeignKey(
        Sponsor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='baits_lures'
    )
    is_ai_generated = models.BooleanField(default=False)
    is_premium = models.BooleanField(default=False)

    class Meta:
        db_table = 'baits_lures'
        verbose_name = _('Bait or Lure')
        verbose_name_plural = _('Baits & Lures')
        ordering = ['name']

    def __str__(self):
        return self.name
