"""
Fish species reference catalog.
"""
from decimal import Decimal
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

# decimal(5,2) ceiling shared by sizes and weights
MAX_MEASUREMENT = Decimal('999.99')


class WaterType(models.TextChoices):
    FRESH = 'Fresh', _('Fresh')
    SALT = 'Salt', _('Salt')
    BOTH = 'Both', _('Both')


class FishSpecies(models.Model):
    """
    Reference record for a catchable species.
    Seeded once from species.reference_data and rarely edited afterwards.
    """
    common_name = models.CharField(max_length=100)
    scientific_name = models.CharField(max_length=100, null=True, blank=True)
    water_type = models.CharField(
        max_length=20,
        choices=WaterType.choices,
        help_text=_('Fresh, Salt or Both')
    )
    region = models.CharField(max_length=100, null=True, blank=True)

    # Typical size range in inches
    min_size = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(MAX_MEASUREMENT)]
    )
    max_size = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(MAX_MEASUREMENT)]
    )

    # Open season months; a season may wrap the year end (start 5, end 3)
    season_start = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
        help_text=_('Month the season opens (1-12)')
    )
    season_end = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
        help_text=_('Month the season closes (1-12)')
    )

    stock_image_url = models.CharField(max_length=500, null=True, blank=True)
    regulation_notes = models.CharField(max_length=1000, null=True, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'fish_species'
        verbose_name = _('Fish Species')
        verbose_name_plural = _('Fish Species')
        ordering = ['common_name']
        indexes = [
            models.Index(fields=['water_type', 'region'], name='fish_species_water_region_idx'),
            models.Index(fields=['is_active'], name='fish_species_active_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(min_size__isnull=True) | models.Q(min_size__gte=0, min_size__lte=MAX_MEASUREMENT),
                name='fish_species_min_size_range',
            ),
            models.CheckConstraint(
                condition=models.Q(max_size__isnull=True) | models.Q(max_size__gte=0, max_size__lte=MAX_MEASUREMENT),
                name='fish_species_max_size_range',
            ),
            models.CheckConstraint(
                condition=models.Q(season_start__isnull=True) | models.Q(season_start__gte=1, season_start__lte=12),
                name='fish_species_season_start_month',
            ),
            models.CheckConstraint(
                condition=models.Q(season_end__isnull=True) | models.Q(season_end__gte=1, season_end__lte=12),
                name='fish_species_season_end_month',
            ),
        ]

    def __str__(self):
        if self.scientific_name:
            return f"{self.common_name} ({self.scientific_name})"
        return self.common_name

    def is_in_season(self, month):
        """Check whether the given month (1-12) falls in the open season."""
        if self.season_start is None or self.season_end is None:
            return True
        if self.season_start <= self.season_end:
            return self.season_start <= month <= self.season_end
        # Season wraps the year end
        return month >= self.season_start or month <= self.season_end
