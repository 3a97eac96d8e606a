"""
Theme color models.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _


class ColorVar(models.Model):
    """
    A site color exposed as a CSS custom property.
    Seeded from the var() fallbacks in site-colors.css.
    """
    name = models.CharField(
        max_length=50,
        help_text=_('Custom property name including the leading "--"')
    )
    value = models.CharField(
        max_length=7,
        help_text=_('Hex color such as #1a2b3c')
    )

    class Meta:
        db_table = 'color_vars'
        verbose_name = _('Color Variable')
        verbose_name_plural = _('Color Variables')
        ordering = ['name']

    def __str__(self):
        return f"{self.name}: {self.value}"
