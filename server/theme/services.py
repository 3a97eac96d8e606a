# theme/services.py
import logging
import re
from typing import List, Tuple
from django.conf import settings
from django.db import transaction
from theme.models import ColorVar

logger = logging.getLogger(__name__)

# Matches var() fallbacks such as `var(--brand-blue, #1a2b3c)`
COLOR_VAR_PATTERN = re.compile(r'(--(?P<name>[\w-]+))\s*,\s*(?P<value>#[0-9a-fA-F]{3,6})\)')


class ColorVarSeeder:
    """Loads site colors from a stylesheet into ColorVar rows"""

    @classmethod
    def extract_color_vars(cls, css_text: str) -> List[Tuple[str, str]]:
        """
        Find custom property fallbacks in stylesheet text.

        Returns:
            (name, value) pairs in document order, name including the leading "--"
        """
        return [
            (match.group(1), match.group('value'))
            for match in COLOR_VAR_PATTERN.finditer(css_text)
        ]

    @classmethod
    def seed(cls, css_text: str) -> int:
        """
        Insert every color from the stylesheet that is not stored yet.

        Existing names are read in one query and new rows are written in
        one batch.

        Returns:
            Number of colors inserted
        """
        matches = cls.extract_color_vars(css_text)
        logger.info(f"Found {len(matches)} color matches in stylesheet")

        with transaction.atomic():
            known_names = set(ColorVar.objects.values_list('name', flat=True))
            max_name_length = ColorVar._meta.get_field('name').max_length

            colors_to_add = []
            for name, value in matches:
                if name in known_names:
                    continue
                if len(name) > max_name_length:
                    logger.warning(f"Skipping color {name}: name longer than {max_name_length} characters")
                    continue
                logger.debug(f"Adding color {name} with value {value}")
                colors_to_add.append(ColorVar(name=name, value=value))
                known_names.add(name)

            if colors_to_add:
                ColorVar.objects.bulk_create(colors_to_add)

        logger.info(f"Seeded {len(colors_to_add)} new color variables")
        return len(colors_to_add)

    @classmethod
    def seed_from_file(cls, css_path=None) -> int:
        """Read a stylesheet (defaults to COLOR_VARS_CSS_PATH) and seed its colors"""
        css_path = css_path or settings.COLOR_VARS_CSS_PATH
        with open(css_path, encoding='utf-8') as css_file:
            css_text = css_file.read()
        return cls.seed(css_text)
