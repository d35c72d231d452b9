"""
Variation Attribute Parser

Reads <variation-attribute> declarations and registers the display name
of each color value in the shared translation table:

    <variation-attribute attribute-id="f54ProductColor">
        <variation-attribute-values>
            <variation-attribute-value value="RED">
                <display-value xml:lang="x-default">Red</display-value>
            </variation-attribute-value>
        </variation-attribute-values>
    </variation-attribute>

Declarations of other dimensions (size, ...) are ignored.
"""

import logging
from typing import Optional

from lxml import etree

from ...common.config_loader import CatalogSettings
from ..containers import TranslationTable

logger = logging.getLogger(__name__)


class VariationAttributeParser:
    """
    Fills a TranslationTable from color variation-attribute declarations.

    Usage:
        parser = VariationAttributeParser(translations)
        added = parser.scan(variation_attribute_element)
    """

    def __init__(self, translations: TranslationTable, settings: Optional[CatalogSettings] = None):
        self.translations = translations
        self.settings = settings or CatalogSettings()

    def is_color_attribute(self, element: etree._Element) -> bool:
        return element.get('attribute-id') == self.settings.color_attribute_id

    def scan(self, element: etree._Element) -> int:
        """
        Register the color values declared by one variation-attribute.

        A value without a <display-value> is not registered. Codes that
        are already known keep their first display name.

        Args:
            element: <variation-attribute> element

        Returns:
            Number of codes newly added to the table
        """
        if not self.is_color_attribute(element):
            return 0

        added = 0
        for value_elem in element.iter('{*}variation-attribute-value'):
            code = value_elem.get('value')
            display_value = self._first_display_value(value_elem)
            if display_value is None:
                logger.debug("No display-value for color code %r", code)
                continue
            if self.translations.add_if_absent(code, display_value):
                added += 1

        return added

    @staticmethod
    def _first_display_value(value_elem: etree._Element) -> Optional[str]:
        display_elem = next(value_elem.iter("{*}display-value"), None)
        if display_elem is None:
            return None
        return display_elem.text or ""
