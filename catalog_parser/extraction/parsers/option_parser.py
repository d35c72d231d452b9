"""
Option Parser

Resolves a <variant product-id="..."/> reference into a ProductOption by
reading the custom attributes of the referenced variant record:

    <custom-attribute attribute-id="f54ProductColor">RED</custom-attribute>
    <custom-attribute attribute-id="f54ProductSize">M</custom-attribute>

A color-only option is named after the color. When the variant also has
a real size, the size becomes the option name and the color moves to the
second label.
"""

from typing import Mapping, Optional

from lxml import etree

from ...common.config_loader import CatalogSettings
from ...models import ProductOption
from ..containers import TranslationTable
from ..errors import MissingVariantError


class OptionParser:
    """
    Builds product options from variant records.

    Usage:
        parser = OptionParser(raw_records, translations)
        option = parser.resolve("VAR-RED-M", parent_id="PROD-1")
    """

    def __init__(
        self,
        raw_records: Mapping[str, str],
        translations: TranslationTable,
        settings: Optional[CatalogSettings] = None,
    ):
        self.raw_records = raw_records
        self.translations = translations
        self.settings = settings or CatalogSettings()

    def resolve(self, option_id: Optional[str], parent_id: str) -> ProductOption:
        """
        Resolve a variant into an option of its parent product.

        Args:
            option_id: product-id of the variant record
            parent_id: product-id of the owning product

        Returns:
            ProductOption for the variant

        Raises:
            MissingVariantError: If no record was ingested for option_id
            MissingTranslationError: If the variant's color code is unknown
        """
        raw_xml = self.raw_records.get(option_id) if option_id else None
        if raw_xml is None:
            raise MissingVariantError(option_id, parent_id)

        option = ProductOption(product_id=parent_id, option_id=option_id)
        root = etree.fromstring(raw_xml)

        for attribute in root.iter('{*}custom-attribute'):
            attribute_id = attribute.get('attribute-id')
            value = attribute.text or ""

            if attribute_id == self.settings.color_attribute_id:
                option.label1 = self.settings.color_label
                option.label1_title = self.settings.color_label_title
                option.name = self.translations.lookup(value)

            elif attribute_id == self.settings.size_attribute_id:
                if value == self.settings.no_size_sentinel:
                    continue
                # Color and size: size is the option name, color the second label
                option.label2 = option.name
                option.label2_title = self.settings.size_label_title
                option.name = value

        return option
