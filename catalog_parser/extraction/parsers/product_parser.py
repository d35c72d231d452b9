"""
Product Parser

Maps one raw <product> record to a CatalogProduct.

Element to field mapping:
    product/@product-id   -> product_id
    display-name          -> name
    short-description     -> description
    long-description      -> description_long
    brand                 -> brand
    f54ProductVideo       -> video_link (element or custom-attribute)
    variant/@product-id   -> options (resolved by OptionParser)

Variation-attribute declarations are scanned before any variant is
resolved, so their position within the record does not matter.
"""

from typing import Optional

from lxml import etree

from ...common.config_loader import CatalogSettings
from ...models import CatalogProduct
from ..ingestion import local_name
from .option_parser import OptionParser
from .variation_parser import VariationAttributeParser

# Element local name -> CatalogProduct attribute
TEXT_FIELDS = {
    'display-name': 'name',
    'short-description': 'description',
    'long-description': 'description_long',
    'brand': 'brand',
}


class ProductParser:
    """
    Parses raw product XML into CatalogProduct objects.

    Usage:
        parser = ProductParser(variation_parser, option_parser)
        product = parser.parse(raw_xml)
    """

    def __init__(
        self,
        variation_parser: VariationAttributeParser,
        option_parser: OptionParser,
        settings: Optional[CatalogSettings] = None,
    ):
        self.variation_parser = variation_parser
        self.option_parser = option_parser
        self.settings = settings or CatalogSettings()

    def parse(self, raw_xml: str) -> CatalogProduct:
        """
        Parse a single product from its serialized XML.

        Args:
            raw_xml: Serialized <product> element

        Returns:
            Populated CatalogProduct

        Raises:
            lxml.etree.XMLSyntaxError: If raw_xml is not well-formed
            MissingVariantError, MissingTranslationError: From option resolution
        """
        root = etree.fromstring(raw_xml)
        product = CatalogProduct()

        for declaration in root.iter('{*}variation-attribute'):
            self.variation_parser.scan(declaration)

        self._handle_element(root, product)
        return product

    def _handle_element(self, element: etree._Element, product: CatalogProduct) -> None:
        """Assign one element to its product field, then walk its children."""
        name = local_name(element.tag)

        if name == 'variation-attribute':
            # Already scanned; its display-name children are not product fields
            return

        if name == self.settings.product_tag:
            product.product_id = element.get(self.settings.id_attribute) or ""

        elif name in TEXT_FIELDS:
            setattr(product, TEXT_FIELDS[name], element.text or "")

        elif name == self.settings.video_field:
            product.video_link = element.text or ""

        elif name == 'custom-attribute':
            if element.get('attribute-id') == self.settings.video_field:
                product.video_link = element.text or ""

        elif name == 'variant':
            option = self.option_parser.resolve(
                element.get(self.settings.id_attribute), product.product_id
            )
            product.options.append(option)

        for child in element.iterchildren(tag=etree.Element):
            self._handle_element(child, product)
