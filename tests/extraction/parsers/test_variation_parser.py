"""Tests for catalog_parser/extraction/parsers/variation_parser.py"""

from lxml import etree

from catalog_parser.common.config_loader import CatalogSettings
from catalog_parser.extraction import VariationAttributeParser
from catalog_builders import color_declaration


def _element(xml: str):
    return etree.fromstring(xml)


class TestVariationAttributeParser:
    def test_registers_color_values(self, translations):
        parser = VariationAttributeParser(translations)
        added = parser.scan(_element(color_declaration(("RED", "Red"), ("BLUE", "Blue"))))
        assert added == 2
        assert translations.as_dict() == {"RED": "Red", "BLUE": "Blue"}

    def test_first_display_name_wins_within_declaration(self, translations):
        parser = VariationAttributeParser(translations)
        parser.scan(_element(color_declaration(("RED", "Red"), ("RED", "Crimson"))))
        assert translations.lookup("RED") == "Red"

    def test_first_display_name_wins_across_declarations(self, translations):
        parser = VariationAttributeParser(translations)
        parser.scan(_element(color_declaration(("RED", "Red"))))
        added = parser.scan(_element(color_declaration(("RED", "Crimson"))))
        assert added == 0
        assert translations.lookup("RED") == "Red"

    def test_non_color_attribute_ignored(self, translations):
        parser = VariationAttributeParser(translations)
        xml = (
            '<variation-attribute attribute-id="f54ProductSize">'
            '<variation-attribute-values>'
            '<variation-attribute-value value="M"><display-value>Medium</display-value></variation-attribute-value>'
            '</variation-attribute-values>'
            '</variation-attribute>'
        )
        assert parser.scan(_element(xml)) == 0
        assert len(translations) == 0

    def test_value_without_display_value_not_registered(self, translations):
        parser = VariationAttributeParser(translations)
        xml = (
            '<variation-attribute attribute-id="f54ProductColor">'
            '<variation-attribute-values>'
            '<variation-attribute-value value="RED"/>'
            '<variation-attribute-value value="BLUE"><display-value>Blue</display-value></variation-attribute-value>'
            '</variation-attribute-values>'
            '</variation-attribute>'
        )
        assert parser.scan(_element(xml)) == 1
        assert "RED" not in translations
        assert translations.lookup("BLUE") == "Blue"

    def test_empty_code_not_registered(self, translations):
        parser = VariationAttributeParser(translations)
        parser.scan(_element(color_declaration(("", "Nameless"))))
        assert len(translations) == 0

    def test_namespaced_declaration(self, translations):
        parser = VariationAttributeParser(translations)
        xml = (
            '<variation-attribute xmlns="urn:catalog" attribute-id="f54ProductColor">'
            '<variation-attribute-values>'
            '<variation-attribute-value value="RED"><display-value>Red</display-value></variation-attribute-value>'
            '</variation-attribute-values>'
            '</variation-attribute>'
        )
        parser.scan(_element(xml))
        assert translations.lookup("RED") == "Red"

    def test_configured_color_attribute_id(self, translations):
        settings = CatalogSettings(color_attribute_id="color")
        parser = VariationAttributeParser(translations, settings)
        xml = color_declaration(("RED", "Red")).replace("f54ProductColor", "color")
        assert parser.scan(_element(xml)) == 1
