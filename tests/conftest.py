"""Shared test fixtures."""

from pathlib import Path

import pytest

from catalog_parser.common.config_loader import CatalogSettings
from catalog_parser.extraction import (
    OptionParser,
    ProductParser,
    TranslationTable,
    VariationAttributeParser,
    load_raw_records,
)
from catalog_parser.models import CatalogProduct, ProductOption

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def catalog_path():
    """Path to the sample catalog XML fixture."""
    return FIXTURES_DIR / "catalog.xml"


@pytest.fixture
def raw_records(catalog_path):
    """Raw records ingested from the sample catalog."""
    return load_raw_records(catalog_path)


@pytest.fixture
def settings():
    return CatalogSettings()


@pytest.fixture
def translations():
    return TranslationTable()


@pytest.fixture
def product_parser(raw_records, translations, settings):
    """ProductParser wired to the sample catalog records."""
    return ProductParser(
        VariationAttributeParser(translations, settings),
        OptionParser(raw_records, translations, settings),
        settings,
    )


@pytest.fixture
def sample_product():
    """A parsed product with one color+size option and one color-only option."""
    return CatalogProduct(
        product_id="DRESS-1",
        name="שמלת קיץ",
        description="Light cotton dress",
        description_long="A light cotton dress for warm days.",
        brand="Acme",
        video_link="https://video.example.com/dress",
        options=[
            ProductOption(
                product_id="DRESS-1",
                option_id="DRESS-1-RED-M",
                name="M",
                label1="צבע",
                label1_title="בחר צבע",
                label2="Red",
                label2_title="בחר מידה",
            ),
            ProductOption(
                product_id="DRESS-1",
                option_id="DRESS-1-BLUE-UNI",
                name="Blue",
                label1="צבע",
                label1_title="בחר צבע",
            ),
        ],
    )
