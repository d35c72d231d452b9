"""
Catalog extraction modules.

Modules:
    ingestion - Streaming split of the catalog into raw product records
    catalog_extractor - CatalogExtractor running ingestion + parallel parsing
    containers - Thread-safe TranslationTable and ProductCollection
    errors - Extraction error hierarchy
    parsers - Product, variation-attribute and option parsers
"""

from .catalog_extractor import CatalogExtractor
from .containers import ProductCollection, TranslationTable
from .errors import (
    CatalogError,
    CatalogParseError,
    MissingTranslationError,
    MissingVariantError,
)
from .ingestion import load_raw_records
from .parsers import (
    OptionParser,
    ProductParser,
    VariationAttributeParser,
)

__all__ = [
    # Extraction
    'CatalogExtractor',
    'load_raw_records',
    # Shared containers
    'TranslationTable',
    'ProductCollection',
    # Errors
    'CatalogError',
    'CatalogParseError',
    'MissingVariantError',
    'MissingTranslationError',
    # Parsers
    'ProductParser',
    'VariationAttributeParser',
    'OptionParser',
]
