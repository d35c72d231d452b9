"""
Catalog Extractor

Loads products from a catalog XML file in two stages:
1. Ingestion - stream the document once into raw product records
2. Extraction - parse every sellable record in parallel

Features:
- Per-record error isolation with failed record tracking
- Thread pool over records (workers=1 runs inline)
- Stage timings and extraction statistics
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from types import MappingProxyType
from typing import List, Mapping, Optional

from lxml import etree

from ..common.config_loader import CatalogSettings, load_catalog_settings
from ..models import CatalogProduct
from .containers import ProductCollection, TranslationTable
from .errors import CatalogError
from .ingestion import Source, load_raw_records
from .parsers import OptionParser, ProductParser, VariationAttributeParser

logger = logging.getLogger(__name__)

# Errors that drop a single record instead of the whole batch
RECORD_ERRORS = (CatalogError, etree.XMLSyntaxError, KeyError, ValueError,
                 TypeError, AttributeError)


class CatalogExtractor:
    """Catalog extraction with per-record isolation and parallel parsing."""

    def __init__(
        self,
        settings: Optional[CatalogSettings] = None,
        workers: Optional[int] = None,
        continue_on_error: bool = True,
    ):
        """
        Initialize the extractor.

        Args:
            settings: Catalog vocabulary (loaded from config/catalog.yaml if None)
            workers: Worker threads (None = from settings, 0 = pool default, 1 = inline)
            continue_on_error: Whether to skip records that fail to parse
        """
        self.settings = settings or load_catalog_settings()
        self.workers = self.settings.workers if workers is None else workers
        self.continue_on_error = continue_on_error

        # Shared state
        self.raw_records: Mapping[str, str] = MappingProxyType({})
        self.translations = TranslationTable()
        self.products = ProductCollection()
        self.failures: list[dict] = []
        self._failures_lock = threading.Lock()

        # Metrics
        self.total_candidates = 0
        self.timings: dict[str, float] = {}

    def load_raw_records(self, source: Source) -> Mapping[str, str]:
        """Run the ingestion stage and keep its records for extraction."""
        start = datetime.now()
        self.raw_records = load_raw_records(
            source,
            product_tag=self.settings.product_tag,
            id_attribute=self.settings.id_attribute,
        )
        self.timings['ingestion'] = (datetime.now() - start).total_seconds()
        logger.info("Loaded %d raw records in %.2f seconds",
                    len(self.raw_records), self.timings['ingestion'])
        return self.raw_records

    def extract_all(self, raw_records: Optional[Mapping[str, str]] = None) -> List[CatalogProduct]:
        """
        Parse every record that lists variants into a product.

        Records without the variants marker are variant-only leaves and are
        skipped. A record that fails to parse is logged, recorded in
        self.failures and left out of the result.

        Args:
            raw_records: Records to extract (defaults to the last ingestion)

        Returns:
            Parsed products, in no particular order
        """
        if raw_records is not None:
            self.raw_records = raw_records
            # Timings of an earlier ingestion belong to a different batch
            self.timings = {}

        self.products.clear()
        self.translations.clear()
        self.failures = []

        start = datetime.now()
        parser = self._build_parser(self.raw_records)

        candidates = [(product_id, raw_xml) for product_id, raw_xml in self.raw_records.items()
                      if self.has_variants(raw_xml)]
        self.total_candidates = len(candidates)

        logger.info("Extracting %d products from %d records",
                    self.total_candidates, len(self.raw_records))

        if self.workers == 1:
            for product_id, raw_xml in candidates:
                self._process_record(parser, product_id, raw_xml)
        else:
            with ThreadPoolExecutor(max_workers=self.workers or None) as executor:
                futures = [executor.submit(self._process_record, parser, product_id, raw_xml)
                           for product_id, raw_xml in candidates]
                for future in futures:
                    future.result()

        self.timings['extraction'] = (datetime.now() - start).total_seconds()
        logger.info("Finished mapping in %.2f seconds (%d products, %d failed)",
                    self.timings['extraction'], len(self.products), len(self.failures))

        return self.products.snapshot()

    def load_products_from_xml(self, source: Source) -> List[CatalogProduct]:
        """
        Load and parse all products from a catalog XML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            CatalogParseError: If the document is not well-formed
        """
        self.load_raw_records(source)
        products = self.extract_all()
        self.timings['total'] = self.timings['ingestion'] + self.timings['extraction']
        logger.info("Total execution time %.2f seconds", self.timings['total'])
        return products

    def has_variants(self, raw_xml: str) -> bool:
        """
        Check a raw record for the variants container.

        Serialization writes an empty <variants></variants> as <variants/>,
        so both forms count.
        """
        marker = self.settings.variants_marker
        if marker in raw_xml:
            return True
        if marker.endswith(">"):
            return marker[:-1] + "/>" in raw_xml
        return False

    def _build_parser(self, raw_records: Mapping[str, str]) -> ProductParser:
        variation_parser = VariationAttributeParser(self.translations, self.settings)
        option_parser = OptionParser(raw_records, self.translations, self.settings)
        return ProductParser(variation_parser, option_parser, self.settings)

    def _process_record(self, parser: ProductParser, product_id: str, raw_xml: str) -> None:
        """Parse one record; failures are isolated unless continue_on_error is off."""
        try:
            product = parser.parse(raw_xml)
        except RECORD_ERRORS as e:
            error_msg = f"{type(e).__name__}: {e}"
            logger.error("Error parsing product %s: %s", product_id, error_msg)

            with self._failures_lock:
                self.failures.append({
                    "product_id": product_id,
                    "error": error_msg,
                    "timestamp": datetime.now().isoformat(),
                })

            if not self.continue_on_error:
                raise
            return

        self.products.add(product)
        logger.debug("OK: %s (%d options)", product_id, len(product.options))

    def get_stats(self) -> dict:
        """Return extraction statistics."""
        return {
            'raw_records': len(self.raw_records),
            'candidates': self.total_candidates,
            'total_extracted': len(self.products),
            'failed_products': len(self.failures),
            'translations': len(self.translations),
            'timings': dict(self.timings),
        }
