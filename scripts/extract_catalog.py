#!/usr/bin/env python3
"""
Catalog Extraction Script

Parses a product catalog XML file into products with their variant
options and optionally writes them to JSON.

Usage:
    python3 scripts/extract_catalog.py --input data/catalog.xml
    python3 scripts/extract_catalog.py --input data/catalog.xml --output output/products.json
    python3 scripts/extract_catalog.py --input data/catalog.xml --output products.jsonl --jsonl
    python3 scripts/extract_catalog.py --input data/catalog.xml --workers 1 --verbose
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from catalog_parser.common.log_config import setup_logging
from catalog_parser.export import JSONExporter
from catalog_parser.extraction import CatalogExtractor, CatalogParseError
from catalog_parser.extraction.catalog_extractor import RECORD_ERRORS

logger = logging.getLogger(__name__)


def print_summary(extractor: CatalogExtractor, output_path: str = "") -> None:
    """Print extraction summary."""
    stats = extractor.get_stats()
    timings = stats['timings']

    print("\n" + "=" * 60)
    print("Extraction Summary")
    print("=" * 60)
    print("\n  Records:")
    print(f"     Raw records:        {stats['raw_records']}")
    print(f"     With variants:      {stats['candidates']}")
    print(f"     Color translations: {stats['translations']}")
    print("\n  Products:")
    print(f"     Extracted:          {stats['total_extracted']}")
    print(f"     Failed:             {stats['failed_products']}")
    print("\n  Performance:")
    print(f"     Ingestion:          {timings.get('ingestion', 0):.2f} seconds")
    print(f"     Extraction:         {timings.get('extraction', 0):.2f} seconds")
    print(f"     Total:              {timings.get('total', 0):.2f} seconds")
    if output_path:
        print("\n  Output files:")
        print(f"     JSON:   {output_path}")
    if extractor.failures:
        print("\n  Failed products:")
        for failure in extractor.failures[:20]:
            print(f"     {failure['product_id']}: {failure['error']}")
        if len(extractor.failures) > 20:
            print(f"     ... and {len(extractor.failures) - 20} more")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Extract products and variant options from a catalog XML file"
    )
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Catalog XML file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output JSON file (default: no file output)"
    )
    parser.add_argument(
        "--jsonl",
        action="store_true",
        help="Write one JSON object per line instead of a JSON array"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Worker threads for extraction (default: from config, 1 = no threads)"
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop if any product fails to parse (default: skip failed products)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not os.path.exists(args.input):
        print(f"Catalog file not found: {args.input}")
        sys.exit(1)

    extractor = CatalogExtractor(
        workers=args.workers,
        continue_on_error=not args.stop_on_error,
    )

    try:
        products = extractor.load_products_from_xml(args.input)
    except CatalogParseError as e:
        logger.error("Cannot read catalog: %s", e)
        sys.exit(1)
    except RECORD_ERRORS as e:
        logger.error("Stopping due to error (omit --stop-on-error to skip failed products): %s", e)
        sys.exit(1)

    if args.output:
        exporter = JSONExporter()
        if args.jsonl:
            exporter.export_lines(products, args.output)
        else:
            exporter.export(products, args.output)

    print_summary(extractor, args.output or "")


if __name__ == "__main__":
    main()
