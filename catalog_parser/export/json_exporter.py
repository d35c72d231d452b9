"""
JSON Exporter

Exports parsed catalog products to a JSON array or to JSON Lines
(one product object per line). Non-ASCII text is written as-is.
"""

import json
import logging
import os
from dataclasses import asdict
from typing import Any, Dict, Iterable

from ..models import CatalogProduct

logger = logging.getLogger(__name__)


class JSONExporter:
    """
    Exports products to JSON files.

    Usage:
        exporter = JSONExporter()
        exporter.export(products, "output/products.json")
        exporter.export_lines(products, "output/products.jsonl")
    """

    def __init__(self, indent: int = 2):
        """
        Initialize the exporter.

        Args:
            indent: Indentation for the JSON array format (ignored for JSON Lines)
        """
        self.indent = indent

    def product_to_dict(self, product: CatalogProduct) -> Dict[str, Any]:
        """Convert product (including options) to a plain dictionary."""
        return asdict(product)

    def export(self, products: Iterable[CatalogProduct], output_path: str) -> int:
        """
        Write products as a single JSON array.

        Returns:
            Number of products written
        """
        data = [self.product_to_dict(p) for p in products]
        self._ensure_parent_dir(output_path)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self.indent, ensure_ascii=False)

        logger.info("Exported %d products to %s", len(data), output_path)
        return len(data)

    def export_lines(self, products: Iterable[CatalogProduct], output_path: str) -> int:
        """
        Write products as JSON Lines.

        Returns:
            Number of products written
        """
        self._ensure_parent_dir(output_path)

        count = 0
        with open(output_path, 'w', encoding='utf-8') as f:
            for product in products:
                f.write(json.dumps(self.product_to_dict(product), ensure_ascii=False) + "\n")
                count += 1

        logger.info("Exported %d products to %s", count, output_path)
        return count

    @staticmethod
    def _ensure_parent_dir(output_path: str) -> None:
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
