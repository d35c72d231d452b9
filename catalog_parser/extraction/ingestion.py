"""
Catalog Ingestion

Streams a catalog XML document once and splits it into raw product
records: product-id -> serialized <product> element (with descendants).

Records are not interpreted here; parsing happens later, per record,
in the extraction stage.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Dict, Mapping, Union

from lxml import etree

from ..common import constants
from .errors import CatalogParseError

logger = logging.getLogger(__name__)

Source = Union[str, Path, BinaryIO]


def local_name(tag) -> str:
    """Strip the namespace from an element tag ('{ns}product' -> 'product')."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}", 1)[1] if "}" in tag else tag


def load_raw_records(
    source: Source,
    product_tag: str = constants.PRODUCT_TAG,
    id_attribute: str = constants.PRODUCT_ID_ATTRIBUTE,
) -> Mapping[str, str]:
    """
    Split a catalog document into raw product records.

    Only outermost product elements become records; a product nested in
    another product stays part of its parent's sub-tree. When two records
    share a product-id, the first one wins.

    Args:
        source: Path to the XML file, or a binary file object
        product_tag: Local name of the record element
        id_attribute: Attribute holding the record identifier

    Returns:
        Read-only mapping of product-id to serialized XML

    Raises:
        FileNotFoundError: If source is a path that doesn't exist
        CatalogParseError: If the document is not well-formed
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Catalog XML not found: {path}")
        source = str(path)

    records: Dict[str, str] = {}
    duplicates = 0
    depth = 0

    context = etree.iterparse(
        source,
        events=("start", "end"),
        tag=f"{{*}}{product_tag}",
        resolve_entities=False,
        huge_tree=True,
    )

    try:
        for event, elem in context:
            if event == "start":
                depth += 1
                continue

            depth -= 1
            if depth > 0:
                # Nested product, serialized with its outer record
                continue

            product_id = elem.get(id_attribute)
            if not product_id:
                logger.warning("Skipping <%s> without %s (line %s)",
                               product_tag, id_attribute, elem.sourceline)
            elif product_id in records:
                duplicates += 1
                logger.debug("Duplicate product-id dropped: %s", product_id)
            else:
                records[product_id] = etree.tostring(elem, encoding="unicode", with_tail=False)

            # Free memory held by already-captured records
            elem.clear()
            parent = elem.getparent()
            if parent is not None:
                while elem.getprevious() is not None:
                    del parent[0]
    except etree.XMLSyntaxError as e:
        line = e.position[0] if e.position else None
        raise CatalogParseError(f"Malformed catalog XML: {e}", line=line) from e

    logger.debug("Ingested %d records (%d duplicates dropped)", len(records), duplicates)
    return MappingProxyType(records)
