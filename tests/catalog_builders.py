"""Builders for catalog XML documents used in tests."""

import io

CATALOG_NS = "http://www.demandware.com/xml/impex/catalog/2006-10-31"


def build_catalog(*products: str) -> io.BytesIO:
    """Wrap <product> snippets in a catalog document."""
    body = "\n".join(products)
    xml = f'<?xml version="1.0" encoding="UTF-8"?>\n<catalog xmlns="{CATALOG_NS}">\n{body}\n</catalog>'
    return io.BytesIO(xml.encode("utf-8"))


def color_declaration(*values: tuple) -> str:
    """Build a color variation-attribute from (code, display name) pairs."""
    entries = "".join(
        f'<variation-attribute-value value="{code}">'
        f'<display-value xml:lang="x-default">{display}</display-value>'
        f'</variation-attribute-value>'
        for code, display in values
    )
    return (
        '<variation-attribute attribute-id="f54ProductColor" variation-attribute-id="f54ProductColor">'
        f'<variation-attribute-values>{entries}</variation-attribute-values>'
        '</variation-attribute>'
    )


def variant_record(product_id: str, color: str = "", size: str = "") -> str:
    """Build a variant-only product record."""
    attributes = ""
    if color:
        attributes += f'<custom-attribute attribute-id="f54ProductColor">{color}</custom-attribute>'
    if size:
        attributes += f'<custom-attribute attribute-id="f54ProductSize">{size}</custom-attribute>'
    return (
        f'<product product-id="{product_id}">'
        f'<custom-attributes>{attributes}</custom-attributes>'
        '</product>'
    )


def sellable_record(product_id: str, variant_ids, declarations: str = "", name: str = "") -> str:
    """Build a product record that lists variants."""
    variants = "".join(f'<variant product-id="{v}"/>' for v in variant_ids)
    return (
        f'<product product-id="{product_id}">'
        f'<display-name xml:lang="x-default">{name or product_id}</display-name>'
        f'<variations><attributes>{declarations}</attributes>'
        f'<variants>{variants}</variants></variations>'
        '</product>'
    )
