"""
Product Catalog XML Parser

Modules:
    models      - Data models (CatalogProduct, ProductOption)
    common      - Shared utilities (config loader, logging setup, constants)
    extraction  - Ingestion of raw product records and product/option parsing
    export      - JSON export of parsed products
"""
