"""
Data models for catalog extraction.

This module contains pure data classes with no business logic.
"""

from .product import CatalogProduct, ProductOption

__all__ = ['ProductOption', 'CatalogProduct']
