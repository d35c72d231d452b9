"""
Extraction Errors

CatalogParseError is fatal (the document cannot be ingested). The lookup
errors are raised while parsing a single product and are isolated per
record by CatalogExtractor.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog extraction errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CatalogParseError(CatalogError):
    """Source document is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class MissingVariantError(CatalogError, KeyError):
    """A <variant> references a product-id that was never ingested."""

    def __init__(self, option_id: Optional[str], parent_id: str):
        super().__init__(
            f"Variant {option_id!r} of product {parent_id!r} not found in catalog"
        )
        self.option_id = option_id
        self.parent_id = parent_id


class MissingTranslationError(CatalogError, KeyError):
    """A variant's color code has no display name in the translation table."""

    def __init__(self, code: str):
        super().__init__(f"No display name registered for color code {code!r}")
        self.code = code
