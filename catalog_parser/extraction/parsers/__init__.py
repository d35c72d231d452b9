"""
Parsers for raw product records.

Each parser handles one part of a record:
- ProductParser: product fields and the variant list
- VariationAttributeParser: color code -> display name declarations
- OptionParser: variant records resolved into product options
"""

from .option_parser import OptionParser
from .product_parser import ProductParser
from .variation_parser import VariationAttributeParser

__all__ = [
    'ProductParser',
    'VariationAttributeParser',
    'OptionParser',
]
