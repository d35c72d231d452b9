"""
Product data models.

Pure data classes for representing parsed catalog products.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ProductOption:
    """
    One purchasable variation of a product (a color and/or size).

    label1/label1_title describe the color prompt; label2/label2_title
    hold the color name and the size prompt when the option also has a size.
    """
    product_id: str         # Owning product's product-id
    option_id: str          # Variant's own product-id
    name: str = ""          # Color name, or size when both are present
    label1: str = ""
    label1_title: str = ""
    label2: str = ""
    label2_title: str = ""


@dataclass
class CatalogProduct:
    """
    Sellable catalog product with its variant options.

    Created empty and filled in while scanning one raw product record.
    """

    product_id: str = ""
    name: str = ""              # <display-name>
    description: str = ""       # <short-description>
    description_long: str = ""  # <long-description>
    brand: str = ""
    video_link: str = ""

    # Options resolved from <variant> references
    options: List[ProductOption] = field(default_factory=list)
