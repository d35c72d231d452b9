"""
Shared constants for the project.

Defaults for the catalog XML vocabulary. Values in config/catalog.yaml
override these.
"""

# Catalog element names and attributes
PRODUCT_TAG = "product"
PRODUCT_ID_ATTRIBUTE = "product-id"

# Substring marking a sellable product (one that lists its variants)
VARIANTS_MARKER = "<variants>"

# Custom attribute ids for the variation dimensions
COLOR_ATTRIBUTE_ID = "f54ProductColor"
SIZE_ATTRIBUTE_ID = "f54ProductSize"
VIDEO_FIELD = "f54ProductVideo"

# Size value meaning "this product has no size dimension"
NO_SIZE_SENTINEL = "UNI"

# Storefront option labels (Hebrew: "color" / "choose a color" / "choose a size")
COLOR_LABEL = "צבע"
COLOR_LABEL_TITLE = "בחר צבע"
SIZE_LABEL_TITLE = "בחר מידה"

# Extraction worker threads (0 = let ThreadPoolExecutor decide)
DEFAULT_WORKERS = 0
