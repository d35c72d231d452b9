# Common utilities
from .config_loader import (
    CatalogSettings,
    load_catalog_settings,
    load_config,
)
from .log_config import setup_logging
