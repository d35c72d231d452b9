"""
Configuration Loader

Loads YAML configuration files (catalog vocabulary, option labels,
extraction settings) from the config directory.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from . import constants

logger = logging.getLogger(__name__)

CATALOG_CONFIG_FILE = 'catalog.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'catalog.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class CatalogSettings:
    """Catalog vocabulary and extraction settings."""
    product_tag: str = constants.PRODUCT_TAG
    id_attribute: str = constants.PRODUCT_ID_ATTRIBUTE
    variants_marker: str = constants.VARIANTS_MARKER
    color_attribute_id: str = constants.COLOR_ATTRIBUTE_ID
    size_attribute_id: str = constants.SIZE_ATTRIBUTE_ID
    video_field: str = constants.VIDEO_FIELD
    no_size_sentinel: str = constants.NO_SIZE_SENTINEL
    color_label: str = constants.COLOR_LABEL
    color_label_title: str = constants.COLOR_LABEL_TITLE
    size_label_title: str = constants.SIZE_LABEL_TITLE
    workers: int = constants.DEFAULT_WORKERS

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CatalogSettings":
        """
        Build settings from a config mapping.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        if not data:
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown catalog settings: %s", ", ".join(unknown))

        values = {key: value for key, value in data.items() if key in known}
        if 'workers' in values:
            values['workers'] = int(values['workers'])
        return cls(**values)


def load_catalog_settings(filename: str = CATALOG_CONFIG_FILE) -> CatalogSettings:
    """
    Load catalog settings.

    Returns:
        CatalogSettings from the 'catalog' section of the config file,
        or the built-in defaults when no config file is available

    Example:
        settings = load_catalog_settings()
        settings.color_attribute_id  # 'f54ProductColor'
    """
    try:
        config = load_config(filename)
    except FileNotFoundError as e:
        logger.debug("Using default catalog settings: %s", e)
        return CatalogSettings()

    return CatalogSettings.from_dict(config.get('catalog', {}))
