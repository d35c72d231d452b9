"""
Thread-safe containers shared by extraction workers.

TranslationTable - color code -> display name, first writer wins
ProductCollection - append-only collection of parsed products
"""

import threading
from typing import Dict, Iterator, List

from ..models import CatalogProduct
from .errors import MissingTranslationError


class TranslationTable:
    """
    Maps color codes to display names.

    Keys are write-once: add_if_absent never replaces an existing entry.

    Usage:
        table = TranslationTable()
        table.add_if_absent("RED", "Red")
        table.lookup("RED")  # 'Red'
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: Dict[str, str] = {}

    def add_if_absent(self, code: str, display_name: str) -> bool:
        """
        Register a display name for a code unless the code is already known.

        Returns:
            True if the entry was added, False if the code was empty or taken
        """
        if not code:
            return False
        with self._lock:
            if code in self._entries:
                return False
            self._entries[code] = display_name
            return True

    def lookup(self, code: str) -> str:
        """
        Get the display name for a code.

        Raises:
            MissingTranslationError: If the code was never registered
        """
        with self._lock:
            try:
                return self._entries[code]
            except KeyError:
                raise MissingTranslationError(code) from None

    def as_dict(self) -> Dict[str, str]:
        """Return a snapshot copy of all entries."""
        with self._lock:
            return dict(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class ProductCollection:
    """Append-only, unordered collection of parsed products."""

    def __init__(self):
        self._lock = threading.Lock()
        self._products: List[CatalogProduct] = []

    def add(self, product: CatalogProduct) -> None:
        with self._lock:
            self._products.append(product)

    def snapshot(self) -> List[CatalogProduct]:
        """Return a copy of the products added so far."""
        with self._lock:
            return list(self._products)

    def clear(self) -> None:
        with self._lock:
            self._products.clear()

    def __iter__(self) -> Iterator[CatalogProduct]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
