"""
==============================================================================
Catalog Store Module
==============================================================================

Owns the immutable catalog snapshot for the lifetime of the process.

Features:
---------
- One-time ingest of the JSON catalog document
- Source ordering preserved for categories, subcategories and products
- Degrades to an empty catalog on malformed or missing input
- Load status kept for health reporting

JSON Structure:
--------------
[
  {
    "category_id": "c4",
    "category_name": "CPU",
    "summary": "...",
    "stats": {"total_items": 120, "hot_items": 8, ...},
    "subcategories": [
      {"name": "Intel", "products": [{"model": "i5-13400", ...}]}
    ]
  }
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from .models import Catalog


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Snapshot handle for the loaded catalog.

    ``load`` and ``load_file`` never raise on bad input: the failure is
    logged and recorded in ``load_error`` and the store holds an empty
    catalog, so every query keeps working.

    Attributes:
        load_error: Description of the last load failure, if any
        source: Where the current snapshot came from

    Example:
        >>> store = CatalogStore()
        >>> store.load_file(Path("product.json"))
        >>> catalog = store.get()
    """

    def __init__(self, catalog: Optional[Catalog] = None) -> None:
        self._catalog = catalog if catalog is not None else Catalog.empty()
        self._loaded = catalog is not None
        self.load_error: Optional[str] = None
        self.source: Optional[str] = None

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, document: Union[bytes, str, Any]) -> Catalog:
        """
        Parse a catalog document into the store.

        Args:
            document: Raw JSON bytes/str, or an already decoded array

        Returns:
            The loaded catalog, or an empty one if the document is malformed
        """
        try:
            if isinstance(document, (bytes, bytearray, str)):
                document = json.loads(document)
            catalog = Catalog.from_document(document)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            return self._fail(f"Invalid JSON: {e}")
        except ValidationError as e:
            return self._fail(
                f"Catalog document failed validation ({e.error_count()} errors): "
                f"{e.errors()[0]['msg']}"
            )

        self._catalog = catalog
        self._loaded = True
        self.load_error = None

        logger.info(
            f"Loaded {catalog.product_count} products "
            f"from {len(catalog.categories)} categories"
        )
        return catalog

    def load_file(self, path: Path) -> Catalog:
        """
        Read and load the catalog document at ``path``.

        Args:
            path: Location of the JSON document

        Returns:
            The loaded catalog, or an empty one on any read/parse failure
        """
        self.source = str(path)
        try:
            raw = Path(path).read_bytes()
        except FileNotFoundError:
            return self._fail(f"Catalog file not found: {path}")
        except OSError as e:
            return self._fail(f"Could not read catalog file {path}: {e}")

        return self.load(raw)

    def _fail(self, message: str) -> Catalog:
        logger.error(f"Failed to load catalog: {message}")
        self._catalog = Catalog.empty()
        self._loaded = False
        self.load_error = message
        return self._catalog

    # =========================================================================
    # ACCESS
    # =========================================================================

    def get(self) -> Catalog:
        """Return the current immutable snapshot."""
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        """True once a document has been ingested successfully."""
        return self._loaded

    def status(self) -> dict:
        """Summary of the snapshot for health checks."""
        return {
            "status": "healthy" if self._loaded else "not_loaded",
            "source": self.source,
            "categories": len(self._catalog.categories),
            "products": self._catalog.product_count,
            "error": self.load_error,
        }
