"""
==============================================================================
Catalog Package - Hardware Listings
==============================================================================

Immutable catalog hierarchy and the store that owns the loaded snapshot.

Classes:
--------
- Product, Subcategory, CategoryStats, Category, Catalog: frozen models
- CatalogStore: one-time loader and snapshot handle

==============================================================================
"""

from .models import Catalog, Category, CategoryStats, Product, Subcategory
from .store import CatalogStore

__all__ = [
    "Catalog",
    "Category",
    "CategoryStats",
    "Product",
    "Subcategory",
    "CatalogStore",
]
