"""
==============================================================================
Query Engine Module
==============================================================================

Read-only query operations over a catalog snapshot.

This module implements:
- QueryEngine: keyword search, model lookup, category index and
  category listing

Traversal Order:
---------------
Every operation walks the catalog in stored order: category, then
subcategory, then product. Result caps and "first match wins" are applied
as early exits over that single traversal, so ties at a limit boundary
always resolve by source order.

==============================================================================
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Callable, Iterable, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from hwcatalog.catalog import Catalog, CatalogStore, Category, Product, Subcategory
from hwcatalog.schemas.arguments import DEFAULT_CATEGORY_LIMIT, DEFAULT_SEARCH_LIMIT
from hwcatalog.schemas.catalog import (
    CategoryIndex,
    CategoryIndexEntry,
    CategoryProductView,
    CategoryProducts,
    CategoryProductsResult,
    NotFoundResult,
    ProductDetail,
    ProductFound,
    ProductLookupResult,
    ProductSummary,
    SearchResult,
    SubcategoryIndexEntry,
)


# Module logger
logger = logging.getLogger(__name__)


class Listing(BaseModel):
    """A product together with the category and subcategory that own it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    category: Category
    subcategory: Subcategory
    product: Product


def iter_listings(categories: Iterable[Category]) -> Iterator[Listing]:
    """Yield every product of ``categories`` in catalog order."""
    for category in categories:
        for subcategory in category.subcategories:
            for product in subcategory.products:
                yield Listing(category=category, subcategory=subcategory, product=product)


def price_filter(
    min_price: Optional[float],
    max_price: Optional[float]
) -> Callable[[Product], bool]:
    """Inclusive price bounds; ``None`` leaves a side unbounded."""
    def accepts(product: Product) -> bool:
        if min_price is not None and product.price < min_price:
            return False
        if max_price is not None and product.price > max_price:
            return False
        return True
    return accepts


class QueryEngine:
    """
    Query operations over an immutable catalog snapshot.

    The engine holds a reference to a CatalogStore (or a bare Catalog)
    and reads the current snapshot on every call. It never mutates the
    catalog and keeps no state between calls.

    Example:
        >>> engine = QueryEngine(store)
        >>> engine.search("i5", max_price=7000).total_found
        1
        >>> engine.get_by_model("I5-13400").found
        True
    """

    def __init__(self, source: Union[CatalogStore, Catalog]) -> None:
        """
        Initialize the engine.

        Args:
            source: Store whose snapshot is queried, or a fixed Catalog
        """
        self._source = source

    @property
    def catalog(self) -> Catalog:
        """Current snapshot."""
        if isinstance(self._source, CatalogStore):
            return self._source.get()
        return self._source

    # =========================================================================
    # SEARCH
    # =========================================================================

    def search(
        self,
        keyword: str,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        limit: int = DEFAULT_SEARCH_LIMIT
    ) -> SearchResult:
        """
        Case-insensitive substring search.

        Args:
            keyword: Text matched against brand, model, specs and raw text
            category: Substring of category_name to restrict to (optional)
            min_price: Inclusive lower price bound (optional)
            max_price: Inclusive upper price bound (optional)
            limit: Maximum number of results

        Returns:
            SearchResult with the first ``limit`` matches in catalog order
        """
        if limit <= 0:
            return SearchResult(total_found=0, results=[])

        needle = keyword.lower()
        in_price_range = price_filter(min_price, max_price)

        categories: Iterable[Category] = self.catalog.categories
        if category:
            wanted = category.lower()
            categories = (
                cat for cat in categories
                if wanted in cat.category_name.lower()
            )

        matches = (
            listing for listing in iter_listings(categories)
            if needle in listing.product.search_text
            and in_price_range(listing.product)
        )
        results = [self._summary(listing) for listing in islice(matches, limit)]

        logger.debug(f"search({keyword!r}, category={category!r}) -> {len(results)} results")
        return SearchResult(total_found=len(results), results=results)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_by_model(self, model: str) -> ProductLookupResult:
        """
        Find a product by exact model (case-insensitive).

        Duplicate models resolve to the first one in catalog order.

        Args:
            model: Model identifier

        Returns:
            ProductFound, or NotFoundResult echoing ``model``
        """
        wanted = model.lower()
        listing = next(
            (
                listing for listing in iter_listings(self.catalog.categories)
                if listing.product.model.lower() == wanted
            ),
            None
        )

        if listing is None:
            return NotFoundResult.for_model(model)

        summary = self._summary(listing)
        return ProductFound(
            product=ProductDetail(
                **summary.model_dump(),
                raw_text=listing.product.raw_text
            )
        )

    # =========================================================================
    # CATEGORY OPERATIONS
    # =========================================================================

    def list_categories(self) -> CategoryIndex:
        """Structural index of every category and subcategory."""
        entries = [
            CategoryIndexEntry(
                category_id=cat.category_id,
                category_name=cat.category_name,
                stats=cat.stats,
                subcategories=[
                    SubcategoryIndexEntry(name=sub.name, product_count=sub.product_count)
                    for sub in cat.subcategories
                ]
            )
            for cat in self.catalog.categories
        ]
        return CategoryIndex(total_categories=len(entries), categories=entries)

    def get_category_products(
        self,
        category_id: str,
        subcategory_name: Optional[str] = None,
        limit: int = DEFAULT_CATEGORY_LIMIT
    ) -> CategoryProductsResult:
        """
        List products of a category, optionally narrowed to one subcategory.

        Args:
            category_id: Exact (case-sensitive) category id
            subcategory_name: Subcategory name, case-insensitive (optional)
            limit: Maximum number of products returned

        Returns:
            CategoryProducts, or NotFoundResult for an unknown id/subcategory
        """
        category = self.catalog.find_category(category_id)
        if category is None:
            return NotFoundResult.for_category(category_id)

        subcategories = category.subcategories
        subcategory_filter: Optional[str] = None

        if subcategory_name:
            subcategory = category.find_subcategory(subcategory_name)
            if subcategory is None:
                return NotFoundResult.for_subcategory(
                    category.category_id, category.category_name, subcategory_name
                )
            subcategories = (subcategory,)
            subcategory_filter = subcategory.name

        total = sum(sub.product_count for sub in subcategories)
        listings = (
            Listing(category=category, subcategory=sub, product=product)
            for sub in subcategories
            for product in sub.products
        )
        products: List[CategoryProductView] = [
            CategoryProductView(
                brand=listing.product.brand,
                model=listing.product.model,
                specs=list(listing.product.specs),
                price=listing.product.price,
                original_price=listing.product.original_price,
                discount_amount=listing.product.discount_amount,
                subcategory=listing.subcategory.name,
                markers=list(listing.product.markers),
            )
            for listing in islice(listings, max(limit, 0))
        ]

        return CategoryProducts(
            category_id=category.category_id,
            category_name=category.category_name,
            subcategory_filter=subcategory_filter,
            total_products=total,
            showing=len(products),
            products=products,
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _summary(listing: Listing) -> ProductSummary:
        product = listing.product
        return ProductSummary(
            brand=product.brand,
            model=product.model,
            specs=list(product.specs),
            price=product.price,
            original_price=product.original_price,
            discount_amount=product.discount_amount,
            category=listing.category.category_name,
            subcategory=listing.subcategory.name,
            markers=list(product.markers),
        )
