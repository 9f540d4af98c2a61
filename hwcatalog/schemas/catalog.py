"""
==============================================================================
Catalog Result Schemas Module
==============================================================================

Response payloads produced by the query engine.

Includes:
- Product views (search summary, category listing, full detail)
- Found / not-found results for lookups
- Structural category index

A "not found" outcome is a normal result with ``found: false``.

==============================================================================
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

from hwcatalog.catalog.models import CategoryStats, Price


# =============================================================================
# PRODUCT VIEWS
# =============================================================================

class CategoryProductView(BaseModel):
    """Product as listed inside a category."""
    brand: str
    model: str
    specs: List[str]
    price: Price
    original_price: Optional[Price] = None
    discount_amount: Optional[Price] = None
    subcategory: str
    markers: List[str]


class ProductSummary(BaseModel):
    """Product as returned by keyword search."""
    brand: str
    model: str
    specs: List[str]
    price: Price
    original_price: Optional[Price] = None
    discount_amount: Optional[Price] = None
    category: str
    subcategory: str
    markers: List[str]


class ProductDetail(ProductSummary):
    """Full product detail including the original listing text."""
    raw_text: str


# =============================================================================
# OPERATION RESULTS
# =============================================================================

class NotFoundResult(BaseModel):
    """Explicit miss; echoes what was asked for."""
    found: Literal[False] = False
    message: str
    model: Optional[str] = None
    category_id: Optional[str] = None
    subcategory_name: Optional[str] = None

    @classmethod
    def for_model(cls, model: str) -> "NotFoundResult":
        return cls(message=f'Product with model "{model}" not found', model=model)

    @classmethod
    def for_category(cls, category_id: str) -> "NotFoundResult":
        return cls(
            message=f'Category with ID "{category_id}" not found',
            category_id=category_id,
        )

    @classmethod
    def for_subcategory(
        cls, category_id: str, category_name: str, subcategory_name: str
    ) -> "NotFoundResult":
        return cls(
            message=(
                f'Subcategory "{subcategory_name}" not found '
                f'in category "{category_name}"'
            ),
            category_id=category_id,
            subcategory_name=subcategory_name,
        )


class SearchResult(BaseModel):
    """Keyword search matches in catalog order."""
    total_found: int = Field(ge=0)
    results: List[ProductSummary]


class ProductFound(BaseModel):
    """Successful model lookup."""
    found: Literal[True] = True
    product: ProductDetail


ProductLookupResult = Union[ProductFound, NotFoundResult]


class SubcategoryIndexEntry(BaseModel):
    name: str
    product_count: int = Field(ge=0)


class CategoryIndexEntry(BaseModel):
    category_id: str
    category_name: str
    stats: CategoryStats
    subcategories: List[SubcategoryIndexEntry]


class CategoryIndex(BaseModel):
    """Structural index of the whole catalog."""
    total_categories: int = Field(ge=0)
    categories: List[CategoryIndexEntry]


class CategoryProducts(BaseModel):
    """Products of one category, optionally narrowed to a subcategory."""
    found: Literal[True] = True
    category_id: str
    category_name: str
    subcategory_filter: Optional[str] = None
    total_products: int = Field(ge=0)
    showing: int = Field(ge=0)
    products: List[CategoryProductView]


CategoryProductsResult = Union[CategoryProducts, NotFoundResult]


def to_payload(result: BaseModel) -> dict:
    """
    JSON-ready dict for a result model.

    Not-found results drop the echo fields that do not apply to them;
    every other result keeps explicit nulls.
    """
    return result.model_dump(
        mode="json",
        exclude_none=isinstance(result, NotFoundResult),
    )
