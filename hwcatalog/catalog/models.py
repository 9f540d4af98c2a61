"""
==============================================================================
Catalog Models Module
==============================================================================

Immutable Pydantic models for the hardware catalog hierarchy:

    Catalog → Category → Subcategory → Product

All models are frozen and every sequence is stored as a tuple, so a loaded
catalog can be shared between concurrent requests without locking. Unknown
fields in the source document are ignored.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
    model_validator,
)


_FROZEN = ConfigDict(frozen=True, extra="ignore")

# Keeps integral prices as int so they serialize without a trailing ".0"
Price = Union[NonNegativeInt, NonNegativeFloat]


class Product(BaseModel):
    """
    Leaf listing in the catalog.

    Attributes:
        index: Opaque source identifier
        group: Optional display grouping label
        brand: Manufacturer name
        model: Model identifier (case-insensitive for lookups)
        specs: Ordered free-text attribute strings
        price: Current price
        original_price: Prior price, when the listing shows one
        discount_amount: Discount, when the listing shows one
        markers: Promotional tags such as "hot" or "time-limited"
        raw_text: Full original description, searched as a fallback
    """

    model_config = _FROZEN

    index: str = Field(..., description="Opaque source identifier")
    group: Optional[str] = Field(default=None, description="Display grouping label")
    brand: str = Field(..., description="Manufacturer name")
    model: str = Field(..., description="Model identifier")
    specs: Tuple[str, ...] = Field(default=(), description="Attribute strings")
    price: Price = Field(..., description="Current price")
    original_price: Optional[Price] = Field(default=None)
    discount_amount: Optional[Price] = Field(default=None)
    markers: Tuple[str, ...] = Field(default=(), description="Promotional tags")
    raw_text: str = Field(default="", description="Original listing text")

    @field_validator("index", mode="before")
    @classmethod
    def coerce_index(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("specs", "markers", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def search_text(self) -> str:
        """Lowercased text that keyword search matches against."""
        return f"{self.brand} {self.model} {' '.join(self.specs)} {self.raw_text}".lower()


class Subcategory(BaseModel):
    """Named, ordered group of products within a category."""

    model_config = _FROZEN

    name: str = Field(..., min_length=1)
    products: Tuple[Product, ...] = Field(default=())

    @property
    def product_count(self) -> int:
        return len(self.products)


class CategoryStats(BaseModel):
    """Aggregate counts computed upstream; carried as-is."""

    model_config = _FROZEN

    total_items: int = Field(default=0, ge=0)
    hot_items: int = Field(default=0, ge=0)
    with_images: int = Field(default=0, ge=0)
    with_discussions: int = Field(default=0, ge=0)
    price_changes: int = Field(default=0, ge=0)
    time_limited: int = Field(default=0, ge=0)


class Category(BaseModel):
    """
    Top-level catalog section.

    Subcategory names are unique within a category as stored
    (case-sensitive). Lookups by name are case-insensitive and
    resolve to the first subcategory in source order.
    """

    model_config = _FROZEN

    category_id: str = Field(..., min_length=1)
    category_name: str = Field(...)
    summary: str = Field(default="")
    stats: CategoryStats = Field(default_factory=CategoryStats)
    subcategories: Tuple[Subcategory, ...] = Field(default=())

    @model_validator(mode="after")
    def validate_unique_subcategories(self):
        names = [sub.name for sub in self.subcategories]
        if len(names) != len(set(names)):
            raise ValueError(
                f"Duplicate subcategory names in category '{self.category_id}'"
            )
        return self

    @property
    def product_count(self) -> int:
        return sum(sub.product_count for sub in self.subcategories)

    def find_subcategory(self, name: str) -> Optional[Subcategory]:
        """Find a subcategory by name (case-insensitive, first wins)."""
        wanted = name.lower()
        return next(
            (sub for sub in self.subcategories if sub.name.lower() == wanted),
            None
        )


class Catalog(BaseModel):
    """
    Ordered, immutable sequence of categories keyed by ``category_id``.

    Example:
        >>> catalog = Catalog.from_document([{"category_id": "C1", ...}])
        >>> catalog.find_category("C1").category_name
        'CPU'
    """

    model_config = _FROZEN

    categories: Tuple[Category, ...] = Field(default=())

    @model_validator(mode="after")
    def validate_unique_ids(self):
        ids = [cat.category_id for cat in self.categories]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate category_id values in catalog")
        return self

    @classmethod
    def from_document(cls, document: Any) -> "Catalog":
        """
        Validate a decoded JSON document (array of categories).

        Raises:
            pydantic.ValidationError: If the document is malformed
        """
        return cls.model_validate({"categories": document})

    @classmethod
    def empty(cls) -> "Catalog":
        return cls()

    @property
    def product_count(self) -> int:
        return sum(cat.product_count for cat in self.categories)

    def find_category(self, category_id: str) -> Optional[Category]:
        """Find a category by exact (case-sensitive) id."""
        return next(
            (cat for cat in self.categories if cat.category_id == category_id),
            None
        )
