"""
==============================================================================
Tool Argument Schemas Module
==============================================================================

One explicit record per tool describing the argument bag it accepts.

Argument bags are validated once at the dispatch boundary; the query
engine receives already-typed values. Unknown keys are ignored.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SEARCH_LIMIT = 10
DEFAULT_CATEGORY_LIMIT = 20


class ToolArguments(BaseModel):
    """Base for tool argument records."""

    model_config = ConfigDict(extra="ignore")


class SearchProductsArgs(ToolArguments):
    """Arguments for ``search_products``."""
    keyword: str = Field(
        ...,
        min_length=1,
        description="Keyword to search for (brand, model, specs, etc.)"
    )
    category: Optional[str] = Field(
        default=None,
        description="Category to filter by (optional)"
    )
    min_price: Optional[float] = Field(
        default=None,
        ge=0,
        description="Minimum price filter (optional)"
    )
    max_price: Optional[float] = Field(
        default=None,
        ge=0,
        description="Maximum price filter (optional)"
    )
    limit: int = Field(
        default=DEFAULT_SEARCH_LIMIT,
        ge=1,
        description=f"Maximum number of results to return (default: {DEFAULT_SEARCH_LIMIT})"
    )

    @field_validator("category")
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        if v == "":
            return None
        return v


class GetProductByModelArgs(ToolArguments):
    """Arguments for ``get_product_by_model``."""
    model: str = Field(
        ...,
        min_length=1,
        description="Exact model number to search for"
    )


class ListCategoriesArgs(ToolArguments):
    """``list_categories`` takes no arguments."""


class GetCategoryProductsArgs(ToolArguments):
    """Arguments for ``get_category_products``."""
    category_id: str = Field(
        ...,
        min_length=1,
        description="Category ID to get products from"
    )
    subcategory_name: Optional[str] = Field(
        default=None,
        description="Subcategory name to filter by (optional)"
    )
    limit: int = Field(
        default=DEFAULT_CATEGORY_LIMIT,
        ge=1,
        description=f"Maximum number of results to return (default: {DEFAULT_CATEGORY_LIMIT})"
    )

    @field_validator("subcategory_name")
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        if v == "":
            return None
        return v
