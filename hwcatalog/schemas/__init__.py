"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Tool-call envelope and tool definitions
- Arguments: One argument record per tool
- Catalog: Query result payloads

==============================================================================
"""

from .common import TextContent, ToolResponse, ToolDefinition, ToolListResponse, ToolCallRequest
from .arguments import (
    ToolArguments,
    SearchProductsArgs,
    GetProductByModelArgs,
    ListCategoriesArgs,
    GetCategoryProductsArgs,
)
from .catalog import (
    ProductSummary,
    ProductDetail,
    CategoryProductView,
    NotFoundResult,
    SearchResult,
    ProductFound,
    CategoryIndex,
    CategoryProducts,
    to_payload,
)

__all__ = [
    # Common
    "TextContent",
    "ToolResponse",
    "ToolDefinition",
    "ToolListResponse",
    "ToolCallRequest",
    # Arguments
    "ToolArguments",
    "SearchProductsArgs",
    "GetProductByModelArgs",
    "ListCategoriesArgs",
    "GetCategoryProductsArgs",
    # Results
    "ProductSummary",
    "ProductDetail",
    "CategoryProductView",
    "NotFoundResult",
    "SearchResult",
    "ProductFound",
    "CategoryIndex",
    "CategoryProducts",
    "to_payload",
]
