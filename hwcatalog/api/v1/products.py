"""
==============================================================================
Product Catalog Endpoints
==============================================================================

REST views over the query engine for browsing and searching the catalog.

Query parameters go through the same argument records as tool calls, so
both transports share defaults and validation.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from hwcatalog.core import exceptions
from hwcatalog.core.dependencies import get_query_engine
from hwcatalog.schemas.arguments import (
    DEFAULT_CATEGORY_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    GetCategoryProductsArgs,
    SearchProductsArgs,
    ToolArguments,
)
from hwcatalog.schemas.catalog import to_payload
from hwcatalog.services import QueryEngine


router = APIRouter(tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, engine: QueryEngine):
        self._engine = engine

    @staticmethod
    def _validate(tool: str, model: type, **values) -> ToolArguments:
        try:
            return model(**values)
        except ValidationError as e:
            raise exceptions.invalid_arguments(
                tool, e.errors(include_url=False, include_context=False)
            )

    def search(self, **values) -> dict:
        """Keyword search."""
        args = self._validate("search_products", SearchProductsArgs, **values)
        return to_payload(self._engine.search(
            args.keyword,
            category=args.category,
            min_price=args.min_price,
            max_price=args.max_price,
            limit=args.limit,
        ))

    def get_by_model(self, model: str) -> dict:
        """Exact model lookup."""
        return to_payload(self._engine.get_by_model(model))

    def list_categories(self) -> dict:
        """Category index."""
        return to_payload(self._engine.list_categories())

    def get_category_products(self, **values) -> dict:
        """Products of a category or subcategory."""
        args = self._validate("get_category_products", GetCategoryProductsArgs, **values)
        return to_payload(self._engine.get_category_products(
            args.category_id,
            subcategory_name=args.subcategory_name,
            limit=args.limit,
        ))


@router.get("/products/search")
def search_products(
    keyword: str = Query(...),
    category: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None),
    max_price: Optional[float] = Query(None),
    limit: int = Query(DEFAULT_SEARCH_LIMIT),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Search products by keyword with optional category and price filters."""
    controller = ProductController(engine)
    return controller.search(
        keyword=keyword,
        category=category,
        min_price=min_price,
        max_price=max_price,
        limit=limit,
    )


@router.get("/products/model/{model:path}")
def get_product_by_model(model: str, engine: QueryEngine = Depends(get_query_engine)):
    """Get full product detail by model number."""
    controller = ProductController(engine)
    return controller.get_by_model(model)


@router.get("/categories")
def list_categories(engine: QueryEngine = Depends(get_query_engine)):
    """List all categories with subcategory product counts."""
    controller = ProductController(engine)
    return controller.list_categories()


@router.get("/categories/{category_id}/products")
def get_category_products(
    category_id: str,
    subcategory_name: Optional[str] = Query(None),
    limit: int = Query(DEFAULT_CATEGORY_LIMIT),
    engine: QueryEngine = Depends(get_query_engine)
):
    """List products of a category, optionally narrowed to a subcategory."""
    controller = ProductController(engine)
    return controller.get_category_products(
        category_id=category_id,
        subcategory_name=subcategory_name,
        limit=limit,
    )
