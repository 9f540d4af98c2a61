"""
==============================================================================
MCP Server - stdio Entry Point
==============================================================================

Serves the catalog tools to MCP clients (LLM tool calling) over stdio.

Each tool forwards its arguments to the ToolDispatcher and returns the
JSON text payload. Boundary errors and tool failures are raised as
FastMCP ToolErrors so the client sees them as failed calls.

Usage:
------
    hwcatalog-mcp

    # or
    python -m hwcatalog.mcp_server

Logging goes to stderr; stdout carries the protocol.

==============================================================================
"""

import logging
import sys
from typing import Annotated, Any, Dict, Optional, Type

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from hwcatalog.catalog import CatalogStore
from hwcatalog.config import Settings, get_settings
from hwcatalog.core.exceptions import AppException
from hwcatalog.schemas.arguments import (
    DEFAULT_CATEGORY_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    GetCategoryProductsArgs,
    GetProductByModelArgs,
    SearchProductsArgs,
    ToolArguments,
)
from hwcatalog.services import QueryEngine, ToolDispatcher


# Module logger
logger = logging.getLogger(__name__)


def _param(args_model: Type[ToolArguments], name: str, annotation: Any) -> Any:
    """Annotate a tool parameter with its argument record's description and constraints."""
    field = args_model.model_fields[name]
    return Annotated[(annotation, Field(description=field.description), *field.metadata)]


# Tool parameter types, shared with the dispatcher's argument records
Keyword = _param(SearchProductsArgs, "keyword", str)
CategoryFilter = _param(SearchProductsArgs, "category", Optional[str])
MinPrice = _param(SearchProductsArgs, "min_price", Optional[float])
MaxPrice = _param(SearchProductsArgs, "max_price", Optional[float])
SearchLimit = _param(SearchProductsArgs, "limit", int)
Model = _param(GetProductByModelArgs, "model", str)
CategoryId = _param(GetCategoryProductsArgs, "category_id", str)
SubcategoryFilter = _param(GetCategoryProductsArgs, "subcategory_name", Optional[str])
CategoryLimit = _param(GetCategoryProductsArgs, "limit", int)


class CatalogMCPServer:
    """
    FastMCP server exposing the four catalog tools.

    Attributes:
        _dispatcher: Dispatcher that validates and executes calls
        _mcp: Underlying FastMCP server

    Example:
        >>> server = CatalogMCPServer(dispatcher)
        >>> server.get_product_by_model("i5-13400")
        '{\\n  "found": true, ...'
    """

    def __init__(self, dispatcher: ToolDispatcher, name: str = "coolpc-mcp-server") -> None:
        self._dispatcher = dispatcher
        self._mcp = FastMCP(name)
        self._register_tools()

    def _register_tools(self) -> None:
        handlers = {
            "search_products": self.search_products,
            "get_product_by_model": self.get_product_by_model,
            "list_categories": self.list_categories,
            "get_category_products": self.get_category_products,
        }
        for definition in self._dispatcher.list_tools():
            self._mcp.tool(
                handlers[definition.name],
                name=definition.name,
                description=definition.description,
            )

    @property
    def mcp(self) -> FastMCP:
        return self._mcp

    # =========================================================================
    # TOOLS
    # =========================================================================

    def search_products(
        self,
        keyword: Keyword,
        category: CategoryFilter = None,
        min_price: MinPrice = None,
        max_price: MaxPrice = None,
        limit: SearchLimit = DEFAULT_SEARCH_LIMIT,
    ) -> str:
        """Search for computer components by keyword, brand, or specifications."""
        return self._call("search_products", {
            "keyword": keyword,
            "category": category,
            "min_price": min_price,
            "max_price": max_price,
            "limit": limit,
        })

    def get_product_by_model(self, model: Model) -> str:
        """Get detailed information about a specific product by model number."""
        return self._call("get_product_by_model", {"model": model})

    def list_categories(self) -> str:
        """List all available product categories."""
        return self._call("list_categories", {})

    def get_category_products(
        self,
        category_id: CategoryId,
        subcategory_name: SubcategoryFilter = None,
        limit: CategoryLimit = DEFAULT_CATEGORY_LIMIT,
    ) -> str:
        """Get all products in a specific category or subcategory."""
        return self._call("get_category_products", {
            "category_id": category_id,
            "subcategory_name": subcategory_name,
            "limit": limit,
        })

    def _call(self, name: str, arguments: Dict[str, Any]) -> str:
        try:
            response = self._dispatcher.call(name, arguments)
        except AppException as e:
            raise ToolError(f"{e.code}: {e.message}") from e

        if response.isError:
            raise ToolError(response.text)
        return response.text

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def run(self) -> None:
        """Serve over stdio until the client disconnects."""
        logger.info(f"{self._mcp.name} running on stdio")
        self._mcp.run()


def create_server(settings: Optional[Settings] = None) -> CatalogMCPServer:
    """
    Load the catalog and build the MCP server.

    Args:
        settings: Settings to use (global settings if None)
    """
    settings = settings or get_settings()

    store = CatalogStore()
    store.load_file(settings.catalog_path)

    dispatcher = ToolDispatcher(QueryEngine(store))
    return CatalogMCPServer(dispatcher, name=settings.mcp_server_name)


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    logging.basicConfig(
        stream=sys.stderr,
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    create_server(settings).run()


if __name__ == "__main__":
    main()
