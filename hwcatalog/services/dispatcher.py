"""
==============================================================================
Tool Dispatcher Module
==============================================================================

Routes named tool calls to the query engine.

This module implements:
- ToolDispatcher: tool registry, argument validation, response envelope

Call Flow:
---------
    name + argument bag
        │
        ├─ unknown name ─────────────► AppException UNKNOWN_TOOL
        ├─ bag fails its schema ─────► AppException INVALID_ARGUMENTS
        ├─ engine raises ────────────► envelope with isError=true
        └─ engine result ────────────► envelope with JSON text

A failure inside one call never affects the catalog or later calls.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from hwcatalog.core import exceptions
from hwcatalog.schemas.arguments import (
    GetCategoryProductsArgs,
    GetProductByModelArgs,
    ListCategoriesArgs,
    SearchProductsArgs,
    ToolArguments,
)
from hwcatalog.schemas.catalog import to_payload
from hwcatalog.schemas.common import ToolDefinition, ToolResponse
from hwcatalog.services.query_engine import QueryEngine


# Module logger
logger = logging.getLogger(__name__)


class Tool(BaseModel):
    """Registered tool: its argument record and the engine call it makes."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    arguments: Type[ToolArguments]
    handler: Callable[[QueryEngine, Any], BaseModel]

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments.model_json_schema(),
        )


TOOLS: List[Tool] = [
    Tool(
        name="search_products",
        description="Search for computer components by keyword, brand, or specifications",
        arguments=SearchProductsArgs,
        handler=lambda engine, args: engine.search(
            args.keyword,
            category=args.category,
            min_price=args.min_price,
            max_price=args.max_price,
            limit=args.limit,
        ),
    ),
    Tool(
        name="get_product_by_model",
        description="Get detailed information about a specific product by model number",
        arguments=GetProductByModelArgs,
        handler=lambda engine, args: engine.get_by_model(args.model),
    ),
    Tool(
        name="list_categories",
        description="List all available product categories",
        arguments=ListCategoriesArgs,
        handler=lambda engine, args: engine.list_categories(),
    ),
    Tool(
        name="get_category_products",
        description="Get all products in a specific category or subcategory",
        arguments=GetCategoryProductsArgs,
        handler=lambda engine, args: engine.get_category_products(
            args.category_id,
            subcategory_name=args.subcategory_name,
            limit=args.limit,
        ),
    ),
]


def render(payload: Dict[str, Any]) -> str:
    """Serialize a payload the way tool clients receive it."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """
    Named-tool front end for a QueryEngine.

    Attributes:
        _engine: Engine that executes the queries
        _tools: Registered tools by name

    Example:
        >>> dispatcher = ToolDispatcher(QueryEngine(store))
        >>> response = dispatcher.call("search_products", {"keyword": "i5"})
        >>> response.isError
        False
    """

    def __init__(self, engine: QueryEngine, tools: Optional[List[Tool]] = None) -> None:
        """
        Initialize the dispatcher.

        Args:
            engine: QueryEngine bound to a catalog snapshot
            tools: Tool registry (defaults to the four catalog tools)
        """
        self._engine = engine
        self._tools: Dict[str, Tool] = {tool.name: tool for tool in (tools or TOOLS)}

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[ToolDefinition]:
        """Definitions of all registered tools, in registration order."""
        return [tool.definition() for tool in self._tools.values()]

    def validate(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolArguments:
        """
        Resolve a tool and validate its argument bag.

        Raises:
            AppException: UNKNOWN_TOOL or INVALID_ARGUMENTS
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Rejected call to unknown tool: {name}")
            raise exceptions.unknown_tool(name, self.tool_names)

        try:
            return tool.arguments.model_validate(arguments if arguments is not None else {})
        except ValidationError as e:
            logger.info(f"Rejected arguments for {name}: {e.error_count()} errors")
            raise exceptions.invalid_arguments(
                name,
                e.errors(include_url=False, include_context=False)
            )

    def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResponse:
        """
        Invoke a tool by name.

        Args:
            name: Tool name
            arguments: Flat argument bag

        Returns:
            ToolResponse with the JSON payload, or an error envelope if the
            engine failed unexpectedly

        Raises:
            AppException: UNKNOWN_TOOL or INVALID_ARGUMENTS
        """
        args = self.validate(name, arguments)
        handler = self._tools[name].handler

        try:
            result = handler(self._engine, args)
        except Exception:
            logger.exception(f"Tool {name} failed")
            return ToolResponse.from_text(
                render({"error": f'Tool "{name}" failed'}),
                is_error=True
            )

        return ToolResponse.from_text(render(to_payload(result)))
