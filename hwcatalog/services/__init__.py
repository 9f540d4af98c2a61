"""
==============================================================================
Services Package - Query Layer
==============================================================================

Service classes between the transports and the catalog store.

    ┌─────────────────┐
    │   Transport     │  HTTP (FastAPI) / MCP (stdio)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ToolDispatcher  │  ← Argument validation, envelopes
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  QueryEngine    │  ← Read-only queries
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  CatalogStore   │  ← Immutable snapshot
    └─────────────────┘

Usage:
------
    from hwcatalog.services import QueryEngine, ToolDispatcher

    dispatcher = ToolDispatcher(QueryEngine(store))
    response = dispatcher.call("list_categories", {})

==============================================================================
"""

from .query_engine import QueryEngine
from .dispatcher import Tool, ToolDispatcher, TOOLS

__all__ = [
    "QueryEngine",
    "Tool",
    "ToolDispatcher",
    "TOOLS",
]
