"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection functions handing the catalog services to routes.

The store, engine and dispatcher are created once per application in the
lifespan handler and kept on ``app.state``; routes receive them through
these dependencies instead of module globals.

Usage:
------
    @router.get("/categories")
    async def list_categories(engine: QueryEngine = Depends(get_query_engine)):
        ...

==============================================================================
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request

from hwcatalog.core.exceptions import internal_error

if TYPE_CHECKING:
    from hwcatalog.catalog import CatalogStore
    from hwcatalog.services import QueryEngine, ToolDispatcher


# Module logger
logger = logging.getLogger(__name__)


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        logger.error(f"Application state has no {name}; was the lifespan run?")
        raise internal_error("Catalog services are not initialized")
    return value


def get_catalog_store(request: Request) -> "CatalogStore":
    """Catalog store owned by the running application."""
    return _state_attr(request, "catalog_store")


def get_query_engine(request: Request) -> "QueryEngine":
    """Query engine bound to the application's catalog store."""
    return _state_attr(request, "query_engine")


def get_dispatcher(request: Request) -> "ToolDispatcher":
    """Tool dispatcher bound to the application's query engine."""
    return _state_attr(request, "dispatcher")
