"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies for the catalog services

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from hwcatalog.core import AppException, get_query_engine

    # Or use exception factory functions via module
    from hwcatalog.core import exceptions
    raise exceptions.unknown_tool("foo", ["search_products"])

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import (
    get_catalog_store,
    get_dispatcher,
    get_query_engine,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_catalog_store",
    "get_dispatcher",
    "get_query_engine",
]
