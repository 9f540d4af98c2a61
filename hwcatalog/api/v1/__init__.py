"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- tools: Tool listing and tool calls
- products: Product catalog views

==============================================================================
"""

from . import health, tools, products

__all__ = ["health", "tools", "products"]
