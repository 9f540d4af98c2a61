"""
Application Exception Handling

Single AppException class for all boundary errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for boundary error scenarios.

    Provides consistent error response format across the entire API.
    Semantic misses (unknown model, unknown category) are not errors and
    never raise; they come back as ``found: false`` results.

    Usage:
        raise AppException("Unknown tool: foo", "UNKNOWN_TOOL", 404)

    Error Codes:
        Dispatch:
            - UNKNOWN_TOOL (404)
            - INVALID_ARGUMENTS (422)

        General:
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "UNKNOWN_TOOL")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def unknown_tool(name: str, available: List[str]) -> AppException:
    """Create unknown tool exception."""
    return AppException(
        f"Unknown tool: {name}",
        "UNKNOWN_TOOL",
        404,
        {"tool": name, "available": available}
    )


def invalid_arguments(name: str, errors: List[Dict[str, Any]]) -> AppException:
    """Create invalid tool arguments exception."""
    return AppException(
        f"Invalid arguments for tool '{name}'",
        "INVALID_ARGUMENTS",
        422,
        {"tool": name, "errors": errors}
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
