"""
==============================================================================
Tool Endpoints
==============================================================================

HTTP transport for the tool dispatcher: list tools and call one by name.

==============================================================================
"""

from fastapi import APIRouter, Depends

from hwcatalog.core.dependencies import get_dispatcher
from hwcatalog.schemas.common import ToolCallRequest, ToolListResponse, ToolResponse
from hwcatalog.services import ToolDispatcher


router = APIRouter(prefix="/tools", tags=["Tools"])


@router.get("", response_model=ToolListResponse)
async def list_tools(dispatcher: ToolDispatcher = Depends(get_dispatcher)):
    """List available tools with their argument schemas."""
    return ToolListResponse(tools=dispatcher.list_tools())


@router.post("/call", response_model=ToolResponse)
def call_tool(
    request: ToolCallRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
):
    """
    Call a tool by name.

    Unknown tools and invalid arguments produce an error body; a failure
    while running the tool comes back as an envelope with ``isError``.
    """
    return dispatcher.call(request.name, request.arguments)
