"""
==============================================================================
Common Schemas Module
==============================================================================

Tool-call envelope shared by every transport.

==============================================================================
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class TextContent(BaseModel):
    """Single text block of a tool response."""
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Envelope returned for every tool call."""
    content: List[TextContent]
    isError: bool = Field(default=False)

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    @classmethod
    def from_text(cls, text: str, is_error: bool = False) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], isError=is_error)


class ToolDefinition(BaseModel):
    """Tool name, description and JSON-Schema of its arguments."""
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolListResponse(BaseModel):
    tools: List[ToolDefinition]


class ToolCallRequest(BaseModel):
    """Tool invocation received over HTTP."""
    name: str = Field(..., min_length=1)
    arguments: Optional[Dict[str, Any]] = Field(default=None)
