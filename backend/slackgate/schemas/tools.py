"""Tool Protocol Schemas — request/response envelopes for listing and calling tools.

Invariants:
    - ToolCallRequest.arguments may be null: dispatch reports "No arguments provided"
    - ToolCallResponse always carries exactly one text item (success or {"error": ...})

Design Decisions:
    - input_schema kept as a free-form dict: it is JSON Schema, not ours to model
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ToolDescriptor(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]


class ToolListResponse(BaseModel):
    tools: list[ToolDescriptor]


class ToolCallRequest(BaseModel):
    """Structured tool call from the agent."""
    name: str = Field(min_length=1)
    arguments: dict[str, Any] | None = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    content: list[TextContent]
