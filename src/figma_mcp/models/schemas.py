"""Pydantic models for JSON-RPC envelopes, tool arguments and tool results."""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

RequestId = Union[str, int]


class JsonRpcRequest(BaseModel):
    """Inbound JSON-RPC 2.0 request or notification."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[RequestId] = None
    method: str = Field(..., min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_notification(self) -> bool:
        return self.id is None or self.method.startswith("notifications/")


class ToolInvocationRequest(BaseModel):
    """A single tool call decoded from a ``tools/call`` request."""

    id: Optional[RequestId] = None
    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ContentItem(BaseModel):
    """One tagged item of tool output."""

    type: Literal["json", "text"]
    text: str


class ToolInvocationResult(BaseModel):
    """Successful tool output. Always carries at least one content item."""

    content: list[ContentItem] = Field(..., min_length=1)


class GetFileArguments(BaseModel):
    """Arguments for the ``get-file`` tool."""

    model_config = ConfigDict(strict=True)

    fileKey: str = Field(..., min_length=1, description="Figma file key from the file URL")


class ExportNodeArguments(BaseModel):
    """Arguments for the ``export-node`` tool."""

    model_config = ConfigDict(strict=True)

    fileKey: str = Field(..., min_length=1, description="Figma file key from the file URL")
    nodeId: str = Field(..., min_length=1, description="Id of the node to export, e.g. '1:2'")
    format: Literal["png", "svg"] = Field(default="png", description="Image format")
    scale: float = Field(default=1, ge=0.1, le=4, description="Export scale between 0.1 and 4")
