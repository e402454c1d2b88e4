"""Tool registry: name -> descriptor -> handler."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping

import mcp.types as types
from pydantic import BaseModel, ValidationError

from figma_mcp.core.exceptions import ToolValidationError, UnknownToolError
from figma_mcp.core.logging import get_logger
from figma_mcp.integrations.figma_client import FigmaClient
from figma_mcp.models.schemas import (
    ExportNodeArguments,
    GetFileArguments,
    ToolInvocationRequest,
    ToolInvocationResult,
)
from figma_mcp.tools import figma_tools

logger = get_logger(__name__)

ToolHandler = Callable[[FigmaClient, BaseModel], Awaitable[ToolInvocationResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Definition of a single tool."""

    name: str
    description: str
    arguments_model: type[BaseModel]
    handler: ToolHandler

    def to_tool(self) -> types.Tool:
        """Render the descriptor as an MCP tool definition."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments_model.model_json_schema(),
        )

    def validate_arguments(self, arguments: dict) -> BaseModel:
        """Validate and default ``arguments``, or raise ToolValidationError."""
        try:
            return self.arguments_model.model_validate(arguments)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc']) or '<arguments>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise ToolValidationError(self.name, errors) from e


TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="get-file",
        description="Fetch a Figma file's document JSON",
        arguments_model=GetFileArguments,
        handler=figma_tools.get_file,
    ),
    ToolDescriptor(
        name="export-node",
        description="Export a node as PNG/SVG via the Figma images API",
        arguments_model=ExportNodeArguments,
        handler=figma_tools.export_node,
    ),
)


class ToolRegistry:
    """Immutable lookup table of tools bound to a Figma client."""

    def __init__(self, client: FigmaClient, descriptors: tuple[ToolDescriptor, ...] = TOOL_DESCRIPTORS):
        self.client = client
        self._tools: Mapping[str, ToolDescriptor] = MappingProxyType({d.name: d for d in descriptors})

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def get(self, name: str) -> ToolDescriptor:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If no tool has that name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_tools(self) -> list[types.Tool]:
        """List all tools in registration order."""
        return [descriptor.to_tool() for descriptor in self._tools.values()]

    async def invoke(self, request: ToolInvocationRequest) -> ToolInvocationResult:
        """Validate the arguments and run the named tool.

        Lookup and validation both happen before the handler runs, so a bad
        request never reaches the Figma API.
        """
        descriptor = self.get(request.tool_name)
        args = descriptor.validate_arguments(request.arguments)
        logger.info("Invoking tool", tool=descriptor.name)
        return await descriptor.handler(self.client, args)


def build_registry(client: FigmaClient) -> ToolRegistry:
    """Create the registry with the standard Figma tools."""
    return ToolRegistry(client)
