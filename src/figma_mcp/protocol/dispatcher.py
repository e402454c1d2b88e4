"""Route JSON-RPC methods to their handlers."""

from typing import Any, Awaitable, Callable

import mcp.types as types

from figma_mcp.core.exceptions import EnvelopeError, UnknownMethodError
from figma_mcp.core.logging import get_logger
from figma_mcp.models.schemas import JsonRpcRequest, ToolInvocationRequest
from figma_mcp.protocol.envelope import encode_success
from figma_mcp.tools.registry import ToolRegistry

logger = get_logger(__name__)

SERVER_NAME = "figma-mcp"


class JsonRpcDispatcher:
    """Handles ``initialize``, ``ping``, ``tools/list`` and ``tools/call``."""

    def __init__(self, registry: ToolRegistry, server_version: str = "0.1.0"):
        self.registry = registry
        self.server_version = server_version
        self._methods: dict[str, Callable[[JsonRpcRequest], Awaitable[dict[str, Any]]]] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    async def dispatch(self, request: JsonRpcRequest) -> dict[str, Any] | None:
        """Run the request and return the JSON-RPC reply.

        Returns None for notifications, which get no reply body.

        Raises:
            UnknownMethodError: If the method is not implemented.
            EnvelopeError: If ``tools/call`` params are malformed.
        """
        if request.is_notification:
            logger.debug("Notification received", method=request.method)
            return None

        handler = self._methods.get(request.method)
        if handler is None:
            raise UnknownMethodError(request.method)
        result = await handler(request)
        return encode_success(request.id, result)

    async def _initialize(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {
            "protocolVersion": types.LATEST_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": self.server_version},
        }

    async def _ping(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {}

    async def _list_tools(self, request: JsonRpcRequest) -> dict[str, Any]:
        tools = self.registry.list_tools()
        return {"tools": [tool.model_dump(by_alias=True, exclude_none=True) for tool in tools]}

    async def _call_tool(self, request: JsonRpcRequest) -> dict[str, Any]:
        name = request.params.get("name")
        if not isinstance(name, str) or not name:
            raise EnvelopeError("tools/call requires a string 'params.name'")
        arguments = request.params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise EnvelopeError("tools/call 'params.arguments' must be an object")

        invocation = ToolInvocationRequest(id=request.id, tool_name=name, arguments=arguments)
        result = await self.registry.invoke(invocation)
        return result.model_dump()
