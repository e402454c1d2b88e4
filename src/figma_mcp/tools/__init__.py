"""Fixed tool catalog exposed over JSON-RPC."""

from figma_mcp.tools.registry import ToolDescriptor, ToolRegistry, build_registry

__all__ = ["ToolDescriptor", "ToolRegistry", "build_registry"]
