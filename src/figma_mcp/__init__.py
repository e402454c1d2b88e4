"""Figma MCP - Figma file and image export tools over JSON-RPC."""

__version__ = "0.1.0"
