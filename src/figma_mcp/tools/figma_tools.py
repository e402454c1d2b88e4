"""Handlers for the Figma tools.

Tools:
    get-file     - Fetch a file's document graph as JSON
    export-node  - Render a node as PNG/SVG and return the image URL
"""

import json

from figma_mcp.core.exceptions import ImageUrlMissingError
from figma_mcp.core.logging import get_logger
from figma_mcp.integrations.figma_client import FigmaClient
from figma_mcp.models.schemas import (
    ContentItem,
    ExportNodeArguments,
    GetFileArguments,
    ToolInvocationResult,
)

logger = get_logger(__name__)


async def get_file(client: FigmaClient, args: GetFileArguments) -> ToolInvocationResult:
    """Return the file document as a single ``json`` content item."""
    document = await client.fetch_file(args.fileKey)
    return ToolInvocationResult(content=[ContentItem(type="json", text=json.dumps(document))])


async def export_node(client: FigmaClient, args: ExportNodeArguments) -> ToolInvocationResult:
    """Return the rendered image URL for ``args.nodeId`` as a ``text`` content item.

    Raises:
        ImageUrlMissingError: If Figma answered without a URL for the node.
    """
    images = await client.fetch_export_url(
        args.fileKey, args.nodeId, format=args.format, scale=args.scale
    )
    url = images.get(args.nodeId)
    if not isinstance(url, str) or not url:
        logger.warning("Export returned no image URL", file_key=args.fileKey, node_id=args.nodeId)
        raise ImageUrlMissingError(args.nodeId)
    return ToolInvocationResult(content=[ContentItem(type="text", text=url)])
