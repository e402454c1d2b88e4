"""FastAPI application entry point for the Figma MCP server."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from figma_mcp.api.routes import router, set_dispatcher
from figma_mcp.config import settings
from figma_mcp.core.logging import get_logger, setup_logging
from figma_mcp.integrations.figma_client import FigmaClient
from figma_mcp.protocol.dispatcher import JsonRpcDispatcher
from figma_mcp.tools.registry import build_registry

# Setup logging
setup_logging(
    service_name=settings.service_name,
    service_version=settings.service_version,
    log_level=settings.log_level,
    log_format=settings.log_format,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup/shutdown)."""
    # Startup
    logger.info("Starting Figma MCP server...")
    if not settings.has_token:
        logger.warning("Missing FIGMA_ACCESS_TOKEN; tool calls will fail")

    figma_client = FigmaClient()
    registry = build_registry(figma_client)
    set_dispatcher(JsonRpcDispatcher(registry, server_version=settings.service_version))
    logger.info("Tool registry ready", tools=[tool.name for tool in registry.list_tools()])

    yield

    # Shutdown
    logger.info("Shutting down Figma MCP server...")
    set_dispatcher(None)
    await figma_client.close()
    logger.info("Figma MCP server shutdown complete")


app = FastAPI(
    title="Figma MCP",
    description="Figma file and image export tools over JSON-RPC and SSE",
    version=settings.service_version,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(router)


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "figma_mcp.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
