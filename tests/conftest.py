"""Pytest configuration and fixtures."""

from typing import Any, Callable

import httpx
import pytest

from figma_mcp.integrations.figma_client import FigmaClient
from figma_mcp.protocol.dispatcher import JsonRpcDispatcher
from figma_mcp.tools.registry import build_registry

SAMPLE_DOCUMENT = {
    "name": "Design System",
    "lastModified": "2024-05-01T12:00:00Z",
    "document": {
        "id": "0:0",
        "type": "DOCUMENT",
        "children": [{"id": "1:2", "name": "Button", "type": "FRAME"}],
    },
}


class FigmaBackend:
    """Stub Figma API recording every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.file_document: Any = SAMPLE_DOCUMENT
        self.images: dict[str, Any] | None = {"1:2": "https://figma-alpha-api.s3.amazonaws.com/images/abc"}
        self.status_code = 200
        self.error_body = ""
        self.on_request: Callable[[httpx.Request], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, text=self.error_body)
        if request.url.path.startswith("/v1/files/"):
            return httpx.Response(200, json=self.file_document)
        if request.url.path.startswith("/v1/images/"):
            return httpx.Response(200, json={"err": None, "images": self.images})
        return httpx.Response(404, text="Not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def figma_backend() -> FigmaBackend:
    """Provide a recording stub of the Figma API."""
    return FigmaBackend()


@pytest.fixture
def figma_client(figma_backend) -> FigmaClient:
    """Provide a Figma client with a token, wired to the stub backend."""
    return FigmaClient(
        access_token="figd_test_token",
        base_url="https://api.figma.com/v1",
        timeout=5.0,
        transport=figma_backend.transport,
    )


@pytest.fixture
def tokenless_client(figma_backend) -> FigmaClient:
    """Provide a Figma client without an access token."""
    return FigmaClient(
        access_token="",
        base_url="https://api.figma.com/v1",
        transport=figma_backend.transport,
    )


@pytest.fixture
def registry(figma_client):
    """Provide the standard tool registry."""
    return build_registry(figma_client)


@pytest.fixture
def dispatcher(registry):
    """Provide a JSON-RPC dispatcher over the standard registry."""
    return JsonRpcDispatcher(registry, server_version="0.1.0")
