"""Client for the Figma REST API."""
from typing import Any, Dict

import httpx

from figma_mcp.config import settings
from figma_mcp.core.exceptions import BackendError, ConfigurationError
from figma_mcp.core.logging import get_logger

logger = get_logger(__name__)


def format_scale(scale: float) -> str:
    """Render a scale the way the images endpoint expects it (1 -> "1", 0.5 -> "0.5")."""
    return f"{scale:g}"


class FigmaClient:
    """Authenticated access to the two Figma endpoints the tools need."""

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the Figma client.

        Args:
            access_token: Personal access token; defaults to FIGMA_ACCESS_TOKEN
            base_url: API root; defaults to FIGMA_API_BASE_URL
            timeout: Request timeout in seconds; defaults to FIGMA_TIMEOUT_SECONDS
            transport: Optional httpx transport (used by tests)
        """
        self.access_token = settings.figma_access_token if access_token is None else access_token
        self.base_url = (base_url or settings.figma_api_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.figma_timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    def _auth_headers(self) -> dict[str, str]:
        if not self.access_token:
            raise ConfigurationError("FIGMA_ACCESS_TOKEN is not configured")
        return {"X-Figma-Token": self.access_token}

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        headers = self._auth_headers()
        logger.debug("Figma request", path=path, params=params, headers=headers)
        response = await self.client.get(path, params=params, headers=headers)
        if response.status_code >= 400:
            logger.warning("Figma API request failed", path=path, status_code=response.status_code)
            raise BackendError(response.status_code, response.text)
        return response.json()

    async def fetch_file(self, file_key: str) -> Dict[str, Any]:
        """Fetch the document graph of a file.

        Args:
            file_key: File key taken from the Figma file URL

        Returns:
            The file JSON exactly as returned by the API.

        Raises:
            ConfigurationError: If no access token is configured.
            BackendError: If the API answers with a non-2xx status.
        """
        logger.debug("Fetching Figma file", file_key=file_key)
        return await self._get(f"/files/{file_key}")

    async def fetch_export_url(
        self, file_key: str, node_id: str, format: str = "png", scale: float = 1
    ) -> Dict[str, str | None]:
        """Ask Figma to render a node and return the node id -> image URL map.

        A body without an ``images`` object yields an empty map.

        Raises:
            ConfigurationError: If no access token is configured.
            BackendError: If the API answers with a non-2xx status.
        """
        logger.debug("Requesting Figma export", file_key=file_key, node_id=node_id, format=format)
        data = await self._get(
            f"/images/{file_key}",
            params={"ids": node_id, "format": format, "scale": format_scale(scale)},
        )
        images = data.get("images") if isinstance(data, dict) else None
        return images if isinstance(images, dict) else {}
