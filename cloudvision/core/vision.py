from __future__ import annotations

from cloudvision.clients.image_annotator import ImageAnnotatorClient
from cloudvision.clients.product_search import ProductSearchClient
from cloudvision.config import PollingSettings, VisionConfig, default_config
from cloudvision.core.gateway import ApiGateway
from cloudvision.core.transport import Transport


class Vision:
    """A high-level client for the image annotation and product search services."""

    def __init__(self, config: VisionConfig | None = None, transport: Transport | None = None):
        """
        Initialize the Vision client.

        Args:
            config (VisionConfig | None): The client configuration, defaults to the environment.
            transport (Transport | None): A custom transport, defaults to REST over HTTP.
        """
        self._config = config or default_config
        self._api_gateway = ApiGateway(self._config, transport=transport)

    @property
    def config(self) -> VisionConfig:
        return self._config

    @property
    def api(self) -> ApiGateway:
        return self._api_gateway

    def image_annotator(self, polling: PollingSettings | None = None) -> ImageAnnotatorClient:
        """Returns a client for the image annotator service."""
        return ImageAnnotatorClient(self._api_gateway, polling=polling)

    def product_search(self, polling: PollingSettings | None = None) -> ProductSearchClient:
        """Returns a client for the product search service."""
        return ProductSearchClient(self._api_gateway, polling=polling)

    async def close(self):
        """Closes the underlying transport."""
        return await self._api_gateway.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
