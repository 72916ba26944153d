from __future__ import annotations

import logging
from typing import Any, ClassVar, TypeVar

import pydantic

from cloudvision.config import PollingSettings, VisionConfig
from cloudvision.core.gateway import ApiGateway
from cloudvision.lro.decoders import DecoderPair, DecoderRegistry
from cloudvision.lro.operation import OperationHandle
from cloudvision.pagination import AsyncPager
from cloudvision.types.base import WireModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def coerce_request(request: ModelT | dict[str, Any], model: type[ModelT]) -> ModelT:
    if isinstance(request, model):
        return request
    return model.model_validate(request)


class ServiceClient:
    """Shared plumbing of the service clients.

    Subclasses declare `service` (the prefix of their method names), `long_running_methods`
    and `long_running_decoders` (decoder pairs of their long-running methods). A client whose
    long-running methods lack a decoder pair cannot be constructed.
    """

    service: ClassVar[str]
    service_path: ClassVar[str] = "vision.googleapis.com"
    port: ClassVar[int] = 443
    long_running_methods: ClassVar[tuple[str, ...]] = ()
    long_running_decoders: ClassVar[dict[str, DecoderPair]] = {}

    def __init__(self, api_gateway: ApiGateway, polling: PollingSettings | None = None):
        """
        Args:
            api_gateway (ApiGateway): The gateway owning the transport.
            polling (PollingSettings | None): Polling defaults for long-running operations,
                defaults to the polling settings of the gateway configuration.
        """
        self._api_gateway = api_gateway
        self._polling = polling or api_gateway.config.polling
        self._decoders = DecoderRegistry(
            {self._method(name): pair for name, pair in self.long_running_decoders.items()}
        )
        self._decoders.require(self._method(name) for name in self.long_running_methods)

    @property
    def config(self) -> VisionConfig:
        return self._api_gateway.config

    @property
    def decoders(self) -> DecoderRegistry:
        return self._decoders

    def _method(self, name: str) -> str:
        return f"{self.service}.{name}"

    async def _call(
        self, name: str, request: WireModel, response_model: type[ModelT] | None
    ) -> ModelT | None:
        response = await self._api_gateway.transport.call(self._method(name), request.to_wire())
        if response_model is None:
            return None
        return response_model.model_validate(response)

    async def _start(self, name: str, request: WireModel) -> OperationHandle:
        method = self._method(name)
        # fail before issuing the call if the result could not be decoded
        decoders = self._decoders.get(method)
        operation = await self._api_gateway.transport.start_call(method, request.to_wire())
        logger.info(f"Started long-running operation {operation.name} ({method})")
        return OperationHandle(
            operation,
            method=method,
            decoders=decoders,
            transport=self._api_gateway.transport,
            polling=self._polling,
        )

    async def _list(
        self, name: str, request: WireModel, response_model: type[ModelT], items_field: str
    ) -> AsyncPager:
        async def fetch(page_request: WireModel) -> ModelT:
            return await self._call(name, page_request, response_model)

        return AsyncPager(fetch, request, await fetch(request), items_field)
