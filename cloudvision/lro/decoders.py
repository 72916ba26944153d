"""Decoders for the payloads of long-running operations.

Every long-running method has exactly one `DecoderPair`: one function turning the raw
terminal response into a typed value and one turning the raw progress metadata into a
typed value. Decoders are pure functions of the payload bytes.

Example:
    ```python
    registry = DecoderRegistry()
    registry.register(
        "product_search.import_product_sets",
        DecoderPair.for_models(ImportProductSetsResponse, BatchOperationMetadata),
    )
    decoders = registry.get("product_search.import_product_sets")
    response = decoders.response(raw_bytes)
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

import pydantic

from cloudvision.exceptions import UnknownMethodError

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], Any]


def decode_model(model: type[pydantic.BaseModel]) -> Decoder:
    """Return a decoder validating JSON payload bytes into `model`."""

    def decode(raw: bytes) -> pydantic.BaseModel:
        return model.model_validate_json(raw or b"{}")

    decode.__qualname__ = f"decode_{model.__name__}"
    return decode


def decode_empty(raw: bytes) -> None:
    """Decoder for methods whose response carries no data."""
    return None


@dataclass(frozen=True)
class DecoderPair:
    response: Decoder
    metadata: Decoder

    @classmethod
    def for_models(
        cls,
        response_model: type[pydantic.BaseModel] | None,
        metadata_model: type[pydantic.BaseModel],
    ) -> DecoderPair:
        """Build a pair from response and metadata models. A None response model decodes to None."""
        response = decode_model(response_model) if response_model is not None else decode_empty
        return cls(response=response, metadata=decode_model(metadata_model))


class DecoderRegistry:
    """Maps long-running method names to their decoder pair."""

    def __init__(self, pairs: dict[str, DecoderPair] | None = None):
        self._pairs: dict[str, DecoderPair] = {}
        for method, pair in (pairs or {}).items():
            self.register(method, pair)

    def register(self, method: str, pair: DecoderPair) -> None:
        """Register the decoder pair of a long-running method.

        Raises:
            ValueError: If the method already has a decoder pair.
            TypeError: If one of the decoders is not callable.
        """
        if method in self._pairs:
            raise ValueError(f"Decoders for '{method}' are already registered")
        if not callable(pair.response) or not callable(pair.metadata):
            raise TypeError(f"Decoders for '{method}' must be callables")
        self._pairs[method] = pair
        logger.debug(f"Registered decoders for long-running method: {method}")

    def get(self, method: str) -> DecoderPair:
        if method not in self._pairs:
            raise UnknownMethodError(method, self.list_methods())
        return self._pairs[method]

    def is_registered(self, method: str) -> bool:
        return method in self._pairs

    def list_methods(self) -> list[str]:
        return list(self._pairs.keys())

    def require(self, methods: Iterable[str]) -> None:
        """Check that all `methods` have decoders before any of them is called."""
        missing = [method for method in methods if method not in self._pairs]
        if missing:
            raise UnknownMethodError(missing[0], self.list_methods())
