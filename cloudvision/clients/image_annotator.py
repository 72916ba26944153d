from __future__ import annotations

from typing import Any

from cloudvision.clients.base import ServiceClient, coerce_request
from cloudvision.lro.decoders import DecoderPair
from cloudvision.lro.operation import OperationHandle
from cloudvision.types.image_annotator import (
    AsyncBatchAnnotateFilesRequest,
    AsyncBatchAnnotateFilesResponse,
    AsyncBatchAnnotateImagesRequest,
    AsyncBatchAnnotateImagesResponse,
    BatchAnnotateFilesRequest,
    BatchAnnotateFilesResponse,
    BatchAnnotateImagesRequest,
    BatchAnnotateImagesResponse,
    OperationMetadata,
)


class ImageAnnotatorClient(ServiceClient):
    """Detects and extracts features such as labels, faces and text from images and files."""

    service = "image_annotator"
    long_running_methods = ("async_batch_annotate_images", "async_batch_annotate_files")
    long_running_decoders = {
        "async_batch_annotate_images": DecoderPair.for_models(
            AsyncBatchAnnotateImagesResponse, OperationMetadata
        ),
        "async_batch_annotate_files": DecoderPair.for_models(
            AsyncBatchAnnotateFilesResponse, OperationMetadata
        ),
    }

    async def batch_annotate_images(
        self, request: BatchAnnotateImagesRequest | dict[str, Any]
    ) -> BatchAnnotateImagesResponse:
        """Run image detection and annotation for a batch of images."""
        request = coerce_request(request, BatchAnnotateImagesRequest)
        return await self._call("batch_annotate_images", request, BatchAnnotateImagesResponse)

    async def batch_annotate_files(
        self, request: BatchAnnotateFilesRequest | dict[str, Any]
    ) -> BatchAnnotateFilesResponse:
        """Annotate small PDF, TIFF or GIF files of at most 5 pages each."""
        request = coerce_request(request, BatchAnnotateFilesRequest)
        return await self._call("batch_annotate_files", request, BatchAnnotateFilesResponse)

    async def async_batch_annotate_images(
        self, request: AsyncBatchAnnotateImagesRequest | dict[str, Any]
    ) -> OperationHandle:
        """
        Annotate a batch of images and write the results to Cloud Storage.

        Returns:
            OperationHandle: Resolves to `AsyncBatchAnnotateImagesResponse`, reports
            `OperationMetadata` while running.
        """
        request = coerce_request(request, AsyncBatchAnnotateImagesRequest)
        return await self._start("async_batch_annotate_images", request)

    async def async_batch_annotate_files(
        self, request: AsyncBatchAnnotateFilesRequest | dict[str, Any]
    ) -> OperationHandle:
        """
        Annotate a batch of generic files, e.g. PDF or TIFF, and write the results to Cloud Storage.

        Returns:
            OperationHandle: Resolves to `AsyncBatchAnnotateFilesResponse`, reports
            `OperationMetadata` while running.
        """
        request = coerce_request(request, AsyncBatchAnnotateFilesRequest)
        return await self._start("async_batch_annotate_files", request)
