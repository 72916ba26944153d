from __future__ import annotations

from typing import Any

from cloudvision import paths
from cloudvision.clients.base import ServiceClient, coerce_request
from cloudvision.lro.decoders import DecoderPair
from cloudvision.lro.operation import OperationHandle
from cloudvision.pagination import AsyncPager
from cloudvision.types.product_search import (
    AddProductToProductSetRequest,
    BatchOperationMetadata,
    CreateProductRequest,
    CreateProductSetRequest,
    CreateReferenceImageRequest,
    DeleteProductRequest,
    DeleteProductSetRequest,
    DeleteReferenceImageRequest,
    GetProductRequest,
    GetProductSetRequest,
    GetReferenceImageRequest,
    ImportProductSetsRequest,
    ImportProductSetsResponse,
    ListProductSetsRequest,
    ListProductSetsResponse,
    ListProductsInProductSetRequest,
    ListProductsInProductSetResponse,
    ListProductsRequest,
    ListProductsResponse,
    ListReferenceImagesRequest,
    ListReferenceImagesResponse,
    Product,
    ProductSet,
    PurgeProductsRequest,
    ReferenceImage,
    RemoveProductFromProductSetRequest,
    UpdateProductRequest,
    UpdateProductSetRequest,
)


class ProductSearchClient(ServiceClient):
    """Manages products, product sets and reference images used by product search.

    Resources are addressed by their full names, build them with the path helpers:

    ```python
    parent = ProductSearchClient.location_path("my-project", "us-west1")
    product_set = await client.create_product_set(
        {"parent": parent, "product_set": {"display_name": "shoes"}}
    )
    ```
    """

    service = "product_search"
    long_running_methods = ("import_product_sets", "purge_products")
    long_running_decoders = {
        "import_product_sets": DecoderPair.for_models(
            ImportProductSetsResponse, BatchOperationMetadata
        ),
        "purge_products": DecoderPair.for_models(None, BatchOperationMetadata),
    }

    location_path = staticmethod(paths.location_path)
    product_set_path = staticmethod(paths.product_set_path)
    product_path = staticmethod(paths.product_path)
    reference_image_path = staticmethod(paths.reference_image_path)
    match_location_path = staticmethod(paths.match_location_path)
    match_product_set_path = staticmethod(paths.match_product_set_path)
    match_product_path = staticmethod(paths.match_product_path)
    match_reference_image_path = staticmethod(paths.match_reference_image_path)

    # Product sets

    async def create_product_set(
        self, request: CreateProductSetRequest | dict[str, Any]
    ) -> ProductSet:
        request = coerce_request(request, CreateProductSetRequest)
        return await self._call("create_product_set", request, ProductSet)

    async def list_product_sets(self, request: ListProductSetsRequest | dict[str, Any]) -> AsyncPager:
        """List product sets of a location. Iterate the pager to get `ProductSet` objects."""
        request = coerce_request(request, ListProductSetsRequest)
        return await self._list("list_product_sets", request, ListProductSetsResponse, "product_sets")

    async def get_product_set(self, request: GetProductSetRequest | dict[str, Any]) -> ProductSet:
        request = coerce_request(request, GetProductSetRequest)
        return await self._call("get_product_set", request, ProductSet)

    async def update_product_set(
        self, request: UpdateProductSetRequest | dict[str, Any]
    ) -> ProductSet:
        """Update the fields of a product set named in `update_mask`, all fields if it is empty."""
        request = coerce_request(request, UpdateProductSetRequest)
        return await self._call("update_product_set", request, ProductSet)

    async def delete_product_set(self, request: DeleteProductSetRequest | dict[str, Any]) -> None:
        """Delete a product set. Products and reference images in it are not deleted."""
        request = coerce_request(request, DeleteProductSetRequest)
        await self._call("delete_product_set", request, None)

    # Products

    async def create_product(self, request: CreateProductRequest | dict[str, Any]) -> Product:
        request = coerce_request(request, CreateProductRequest)
        return await self._call("create_product", request, Product)

    async def list_products(self, request: ListProductsRequest | dict[str, Any]) -> AsyncPager:
        request = coerce_request(request, ListProductsRequest)
        return await self._list("list_products", request, ListProductsResponse, "products")

    async def get_product(self, request: GetProductRequest | dict[str, Any]) -> Product:
        request = coerce_request(request, GetProductRequest)
        return await self._call("get_product", request, Product)

    async def update_product(self, request: UpdateProductRequest | dict[str, Any]) -> Product:
        request = coerce_request(request, UpdateProductRequest)
        return await self._call("update_product", request, Product)

    async def delete_product(self, request: DeleteProductRequest | dict[str, Any]) -> None:
        request = coerce_request(request, DeleteProductRequest)
        await self._call("delete_product", request, None)

    # Reference images

    async def create_reference_image(
        self, request: CreateReferenceImageRequest | dict[str, Any]
    ) -> ReferenceImage:
        request = coerce_request(request, CreateReferenceImageRequest)
        return await self._call("create_reference_image", request, ReferenceImage)

    async def delete_reference_image(
        self, request: DeleteReferenceImageRequest | dict[str, Any]
    ) -> None:
        request = coerce_request(request, DeleteReferenceImageRequest)
        await self._call("delete_reference_image", request, None)

    async def list_reference_images(
        self, request: ListReferenceImagesRequest | dict[str, Any]
    ) -> AsyncPager:
        request = coerce_request(request, ListReferenceImagesRequest)
        return await self._list(
            "list_reference_images", request, ListReferenceImagesResponse, "reference_images"
        )

    async def get_reference_image(
        self, request: GetReferenceImageRequest | dict[str, Any]
    ) -> ReferenceImage:
        request = coerce_request(request, GetReferenceImageRequest)
        return await self._call("get_reference_image", request, ReferenceImage)

    # Product set membership

    async def add_product_to_product_set(
        self, request: AddProductToProductSetRequest | dict[str, Any]
    ) -> None:
        request = coerce_request(request, AddProductToProductSetRequest)
        await self._call("add_product_to_product_set", request, None)

    async def remove_product_from_product_set(
        self, request: RemoveProductFromProductSetRequest | dict[str, Any]
    ) -> None:
        request = coerce_request(request, RemoveProductFromProductSetRequest)
        await self._call("remove_product_from_product_set", request, None)

    async def list_products_in_product_set(
        self, request: ListProductsInProductSetRequest | dict[str, Any]
    ) -> AsyncPager:
        request = coerce_request(request, ListProductsInProductSetRequest)
        return await self._list(
            "list_products_in_product_set", request, ListProductsInProductSetResponse, "products"
        )

    # Batch operations

    async def import_product_sets(
        self, request: ImportProductSetsRequest | dict[str, Any]
    ) -> OperationHandle:
        """
        Import product sets, products and reference images from a CSV file in Cloud Storage.

        Returns:
            OperationHandle: Resolves to `ImportProductSetsResponse`, reports
            `BatchOperationMetadata` while running.
        """
        request = coerce_request(request, ImportProductSetsRequest)
        return await self._start("import_product_sets", request)

    async def purge_products(self, request: PurgeProductsRequest | dict[str, Any]) -> OperationHandle:
        """
        Delete all products of a product set, or all products not in any product set.

        Returns:
            OperationHandle: Resolves to None, reports `BatchOperationMetadata` while running.
        """
        request = coerce_request(request, PurgeProductsRequest)
        return await self._start("purge_products", request)
