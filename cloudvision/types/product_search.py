from datetime import datetime
from enum import StrEnum

import pydantic

from cloudvision.types.base import WireModel
from cloudvision.types.image_annotator import BoundingPoly
from cloudvision.types.operation import Status


class KeyValue(WireModel):
    key: str
    value: str


class ProductSet(WireModel):
    name: str | None = None
    display_name: str | None = None
    index_time: datetime | None = None
    index_error: Status | None = None


class Product(WireModel):
    name: str | None = None
    display_name: str | None = None
    description: str | None = None
    product_category: str | None = None
    product_labels: list[KeyValue] = pydantic.Field(default_factory=list)


class ReferenceImage(WireModel):
    name: str | None = None
    uri: str | None = None
    bounding_polys: list[BoundingPoly] = pydantic.Field(default_factory=list)


class FieldMask(WireModel):
    paths: list[str] = pydantic.Field(default_factory=list)


# Product sets


class CreateProductSetRequest(WireModel):
    parent: str
    product_set: ProductSet
    product_set_id: str | None = None


class ListProductSetsRequest(WireModel):
    parent: str
    page_size: int | None = None
    page_token: str | None = None


class ListProductSetsResponse(WireModel):
    product_sets: list[ProductSet] = pydantic.Field(default_factory=list)
    next_page_token: str = ""


class GetProductSetRequest(WireModel):
    name: str


class UpdateProductSetRequest(WireModel):
    product_set: ProductSet
    update_mask: FieldMask | None = None


class DeleteProductSetRequest(WireModel):
    name: str


# Products


class CreateProductRequest(WireModel):
    parent: str
    product: Product
    product_id: str | None = None


class ListProductsRequest(WireModel):
    parent: str
    page_size: int | None = None
    page_token: str | None = None


class ListProductsResponse(WireModel):
    products: list[Product] = pydantic.Field(default_factory=list)
    next_page_token: str = ""


class GetProductRequest(WireModel):
    name: str


class UpdateProductRequest(WireModel):
    product: Product
    update_mask: FieldMask | None = None


class DeleteProductRequest(WireModel):
    name: str


# Reference images


class CreateReferenceImageRequest(WireModel):
    parent: str
    reference_image: ReferenceImage
    reference_image_id: str | None = None


class DeleteReferenceImageRequest(WireModel):
    name: str


class ListReferenceImagesRequest(WireModel):
    parent: str
    page_size: int | None = None
    page_token: str | None = None


class ListReferenceImagesResponse(WireModel):
    reference_images: list[ReferenceImage] = pydantic.Field(default_factory=list)
    page_size: int = 0
    next_page_token: str = ""


class GetReferenceImageRequest(WireModel):
    name: str


# Product set membership


class AddProductToProductSetRequest(WireModel):
    name: str
    product: str


class RemoveProductFromProductSetRequest(WireModel):
    name: str
    product: str


class ListProductsInProductSetRequest(WireModel):
    name: str
    page_size: int | None = None
    page_token: str | None = None


class ListProductsInProductSetResponse(WireModel):
    products: list[Product] = pydantic.Field(default_factory=list)
    next_page_token: str = ""


# Batch operations


class ImportProductSetsGcsSource(WireModel):
    csv_file_uri: str


class ImportProductSetsInputConfig(WireModel):
    gcs_source: ImportProductSetsGcsSource


class ImportProductSetsRequest(WireModel):
    parent: str
    input_config: ImportProductSetsInputConfig


class ImportProductSetsResponse(WireModel):
    reference_images: list[ReferenceImage] = pydantic.Field(default_factory=list)
    statuses: list[Status] = pydantic.Field(default_factory=list)


class ProductSetPurgeConfig(WireModel):
    product_set_id: str


class PurgeProductsRequest(WireModel):
    parent: str
    product_set_purge_config: ProductSetPurgeConfig | None = None
    delete_orphan_products: bool | None = None
    force: bool | None = None

    @pydantic.model_validator(mode="after")
    def _validate_target(self) -> "PurgeProductsRequest":
        if self.product_set_purge_config is not None and self.delete_orphan_products:
            raise ValueError(
                "Only one of product_set_purge_config and delete_orphan_products can be set"
            )
        return self


class BatchOperationState(StrEnum):
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    PROCESSING = "PROCESSING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class BatchOperationMetadata(WireModel):
    """Progress reported by the product search batch operations."""

    state: BatchOperationState = BatchOperationState.STATE_UNSPECIFIED
    submit_time: datetime | None = None
    end_time: datetime | None = None
