from datetime import datetime
from enum import StrEnum

import pydantic

from cloudvision.types.base import WireModel
from cloudvision.types.operation import Status


class FeatureType(StrEnum):
    TYPE_UNSPECIFIED = "TYPE_UNSPECIFIED"
    FACE_DETECTION = "FACE_DETECTION"
    LANDMARK_DETECTION = "LANDMARK_DETECTION"
    LOGO_DETECTION = "LOGO_DETECTION"
    LABEL_DETECTION = "LABEL_DETECTION"
    TEXT_DETECTION = "TEXT_DETECTION"
    DOCUMENT_TEXT_DETECTION = "DOCUMENT_TEXT_DETECTION"
    SAFE_SEARCH_DETECTION = "SAFE_SEARCH_DETECTION"
    IMAGE_PROPERTIES = "IMAGE_PROPERTIES"
    CROP_HINTS = "CROP_HINTS"
    WEB_DETECTION = "WEB_DETECTION"
    PRODUCT_SEARCH = "PRODUCT_SEARCH"
    OBJECT_LOCALIZATION = "OBJECT_LOCALIZATION"


class Feature(WireModel):
    type: FeatureType = FeatureType.TYPE_UNSPECIFIED
    max_results: int | None = None
    model: str | None = None


class ImageSource(WireModel):
    gcs_image_uri: str | None = None
    image_uri: str | None = None


class Image(WireModel):
    """An image given either inline as raw bytes (base64 on the wire) or by reference."""

    content: bytes | None = None
    source: ImageSource | None = None


class Vertex(WireModel):
    x: int = 0
    y: int = 0


class BoundingPoly(WireModel):
    vertices: list[Vertex] = pydantic.Field(default_factory=list)


class EntityAnnotation(WireModel):
    mid: str | None = None
    locale: str | None = None
    description: str | None = None
    score: float | None = None
    topicality: float | None = None
    bounding_poly: BoundingPoly | None = None


class AnnotateImageRequest(WireModel):
    image: Image | None = None
    features: list[Feature] = pydantic.Field(default_factory=list)
    image_context: dict | None = None


class AnnotateImageResponse(WireModel):
    label_annotations: list[EntityAnnotation] = pydantic.Field(default_factory=list)
    logo_annotations: list[EntityAnnotation] = pydantic.Field(default_factory=list)
    landmark_annotations: list[EntityAnnotation] = pydantic.Field(default_factory=list)
    text_annotations: list[EntityAnnotation] = pydantic.Field(default_factory=list)
    error: Status | None = None


class BatchAnnotateImagesRequest(WireModel):
    requests: list[AnnotateImageRequest] = pydantic.Field(default_factory=list)
    parent: str | None = None


class BatchAnnotateImagesResponse(WireModel):
    responses: list[AnnotateImageResponse] = pydantic.Field(default_factory=list)


class GcsSource(WireModel):
    uri: str


class GcsDestination(WireModel):
    uri: str


class InputConfig(WireModel):
    gcs_source: GcsSource | None = None
    content: bytes | None = None
    mime_type: str | None = None


class OutputConfig(WireModel):
    gcs_destination: GcsDestination | None = None
    batch_size: int | None = None


class AnnotateFileRequest(WireModel):
    input_config: InputConfig | None = None
    features: list[Feature] = pydantic.Field(default_factory=list)
    image_context: dict | None = None
    pages: list[int] = pydantic.Field(default_factory=list)


class AnnotateFileResponse(WireModel):
    input_config: InputConfig | None = None
    responses: list[AnnotateImageResponse] = pydantic.Field(default_factory=list)
    total_pages: int = 0
    error: Status | None = None


class BatchAnnotateFilesRequest(WireModel):
    requests: list[AnnotateFileRequest] = pydantic.Field(default_factory=list)
    parent: str | None = None


class BatchAnnotateFilesResponse(WireModel):
    responses: list[AnnotateFileResponse] = pydantic.Field(default_factory=list)


class AsyncAnnotateFileRequest(WireModel):
    input_config: InputConfig | None = None
    features: list[Feature] = pydantic.Field(default_factory=list)
    image_context: dict | None = None
    output_config: OutputConfig | None = None


class AsyncAnnotateFileResponse(WireModel):
    output_config: OutputConfig | None = None


class AsyncBatchAnnotateImagesRequest(WireModel):
    requests: list[AnnotateImageRequest] = pydantic.Field(default_factory=list)
    output_config: OutputConfig | None = None
    parent: str | None = None


class AsyncBatchAnnotateImagesResponse(WireModel):
    output_config: OutputConfig | None = None


class AsyncBatchAnnotateFilesRequest(WireModel):
    requests: list[AsyncAnnotateFileRequest] = pydantic.Field(default_factory=list)
    parent: str | None = None


class AsyncBatchAnnotateFilesResponse(WireModel):
    responses: list[AsyncAnnotateFileResponse] = pydantic.Field(default_factory=list)


class OperationMetadataState(StrEnum):
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    CREATED = "CREATED"
    RUNNING = "RUNNING"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class OperationMetadata(WireModel):
    """Progress reported by the annotation long-running operations."""

    state: OperationMetadataState = OperationMetadataState.STATE_UNSPECIFIED
    create_time: datetime | None = None
    update_time: datetime | None = None
