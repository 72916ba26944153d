from cloudvision import exceptions, paths, types
from cloudvision.clients import ImageAnnotatorClient, ProductSearchClient
from cloudvision.config import PollingSettings, VisionConfig
from cloudvision.core.vision import Vision
from cloudvision.logging import logger
from cloudvision.lro import OperationHandle, OperationState
from cloudvision.pagination import AsyncPager
from cloudvision.version import version

__version__ = version

__all__ = [
    "Vision",
    "VisionConfig",
    "PollingSettings",
    "ImageAnnotatorClient",
    "ProductSearchClient",
    "OperationHandle",
    "OperationState",
    "AsyncPager",
    "exceptions",
    "paths",
    "types",
    "logger",
    "__version__",
]
