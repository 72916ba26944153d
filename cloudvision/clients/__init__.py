from cloudvision.clients.image_annotator import ImageAnnotatorClient
from cloudvision.clients.product_search import ProductSearchClient

__all__ = ["ImageAnnotatorClient", "ProductSearchClient"]
