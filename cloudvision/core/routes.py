# cloudvision/core/routes.py

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class RestRoute:
    """How a method maps onto the REST surface of the service.

    `path` holds `{field}` placeholders filled from the request, dotted names address
    nested fields ("{productSet.name}"). `body` is "*" to send all remaining fields as JSON,
    the name of a single field to send only that field, or None to send the remaining
    fields as query parameters.
    """

    verb: Literal["GET", "POST", "PATCH", "DELETE"]
    path: str
    body: str | None = None


# Dictionary: method-name -> RestRoute
ROUTES: dict[str, RestRoute] = {
    # ImageAnnotator
    "image_annotator.batch_annotate_images": RestRoute("POST", "/v1/images:annotate", "*"),
    "image_annotator.batch_annotate_files": RestRoute("POST", "/v1/files:annotate", "*"),
    "image_annotator.async_batch_annotate_images": RestRoute(
        "POST", "/v1/images:asyncBatchAnnotate", "*"
    ),
    "image_annotator.async_batch_annotate_files": RestRoute(
        "POST", "/v1/files:asyncBatchAnnotate", "*"
    ),
    # ProductSearch: product sets
    "product_search.create_product_set": RestRoute(
        "POST", "/v1/{parent}/productSets", "productSet"
    ),
    "product_search.list_product_sets": RestRoute("GET", "/v1/{parent}/productSets"),
    "product_search.get_product_set": RestRoute("GET", "/v1/{name}"),
    "product_search.update_product_set": RestRoute(
        "PATCH", "/v1/{productSet.name}", "productSet"
    ),
    "product_search.delete_product_set": RestRoute("DELETE", "/v1/{name}"),
    # ProductSearch: products
    "product_search.create_product": RestRoute("POST", "/v1/{parent}/products", "product"),
    "product_search.list_products": RestRoute("GET", "/v1/{parent}/products"),
    "product_search.get_product": RestRoute("GET", "/v1/{name}"),
    "product_search.update_product": RestRoute("PATCH", "/v1/{product.name}", "product"),
    "product_search.delete_product": RestRoute("DELETE", "/v1/{name}"),
    # ProductSearch: reference images
    "product_search.create_reference_image": RestRoute(
        "POST", "/v1/{parent}/referenceImages", "referenceImage"
    ),
    "product_search.delete_reference_image": RestRoute("DELETE", "/v1/{name}"),
    "product_search.list_reference_images": RestRoute("GET", "/v1/{parent}/referenceImages"),
    "product_search.get_reference_image": RestRoute("GET", "/v1/{name}"),
    # ProductSearch: product set membership
    "product_search.add_product_to_product_set": RestRoute("POST", "/v1/{name}:addProduct", "*"),
    "product_search.remove_product_from_product_set": RestRoute(
        "POST", "/v1/{name}:removeProduct", "*"
    ),
    "product_search.list_products_in_product_set": RestRoute("GET", "/v1/{name}/products"),
    # ProductSearch: batch operations
    "product_search.import_product_sets": RestRoute(
        "POST", "/v1/{parent}/productSets:import", "*"
    ),
    "product_search.purge_products": RestRoute("POST", "/v1/{parent}/products:purge", "*"),
}

# google.longrunning.Operations
GET_OPERATION = RestRoute("GET", "/v1/{name}")
CANCEL_OPERATION = RestRoute("POST", "/v1/{name}:cancel", "*")
