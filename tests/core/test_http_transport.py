import json

import httpx
import pytest

from cloudvision import VisionConfig
from cloudvision.core import HttpTransport, RestRoute
from cloudvision.core.http import error_from_response, operation_from_json
from cloudvision.exceptions import TransportError, UnknownMethodError
from cloudvision.types import Code

PARENT = "projects/p/locations/europe-west1"
OPERATION_NAME = "projects/p/locations/europe-west1/operations/42"


class Recorder:
    """httpx handler recording requests and answering with a canned response."""

    def __init__(self, response: httpx.Response | Exception | None = None):
        self.response = response if response is not None else httpx.Response(200, json={})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def body(self):
        return json.loads(self.request.content) if self.request.content else None


def _transport(recorder: Recorder, **kwargs) -> HttpTransport:
    config = VisionConfig(host="https://vision.test", access_token="secret-token")
    return HttpTransport(config, http_transport=httpx.MockTransport(recorder), **kwargs)


@pytest.mark.asyncio
async def test_post_sends_whole_request_as_body():
    recorder = Recorder(httpx.Response(200, json={"responses": [{}]}))
    transport = _transport(recorder)
    request = {"requests": [{"image": {"content": "aGVsbG8="}, "features": [{"type": "LABEL_DETECTION"}]}]}

    response = await transport.call("image_annotator.batch_annotate_images", request)

    assert response == {"responses": [{}]}
    assert recorder.request.method == "POST"
    assert recorder.request.url == "https://vision.test/v1/images:annotate"
    assert recorder.body == request
    await transport.close()


@pytest.mark.asyncio
async def test_path_fields_are_removed_from_body():
    recorder = Recorder(httpx.Response(200, json={"name": f"{PARENT}/productSets/s"}))
    transport = _transport(recorder)

    await transport.call(
        "product_search.create_product_set",
        {"parent": PARENT, "productSet": {"displayName": "Shoes"}, "productSetId": "s"},
    )

    assert recorder.request.url.path == f"/v1/{PARENT}/productSets"
    assert recorder.body == {"displayName": "Shoes"}
    assert recorder.request.url.params["productSetId"] == "s"


@pytest.mark.asyncio
async def test_get_sends_remaining_fields_as_query():
    recorder = Recorder(httpx.Response(200, json={"productSets": []}))
    transport = _transport(recorder)

    await transport.call(
        "product_search.list_product_sets", {"parent": PARENT, "pageSize": 10, "pageToken": "next"}
    )

    assert recorder.request.method == "GET"
    assert recorder.request.url.path == f"/v1/{PARENT}/productSets"
    assert dict(recorder.request.url.params) == {"pageSize": "10", "pageToken": "next"}
    assert recorder.request.content == b""


@pytest.mark.asyncio
async def test_update_fills_nested_path_field_and_flattens_field_mask():
    recorder = Recorder(httpx.Response(200, json={}))
    transport = _transport(recorder)
    product = {"name": f"{PARENT}/products/p1", "displayName": "Red shoe", "productLabels": []}

    await transport.call(
        "product_search.update_product",
        {"product": product, "updateMask": {"paths": ["display_name", "product_labels"]}},
    )

    assert recorder.request.method == "PATCH"
    assert recorder.request.url.path == f"/v1/{PARENT}/products/p1"
    assert recorder.request.url.params["updateMask"] == "display_name,product_labels"
    assert recorder.body == product


@pytest.mark.asyncio
async def test_delete_returns_empty_dict_for_empty_body():
    recorder = Recorder(httpx.Response(200))
    transport = _transport(recorder)

    response = await transport.call("product_search.delete_product", {"name": f"{PARENT}/products/p1"})

    assert response == {}
    assert recorder.request.method == "DELETE"


@pytest.mark.asyncio
async def test_missing_path_field_raises_value_error():
    transport = _transport(Recorder())

    with pytest.raises(ValueError, match="parent"):
        await transport.call("product_search.list_products", {"pageSize": 1})


@pytest.mark.asyncio
async def test_unknown_method_raises():
    transport = _transport(Recorder())

    with pytest.raises(UnknownMethodError):
        await transport.call("product_search.explode", {})


@pytest.mark.asyncio
async def test_custom_routes():
    recorder = Recorder(httpx.Response(200, json={"ok": True}))
    transport = _transport(recorder, routes={"custom.ping": RestRoute("GET", "/v1/ping")})

    assert await transport.call("custom.ping", {}) == {"ok": True}
    assert recorder.request.url.path == "/v1/ping"


@pytest.mark.asyncio
async def test_sends_credentials_and_user_agent():
    recorder = Recorder()
    transport = _transport(recorder)

    await transport.call("image_annotator.batch_annotate_files", {"requests": []})

    assert recorder.request.headers["Authorization"] == "Bearer secret-token"
    assert recorder.request.headers["User-Agent"].startswith("cloudvision-python/")


@pytest.mark.asyncio
async def test_start_call_returns_operation_snapshot():
    recorder = Recorder(
        httpx.Response(
            200,
            json={
                "name": OPERATION_NAME,
                "metadata": {
                    "@type": "type.googleapis.com/google.cloud.vision.v1.BatchOperationMetadata",
                    "state": "PROCESSING",
                },
            },
        )
    )
    transport = _transport(recorder)

    operation = await transport.start_call(
        "product_search.import_product_sets",
        {"parent": PARENT, "inputConfig": {"gcsSource": {"csvFileUri": "gs://bucket/f.csv"}}},
    )

    assert recorder.request.url.path == f"/v1/{PARENT}/productSets:import"
    assert recorder.body == {"inputConfig": {"gcsSource": {"csvFileUri": "gs://bucket/f.csv"}}}
    assert operation.name == OPERATION_NAME
    assert not operation.done
    assert operation.metadata.type_url.endswith("BatchOperationMetadata")
    assert json.loads(operation.metadata.value) == {"state": "PROCESSING"}
    assert operation.response is None


@pytest.mark.asyncio
async def test_get_operation():
    recorder = Recorder(
        httpx.Response(
            200,
            json={
                "name": OPERATION_NAME,
                "done": True,
                "error": {"code": 5, "message": "Product set not found"},
            },
        )
    )
    transport = _transport(recorder)

    operation = await transport.get_operation(OPERATION_NAME)

    assert recorder.request.method == "GET"
    assert recorder.request.url.path == f"/v1/{OPERATION_NAME}"
    assert operation.done
    assert operation.error.code == 5
    assert operation.error.message == "Product set not found"


@pytest.mark.asyncio
async def test_cancel_operation():
    recorder = Recorder(httpx.Response(200, json={}))
    transport = _transport(recorder)

    await transport.cancel_operation(OPERATION_NAME)

    assert recorder.request.method == "POST"
    assert recorder.request.url.path == f"/v1/{OPERATION_NAME}:cancel"
    assert recorder.body == {}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, code",
    [
        (400, Code.INVALID_ARGUMENT),
        (401, Code.UNAUTHENTICATED),
        (403, Code.PERMISSION_DENIED),
        (404, Code.NOT_FOUND),
        (429, Code.RESOURCE_EXHAUSTED),
        (500, Code.INTERNAL),
        (503, Code.UNAVAILABLE),
        (418, Code.UNKNOWN),
    ],
)
async def test_http_errors_map_to_canonical_codes(status_code, code):
    transport = _transport(Recorder(httpx.Response(status_code, text="failure")))

    with pytest.raises(TransportError) as exc_info:
        await transport.get_operation(OPERATION_NAME)

    assert exc_info.value.code == code


@pytest.mark.asyncio
async def test_error_body_takes_precedence():
    response = httpx.Response(
        400,
        json={"error": {"code": 400, "message": "Mask is invalid", "status": "FAILED_PRECONDITION"}},
    )
    transport = _transport(Recorder(response))

    with pytest.raises(TransportError) as exc_info:
        await transport.call("product_search.get_product", {"name": f"{PARENT}/products/p"})

    assert exc_info.value.code == Code.FAILED_PRECONDITION
    assert exc_info.value.message == "Mask is invalid"


@pytest.mark.asyncio
async def test_network_error_maps_to_unavailable():
    transport = _transport(Recorder(httpx.ConnectError("connection refused")))

    with pytest.raises(TransportError) as exc_info:
        await transport.get_operation(OPERATION_NAME)

    assert exc_info.value.code == Code.UNAVAILABLE
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_maps_to_deadline_exceeded():
    transport = _transport(Recorder(httpx.ReadTimeout("too slow")))

    with pytest.raises(TransportError) as exc_info:
        await transport.get_operation(OPERATION_NAME)

    assert exc_info.value.code == Code.DEADLINE_EXCEEDED


def test_operation_from_json_without_type():
    operation = operation_from_json({"name": "op", "done": True, "response": {}})

    assert operation.response.type_url == ""
    assert json.loads(operation.response.value) == {}


def test_error_from_response_uses_reason_phrase():
    response = httpx.Response(404, request=httpx.Request("GET", "https://vision.test/v1/x"))

    error = error_from_response(response)

    assert error.code == Code.NOT_FOUND
    assert error.message == "Not Found"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [["upstream", "unavailable"], "upstream unavailable", 42])
async def test_non_object_error_body_keeps_http_status_mapping(body):
    transport = _transport(Recorder(httpx.Response(503, json=body)))

    with pytest.raises(TransportError) as exc_info:
        await transport.get_operation(OPERATION_NAME)

    assert exc_info.value.code == Code.UNAVAILABLE
    assert exc_info.value.message == "Service Unavailable"
