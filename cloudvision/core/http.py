"""REST/JSON transport on top of `httpx`."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from cloudvision.config import VisionConfig
from cloudvision.core.routes import CANCEL_OPERATION, GET_OPERATION, ROUTES, RestRoute
from cloudvision.exceptions import TransportError, UnknownMethodError
from cloudvision.types.operation import AnyPayload, Code, Operation, Status
from cloudvision.version import version as pkg_version

logger = logging.getLogger(__name__)

_HTTP_STATUS_TO_CODE: dict[int, Code] = {
    400: Code.INVALID_ARGUMENT,
    401: Code.UNAUTHENTICATED,
    403: Code.PERMISSION_DENIED,
    404: Code.NOT_FOUND,
    409: Code.ABORTED,
    412: Code.FAILED_PRECONDITION,
    416: Code.OUT_OF_RANGE,
    429: Code.RESOURCE_EXHAUSTED,
    499: Code.CANCELLED,
    500: Code.INTERNAL,
    501: Code.UNIMPLEMENTED,
    503: Code.UNAVAILABLE,
    504: Code.DEADLINE_EXCEEDED,
}


def _lookup(request: dict[str, Any], dotted: str) -> Any:
    value: Any = request
    for part in dotted.split("."):
        if not isinstance(value, dict) or part not in value:
            raise ValueError(f"Request is missing field '{dotted}' required in the URL")
        value = value[part]
    return value


def _without(request: dict[str, Any], field: str) -> dict[str, Any]:
    return {key: value for key, value in request.items() if key != field}


def _query_params(fields: dict[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for key, value in fields.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            if set(value) == {"paths"}:
                # field masks travel as a comma separated list
                params.append((name, ",".join(value["paths"])))
            else:
                params.extend(_query_params(value, prefix=f"{name}."))
        elif isinstance(value, list):
            params.extend((name, _query_value(item)) for item in value)
        else:
            params.append((name, _query_value(value)))
    return params


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _payload_from_json(data: dict[str, Any] | None) -> AnyPayload | None:
    if data is None:
        return None
    fields = {key: value for key, value in data.items() if key != "@type"}
    return AnyPayload(type_url=data.get("@type", ""), value=json.dumps(fields).encode())


def operation_from_json(data: dict[str, Any]) -> Operation:
    """Map the JSON rendering of an operation onto an `Operation` snapshot."""
    error = data.get("error")
    return Operation(
        name=data["name"],
        done=bool(data.get("done", False)),
        metadata=_payload_from_json(data.get("metadata")),
        response=_payload_from_json(data.get("response")),
        error=Status.model_validate(error) if error is not None else None,
    )


def error_from_response(response: httpx.Response) -> TransportError:
    """Map an error response onto a `TransportError` with a canonical code."""
    code = _HTTP_STATUS_TO_CODE.get(response.status_code, Code.UNKNOWN)
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None
    # proxies may answer with any JSON document, only Google error bodies carry details
    error = body.get("error", {}) if isinstance(body, dict) else {}
    if isinstance(error, dict):
        message = error.get("message", message)
        status_name = error.get("status")
        if status_name in Code.__members__:
            code = Code[status_name]
    return TransportError(int(code), message)


class HttpTransport:
    """Talks to the service over its REST/JSON surface."""

    def __init__(
        self,
        config: VisionConfig,
        *,
        routes: dict[str, RestRoute] | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config (VisionConfig): Endpoint, credentials and timeouts.
            routes (dict[str, RestRoute] | None): Method routes, defaults to `ROUTES`.
            http_transport (httpx.AsyncBaseTransport | None): The httpx transport to send requests
                with, e.g. `httpx.MockTransport` for testing.
        """
        self._routes = routes if routes is not None else ROUTES
        headers = {"User-Agent": f"cloudvision-python/{pkg_version}"}
        if config.access_token:
            headers["Authorization"] = f"Bearer {config.access_token}"
        self._client = httpx.AsyncClient(
            base_url=config.host,
            transport=http_transport,
            headers=headers,
            timeout=config.request_timeout,
            verify=config.verify_ssl,
        )

    async def call(self, method: str, request: dict[str, Any]) -> dict[str, Any]:
        return await self._send(self._route(method), request)

    async def start_call(self, method: str, request: dict[str, Any]) -> Operation:
        return operation_from_json(await self._send(self._route(method), request))

    async def get_operation(self, name: str) -> Operation:
        return operation_from_json(await self._send(GET_OPERATION, {"name": name}))

    async def cancel_operation(self, name: str) -> None:
        await self._send(CANCEL_OPERATION, {"name": name})

    async def close(self) -> None:
        await self._client.aclose()

    def _route(self, method: str) -> RestRoute:
        if method not in self._routes:
            raise UnknownMethodError(method, list(self._routes.keys()))
        return self._routes[method]

    def _build_request(self, route: RestRoute, request: dict[str, Any]) -> httpx.Request:
        path = route.path
        remaining = request
        while "{" in path:
            start = path.index("{")
            end = path.index("}", start)
            field = path[start + 1 : end]
            path = f"{path[:start]}{_lookup(request, field)}{path[end + 1 :]}"
            if "." not in field:
                # nested fields stay in the body they belong to
                remaining = _without(remaining, field)

        body: Any = None
        params: list[tuple[str, str]] = []
        if route.body == "*":
            body = remaining
        elif route.body is not None:
            body = remaining.get(route.body, {})
            params = _query_params(
                {key: value for key, value in remaining.items() if key != route.body}
            )
        else:
            params = _query_params(remaining)

        return self._client.build_request(route.verb, path, params=params or None, json=body)

    async def _send(self, route: RestRoute, request: dict[str, Any]) -> dict[str, Any]:
        http_request = self._build_request(route, request)
        try:
            response = await self._client.send(http_request)
        except httpx.TimeoutException as e:
            raise TransportError(int(Code.DEADLINE_EXCEEDED), str(e) or "Request timed out") from e
        except httpx.RequestError as e:
            raise TransportError(int(Code.UNAVAILABLE), str(e) or type(e).__name__) from e

        if response.is_error:
            error = error_from_response(response)
            logger.debug(f"{route.verb} {http_request.url} failed: {error}")
            raise error

        if not response.content:
            return {}
        return response.json()
