import logging

import pytest

from cloudvision import VisionConfig
from cloudvision.core import ApiGateway, HttpTransport
from cloudvision.exceptions import TransportError
from cloudvision.types import Code


@pytest.fixture
def gateway(fake_transport) -> ApiGateway:
    return ApiGateway(VisionConfig(host="https://vision.test"), transport=fake_transport)


@pytest.mark.asyncio
async def test_calls_are_passed_through(gateway, fake_transport):
    fake_transport.responses["svc.method"] = {"ok": True}

    assert await gateway.transport.call("svc.method", {"a": 1}) == {"ok": True}
    assert fake_transport.calls == [("svc.method", {"a": 1})]


@pytest.mark.asyncio
async def test_calls_are_logged(gateway, fake_transport, caplog):
    fake_transport.responses["svc.method"] = {}

    with caplog.at_level(logging.INFO, logger="cloudvision"):
        await gateway.transport.call("svc.method", {})

    assert any("API CALL: call(svc.method) took" in record.message for record in caplog.records)


@pytest.mark.asyncio
async def test_errors_are_logged_and_raised_unchanged(gateway, fake_transport, caplog):
    error = TransportError(int(Code.NOT_FOUND), "missing")
    fake_transport.responses["svc.method"] = error

    with caplog.at_level(logging.INFO, logger="cloudvision"):
        with pytest.raises(TransportError) as exc_info:
            await gateway.transport.call("svc.method", {})

    assert exc_info.value is error
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "call(svc.method) failed" in errors[0].message


def test_plain_attributes_are_not_wrapped(gateway, fake_transport):
    assert gateway.transport.calls is fake_transport.calls
    assert "call" in dir(gateway.transport)


@pytest.mark.asyncio
async def test_close_closes_the_transport(gateway, fake_transport):
    await gateway.close()

    assert fake_transport.closed


@pytest.mark.asyncio
async def test_defaults_to_http_transport():
    gateway = ApiGateway(VisionConfig(host="vision.test"))

    assert isinstance(gateway._raw_transport, HttpTransport)
    assert gateway.config.host == "https://vision.test"
    await gateway.close()
