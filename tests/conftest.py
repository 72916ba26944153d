import pytest

from cloudvision import PollingSettings, Vision, VisionConfig
from tests.fakes import FakeTransport


@pytest.fixture
def polling() -> PollingSettings:
    return PollingSettings(initial_delay=0, multiplier=1.0, max_delay=0, total_timeout=5)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def vision(fake_transport, polling) -> Vision:
    config = VisionConfig(host="https://vision.test", access_token="token", polling=polling)
    return Vision(config, transport=fake_transport)
