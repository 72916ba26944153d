import functools
import inspect
import logging
import time
from typing import TypeVar

from cloudvision.config import VisionConfig
from cloudvision.core.http import HttpTransport
from cloudvision.core.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Interceptor:
    """Logs duration and failures of every call made through the wrapped transport."""

    def __init__(self, instance: T):
        self._instance = instance

    def __getattr__(self, name):
        original_attr = getattr(self._instance, name)
        if not callable(original_attr):
            return original_attr

        if inspect.iscoroutinefunction(original_attr):

            @functools.wraps(original_attr)
            async def async_wrapper(*args, **kwargs):
                start = time.monotonic()
                try:
                    return await original_attr(*args, **kwargs)
                except Exception as e:
                    logger.error(f"API CALL: {_describe(name, args)} failed with error: {e}")
                    logger.debug(f"API CALL FAILED: {name} with args={args}, kwargs={kwargs}")
                    raise
                finally:
                    duration = time.monotonic() - start
                    logger.info(f"API CALL: {_describe(name, args)} took {duration:.2f} seconds")
                    logger.debug(f"API CALL: {name} with args={args}, kwargs={kwargs}")

            return async_wrapper

        return original_attr

    # provides tab completion in python interpreter
    def __dir__(self):
        return self._instance.__dir__()


def _describe(name: str, args: tuple) -> str:
    # the first argument is the method or the operation name
    if args and isinstance(args[0], str):
        return f"{name}({args[0]})"
    return name


def _intercept(transport: T) -> T:
    # we ignore the type error here because
    # we want the return type to be the same as the original instance to not break typing support
    return _Interceptor(transport)  # type: ignore[return-value]


class ApiGateway:
    """Owns the transport shared by all service clients."""

    def __init__(self, config: VisionConfig, transport: Transport | None = None):
        """
        Args:
            config (VisionConfig): The client configuration.
            transport (Transport | None): A custom transport, e.g. a fake for testing.
                Defaults to an `HttpTransport` built from `config`.
        """
        self.config = config
        self._raw_transport = transport or HttpTransport(config)
        self.transport: Transport = _intercept(self._raw_transport)
        logger.debug(f"Vision API gateway initialized for {config.host}")

    async def close(self):
        await self._raw_transport.close()
