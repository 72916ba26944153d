"""Client-side handles for long-running operations.

A long-running method returns an `OperationHandle` as soon as the service accepted the
request. The handle polls the service until the operation is done and decodes the result:

    ```python
    handle = await client.import_product_sets(request)
    handle.on_metadata(lambda metadata: print(metadata.state))
    response = await handle.result(timeout=300)
    ```

Several tasks may await `result()` of the same handle. They share one polling task, so
at most one poll is in flight and all of them observe the same value or error. A caller
that stops waiting (it is cancelled or its timeout expires) only stops local polling
once nobody else is waiting; the operation on the server is not affected.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum, auto
from typing import Any, Callable

from cloudvision.config import PollingSettings
from cloudvision.core.transport import Transport
from cloudvision.exceptions import DecodeError, OperationTimeoutError, status_to_error
from cloudvision.lro.decoders import DecoderPair
from cloudvision.types.operation import AnyPayload, Code, Operation

logger = logging.getLogger(__name__)

MetadataCallback = Callable[[Any], Any]


class OperationState(StrEnum):
    PENDING = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    CANCELLED = auto()


_USE_POLLING_SETTINGS: Any = object()


class OperationHandle:
    """Tracks one long-running operation started by a client call."""

    def __init__(
        self,
        operation: Operation,
        *,
        method: str,
        decoders: DecoderPair,
        transport: Transport,
        polling: PollingSettings | None = None,
    ):
        """
        Args:
            operation (Operation): The snapshot returned by the call that started the operation.
            method (str): The long-running method that started the operation, used in errors.
            decoders (DecoderPair): Decoders for the response and metadata payloads.
            transport (Transport): The transport used to poll and cancel the operation.
            polling (PollingSettings | None): Polling interval, backoff and wait budget.
        """
        self._operation = operation
        self._method = method
        self._decoders = decoders
        self._transport = transport
        self._polling = polling or PollingSettings()
        self._poll_count = 0
        self._metadata_callbacks: list[MetadataCallback] = []
        self._poller: asyncio.Task | None = None
        self._waiting = 0
        # (succeeded, value or exception), set once the operation is done
        self._outcome: tuple[bool, Any] | None = None

    def __repr__(self) -> str:
        return f"OperationHandle(name={self.name!r}, method={self._method!r}, state={self.state})"

    def __await__(self):
        return self.result().__await__()

    @property
    def name(self) -> str:
        return self._operation.name

    @property
    def method(self) -> str:
        return self._method

    @property
    def operation(self) -> Operation:
        """The last snapshot received from the service."""
        return self._operation

    @property
    def done(self) -> bool:
        return self._operation.done

    @property
    def poll_count(self) -> int:
        """Number of polls issued through this handle."""
        return self._poll_count

    @property
    def state(self) -> OperationState:
        operation = self._operation
        if not operation.done:
            return OperationState.PENDING
        if operation.error is None:
            return OperationState.SUCCEEDED
        if operation.error.canonical_code is Code.CANCELLED:
            return OperationState.CANCELLED
        return OperationState.FAILED

    @property
    def metadata(self) -> Any:
        """The decoded metadata of the last snapshot, or None if it carries none."""
        if self._operation.metadata is None:
            return None
        return self._decode("metadata", self._operation.metadata)

    def on_metadata(self, callback: MetadataCallback) -> MetadataCallback:
        """Call `callback` with the decoded metadata whenever a poll brings new metadata."""
        self._metadata_callbacks.append(callback)
        return callback

    async def poll(self) -> Operation:
        """Fetch the current state of the operation once.

        Errors of the transport are raised unchanged, nothing is retried.
        Once the operation is done, the terminal snapshot is kept and returned.
        """
        operation = await self._transport.get_operation(self.name)
        self._poll_count += 1

        previous = self._operation
        if previous.done:
            return previous

        self._operation = operation
        logger.debug(f"Polled operation {self.name} ({self._poll_count}): done={operation.done}")

        if operation.metadata is not None and operation.metadata != previous.metadata:
            try:
                metadata = self._decode("metadata", operation.metadata)
                for callback in list(self._metadata_callbacks):
                    callback(metadata)
            except Exception as e:
                # the terminal snapshot is committed, so this error is the outcome
                if operation.done:
                    self._outcome = (False, e)
                raise

        if operation.done:
            logger.info(f"Operation {self.name} finished with state {self.state}")
        return operation

    async def result(self, timeout: float | None = _USE_POLLING_SETTINGS) -> Any:
        """Wait until the operation is done and return its decoded response.

        Args:
            timeout (float | None): Seconds to wait. Defaults to `total_timeout` of the
                polling settings, None waits forever.

        Raises:
            OperationFailedError: The operation finished with an error.
            OperationTimeoutError: The operation did not finish in time.
            TransportError: Polling failed.
            DecodeError: The response could not be decoded.
        """
        if not self._operation.done:
            if timeout is _USE_POLLING_SETTINGS:
                timeout = self._polling.total_timeout
            await self._wait(timeout)
        return self._resolve()

    async def cancel(self) -> None:
        """Ask the service to cancel the operation.

        Cancellation is best effort. Poll or wait for the result to see whether the
        operation was actually cancelled.
        """
        logger.info(f"Requesting cancellation of operation {self.name}")
        await self._transport.cancel_operation(self.name)

    async def _wait(self, timeout: float | None) -> None:
        if self._poller is None or self._poller.done():
            self._poller = asyncio.create_task(
                self._poll_until_done(), name=f"poll-operation-{self.name}"
            )
        poller = self._poller

        self._waiting += 1
        try:
            await asyncio.wait_for(asyncio.shield(poller), timeout)
        except TimeoutError:
            if poller.done() and not poller.cancelled() and poller.exception() is not None:
                raise poller.exception()
            raise OperationTimeoutError(
                self.name, f"not done after waiting {timeout} seconds"
            ) from None
        finally:
            self._waiting -= 1
            if self._waiting == 0 and not poller.done():
                logger.debug(f"Nobody is waiting for operation {self.name}, stop polling")
                poller.cancel()
                # a cancelled poller is only done once it ran again, the next waiter starts a new one
                if self._poller is poller:
                    self._poller = None

    async def _poll_until_done(self) -> None:
        max_attempts = self._polling.max_attempts
        attempts = 0
        delays = self._polling.delays()
        while not self._operation.done:
            if max_attempts is not None and attempts >= max_attempts:
                raise OperationTimeoutError(self.name, f"not done after {attempts} polls")
            await asyncio.sleep(next(delays))
            await self.poll()
            attempts += 1

    def _resolve(self) -> Any:
        if self._outcome is None:
            operation = self._operation
            if operation.error is not None:
                self._outcome = (False, status_to_error(operation.name, operation.error))
            elif operation.response is None:
                self._outcome = (True, None)
            else:
                self._outcome = (True, self._decode("response", operation.response))

        succeeded, value = self._outcome
        if not succeeded:
            raise value
        return value

    def _decode(self, kind: str, payload: AnyPayload) -> Any:
        decoder = self._decoders.response if kind == "response" else self._decoders.metadata
        try:
            return decoder(payload.value)
        except Exception as e:
            raise DecodeError(self._method, kind, payload.type_url, str(e)) from e
