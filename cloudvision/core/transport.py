from abc import abstractmethod
from typing import Any, Protocol

from cloudvision.types.operation import Operation


class Transport(Protocol):
    """The capability the clients use to talk to the service.

    Method names are the keys of `cloudvision.core.routes.ROUTES`, e.g.
    "product_search.get_product". Requests and responses are wire dicts with camelCase keys.
    Implementations raise `TransportError` for failed calls and never retry on their own
    unless that is their documented policy.
    """

    @abstractmethod
    async def call(self, method: str, request: dict[str, Any]) -> dict[str, Any]:
        """Issue a unary call and return the response message"""
        pass

    @abstractmethod
    async def start_call(self, method: str, request: dict[str, Any]) -> Operation:
        """Issue a call that starts a long-running operation"""
        pass

    @abstractmethod
    async def get_operation(self, name: str) -> Operation:
        """Fetch the current snapshot of an operation"""
        pass

    @abstractmethod
    async def cancel_operation(self, name: str) -> None:
        """Ask the service to cancel an operation"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections"""
        pass
