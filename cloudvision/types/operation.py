from enum import IntEnum

import pydantic

from cloudvision.types.base import WireModel


class Code(IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class Status(WireModel):
    """Error detail reported by the service."""

    code: int = 0
    message: str = ""
    details: list[dict] = pydantic.Field(default_factory=list)

    @property
    def canonical_code(self) -> Code:
        try:
            return Code(self.code)
        except ValueError:
            return Code.UNKNOWN


class AnyPayload(pydantic.BaseModel):
    """An opaque, typed payload. `value` is only interpreted by a registered decoder."""

    model_config = {"frozen": True}

    type_url: str = ""
    value: bytes = b""


class Operation(pydantic.BaseModel):
    """Snapshot of a server-side long-running operation.

    Only the server changes an operation; the client replaces its snapshot on every poll.
    """

    model_config = {"frozen": True}

    name: str
    done: bool = False
    metadata: AnyPayload | None = None
    response: AnyPayload | None = None
    error: Status | None = None
