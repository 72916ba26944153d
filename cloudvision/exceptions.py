from cloudvision.types.operation import Code, Status


class VisionError(Exception):
    """Base class for all errors raised by cloudvision."""


class TransportError(VisionError):
    """Raised when a call to the service fails on the network or is rejected by the service.

    Transport errors are never retried by cloudvision; retry policies belong to the transport.
    """

    def __init__(self, code: int, message: str):
        self._code = code
        self._message = message
        super().__init__(f"Call failed with code {code}: {message}")

    @property
    def code(self) -> int:
        """Return the canonical status code."""
        return self._code

    @property
    def message(self) -> str:
        return self._message


class OperationFailedError(VisionError):
    def __init__(self, operation_name: str, status: Status):
        """
        Create an OperationFailedError exception.

        Args:
            operation_name: The identifier of the failed operation, e.g. `projects/p/locations/l/operations/1`
            status:         The error the service reported for the operation.
        """
        self._operation_name = operation_name
        self._status = status
        super().__init__(
            f"Operation {operation_name} failed with code {status.code}: {status.message}"
        )

    @property
    def operation_name(self) -> str:
        return self._operation_name

    @property
    def status(self) -> Status:
        """Return the decoded error reported by the service."""
        return self._status

    @property
    def code(self) -> int:
        return self._status.code

    @property
    def message(self) -> str:
        return self._status.message


class OperationCancelledError(OperationFailedError):
    """Raised when an operation terminated because it was cancelled."""


class OperationTimeoutError(VisionError, TimeoutError):
    """Raised when waiting for an operation exceeds the wait budget.

    The operation may still complete on the server.
    """

    def __init__(self, operation_name: str, message: str):
        self._operation_name = operation_name
        super().__init__(f"Operation {operation_name}: {message}")

    @property
    def operation_name(self) -> str:
        return self._operation_name


class DecodeError(VisionError):
    """Raised when a payload cannot be decoded, usually a client/server version mismatch."""

    def __init__(self, method: str, kind: str, type_url: str, reason: str):
        self.method = method
        self.kind = kind
        self.type_url = type_url
        super().__init__(f"Failed to decode {kind} of {method} ({type_url or 'untyped'}): {reason}")


class UnknownMethodError(VisionError, KeyError):
    """Raised when a method has no route or decoder registered."""

    def __init__(self, method: str, known: list[str]):
        self.method = method
        super().__init__(f"Method '{method}' is not registered. Available methods: {known}")

    def __str__(self) -> str:
        # KeyError would quote the message
        return self.args[0]


class ResourceNameError(VisionError, ValueError):
    """Raised when a resource name does not match the expected path template."""

    def __init__(self, name: str, template: str):
        self.name = name
        self.template = template
        super().__init__(f"Resource name '{name}' does not match template '{template}'")


def status_to_error(operation_name: str, status: Status) -> OperationFailedError:
    if status.canonical_code is Code.CANCELLED:
        return OperationCancelledError(operation_name, status)
    return OperationFailedError(operation_name, status)
