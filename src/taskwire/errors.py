"""
A2A error taxonomy.

Protocol errors are named exceptions carrying a stable JSON-RPC error code and
a human-readable message. They are the only exceptions meant to cross the wire,
via :meth:`taskwire.protocols.jsonrpc.JsonRpcError.from_exception`.

Standard JSON-RPC 2.0 codes:
- -32700: Parse error
- -32600: Invalid Request
- -32601: Method not found
- -32602: Invalid params
- -32603: Internal error

A2A-specific codes (server error range):
- -32001: Task not found
- -32002: Task cannot be canceled
- -32003: Push notifications not supported
- -32004: Operation not supported

These numbers are part of the wire contract and must never be renumbered.
"""

from __future__ import annotations

from typing import Any

# Standard JSON-RPC Error Codes

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# A2A-specific error codes (using server error range)

TASK_NOT_FOUND = -32001
TASK_NOT_CANCELABLE = -32002
PUSH_NOTIFICATION_NOT_SUPPORTED = -32003
UNSUPPORTED_OPERATION = -32004


ERROR_MESSAGES: dict[int, str] = {
    PARSE_ERROR: "Invalid JSON payload",
    INVALID_REQUEST: "Request payload validation error",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid parameters",
    INTERNAL_ERROR: "Internal error",
    TASK_NOT_FOUND: "Task not found",
    TASK_NOT_CANCELABLE: "Task cannot be canceled",
    PUSH_NOTIFICATION_NOT_SUPPORTED: "Push Notification is not supported",
    UNSUPPORTED_OPERATION: "This operation is not supported",
}


class A2AError(Exception):
    """Base exception for all A2A errors."""

    pass


class JSONRPCError(A2AError):
    """
    Protocol error carrying a JSON-RPC error code.

    Args:
        message: Human-readable error message
        code: JSON-RPC error code
        data: Optional structured error detail
    """

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = INTERNAL_ERROR if code is None else code
        self.data = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class JSONParseError(JSONRPCError):
    """The payload was not valid JSON."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ERROR_MESSAGES[PARSE_ERROR], code=PARSE_ERROR, data=data)


class InvalidRequestError(JSONRPCError):
    """The payload failed structural JSON-RPC validation."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ERROR_MESSAGES[INVALID_REQUEST], code=INVALID_REQUEST, data=data)


class MethodNotFoundError(JSONRPCError):
    """The method name is not recognized."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ERROR_MESSAGES[METHOD_NOT_FOUND], code=METHOD_NOT_FOUND, data=data)


class InvalidParamsError(JSONRPCError):
    """The method parameters failed validation."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ERROR_MESSAGES[INVALID_PARAMS], code=INVALID_PARAMS, data=data)


class InternalError(JSONRPCError):
    """Unclassified internal failure."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(ERROR_MESSAGES[INTERNAL_ERROR], code=INTERNAL_ERROR, data=data)


class TaskNotFoundError(JSONRPCError):
    """The referenced task does not exist."""

    def __init__(self) -> None:
        super().__init__(ERROR_MESSAGES[TASK_NOT_FOUND], code=TASK_NOT_FOUND)


class TaskNotCancelableError(JSONRPCError):
    """The task exists but is already in a terminal state."""

    def __init__(self) -> None:
        super().__init__(ERROR_MESSAGES[TASK_NOT_CANCELABLE], code=TASK_NOT_CANCELABLE)


class PushNotificationNotSupportedError(JSONRPCError):
    """The agent does not support push notifications."""

    def __init__(self) -> None:
        super().__init__(
            ERROR_MESSAGES[PUSH_NOTIFICATION_NOT_SUPPORTED],
            code=PUSH_NOTIFICATION_NOT_SUPPORTED,
        )


class UnsupportedOperationError(JSONRPCError):
    """The requested operation is not supported by the agent."""

    def __init__(self) -> None:
        super().__init__(ERROR_MESSAGES[UNSUPPORTED_OPERATION], code=UNSUPPORTED_OPERATION)


class InvalidTransitionError(A2AError, ValueError):
    """A task state transition outside the protocol lifecycle was attempted."""

    pass


_EXCEPTIONS_BY_CODE: dict[int, type[JSONRPCError]] = {
    PARSE_ERROR: JSONParseError,
    INVALID_REQUEST: InvalidRequestError,
    METHOD_NOT_FOUND: MethodNotFoundError,
    INVALID_PARAMS: InvalidParamsError,
    INTERNAL_ERROR: InternalError,
    TASK_NOT_FOUND: TaskNotFoundError,
    TASK_NOT_CANCELABLE: TaskNotCancelableError,
    PUSH_NOTIFICATION_NOT_SUPPORTED: PushNotificationNotSupportedError,
    UNSUPPORTED_OPERATION: UnsupportedOperationError,
}


def exception_for_code(code: int, message: str | None = None, data: Any = None) -> JSONRPCError:
    """
    Rebuild the named protocol exception for a wire error.

    The fixed message of a known code is replaced by ``message`` when the
    remote side sent a more specific one. Unknown codes produce a plain
    :class:`JSONRPCError`.

    Args:
        code: JSON-RPC error code received on the wire
        message: Message received on the wire
        data: Optional error detail received on the wire

    Returns:
        Exception instance (not raised)
    """
    exc_type = _EXCEPTIONS_BY_CODE.get(code)
    if exc_type is None:
        return JSONRPCError(message or "Unknown error", code=code, data=data)

    if code in (PARSE_ERROR, INVALID_REQUEST, METHOD_NOT_FOUND, INVALID_PARAMS, INTERNAL_ERROR):
        exc = exc_type(data=data)  # type: ignore[call-arg]
    else:
        exc = exc_type()
        exc.data = data
    if message and message != exc.message:
        exc.message = message
        exc.args = (message,)
    return exc
