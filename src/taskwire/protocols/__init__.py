"""
A2A Protocol - JSON-RPC 2.0 envelope, method names and error codes.

Example Usage:

    from taskwire.protocols import JsonRpcRequest, JsonRpcResponse, JsonRpcError
    from taskwire.errors import TaskNotFoundError

    request = JsonRpcRequest.from_dict(
        {"jsonrpc": "2.0", "id": 1, "method": "tasks/get", "params": {"id": "t-1"}}
    )
    response = JsonRpcResponse.from_error(request.id, TaskNotFoundError())
    response.to_dict()
    # {"jsonrpc": "2.0", "id": 1, "error": {"code": -32001, "message": "Task not found"}}
"""

from ..errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PUSH_NOTIFICATION_NOT_SUPPORTED,
    TASK_NOT_CANCELABLE,
    TASK_NOT_FOUND,
    UNSUPPORTED_OPERATION,
)
from .jsonrpc import JSONRPC_VERSION, JsonRpcError, JsonRpcRequest, JsonRpcResponse
from .methods import (
    ALL_METHODS,
    TASKS_CANCEL,
    TASKS_GET,
    TASKS_PUSH_NOTIFICATION_GET,
    TASKS_PUSH_NOTIFICATION_SET,
    TASKS_RESUBSCRIBE,
    TASKS_SEND,
    TASKS_SEND_SUBSCRIBE,
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)

__all__ = [
    # Envelope
    "JSONRPC_VERSION",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    # Methods
    "ALL_METHODS",
    "TASKS_CANCEL",
    "TASKS_GET",
    "TASKS_PUSH_NOTIFICATION_GET",
    "TASKS_PUSH_NOTIFICATION_SET",
    "TASKS_RESUBSCRIBE",
    "TASKS_SEND",
    "TASKS_SEND_SUBSCRIBE",
    "TaskIdParams",
    "TaskPushNotificationConfig",
    "TaskQueryParams",
    "TaskSendParams",
    # Error Codes
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "TASK_NOT_FOUND",
    "TASK_NOT_CANCELABLE",
    "PUSH_NOTIFICATION_NOT_SUPPORTED",
    "UNSUPPORTED_OPERATION",
]
