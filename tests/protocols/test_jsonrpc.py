"""
Tests for the JSON-RPC 2.0 envelope.

This test suite validates:
- Request parsing, projection and notifications
- Success and error responses, including result/error exclusivity
- Conversion between exceptions and wire errors
"""

from typing import Any

import pytest
from pydantic import ValidationError

from taskwire.errors import (
    INTERNAL_ERROR,
    TASK_NOT_FOUND,
    InvalidParamsError,
    JSONRPCError,
    TaskNotFoundError,
)
from taskwire.models import Clock, Message, Task, TaskStatus
from taskwire.protocols import (
    TASKS_SEND,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    TaskSendParams,
)


# ============================================================================
# Request Tests
# ============================================================================


def test_parse_send_request(send_request_payload: dict[str, Any]) -> None:
    """Test parsing the canonical tasks/send request."""
    request = JsonRpcRequest.from_dict(send_request_payload)

    assert request.jsonrpc == "2.0"
    assert request.method == TASKS_SEND
    assert request.id == 1
    assert isinstance(request.params, dict)
    params = TaskSendParams.from_dict(request.params)
    assert params.id == "t-1"
    assert params.session_id == "s-1"
    assert params.message.text_content() == "hi"


def test_request_round_trip(send_request_payload: dict[str, Any]) -> None:
    """Test that the request projection matches its input."""
    request = JsonRpcRequest.from_dict(send_request_payload)

    assert request.to_dict() == send_request_payload


def test_request_projects_model_params() -> None:
    """Test that model values inside params are emitted as wire dictionaries."""
    request = JsonRpcRequest(
        method=TASKS_SEND,
        params={"id": "t-1", "message": Message.text("user", "hi")},
        id="r-1",
    )

    assert request.to_dict()["params"] == {
        "id": "t-1",
        "message": {"role": "user", "parts": [{"type": "text", "text": "hi"}]},
    }


def test_request_with_list_params() -> None:
    """Test positional params."""
    request = JsonRpcRequest(method="echo", params=["a", 1], id=7)

    assert request.to_dict() == {"jsonrpc": "2.0", "method": "echo", "params": ["a", 1], "id": 7}


def test_notification_has_no_id() -> None:
    """Test that a request without id is a notification."""
    request = JsonRpcRequest.from_dict(
        {"jsonrpc": "2.0", "method": "tasks/cancel", "params": {"id": "t-1"}}
    )

    assert request.is_notification
    assert "id" not in request.to_dict()


def test_request_with_id_is_not_notification() -> None:
    """Test string ids."""
    request = JsonRpcRequest(method="tasks/get", id="abc")

    assert not request.is_notification


@pytest.mark.parametrize(
    "payload",
    [
        {"jsonrpc": "1.0", "method": "tasks/get", "id": 1},
        {"jsonrpc": "2.0", "id": 1},
        {"jsonrpc": "2.0", "method": "tasks/get", "params": "t-1", "id": 1},
    ],
)
def test_invalid_request_fails(payload: dict[str, Any]) -> None:
    """Test structural validation of the envelope."""
    with pytest.raises(ValidationError):
        JsonRpcRequest.from_dict(payload)


def test_request_from_json() -> None:
    """Test parsing a request from JSON text."""
    request = JsonRpcRequest.from_json('{"jsonrpc": "2.0", "method": "tasks/get", "id": "x"}')

    assert request.method == "tasks/get"
    assert request.id == "x"


# ============================================================================
# Response Tests
# ============================================================================


def test_success_response_projects_models(clock: Clock) -> None:
    """Test that a Task result is emitted as its wire dictionary."""
    task = Task(id="t-1", status=TaskStatus.create("completed", clock=clock))

    response = JsonRpcResponse.from_result(1, task)

    assert response.is_success
    assert response.to_dict() == {
        "jsonrpc": "2.0",
        "id": 1,
        "result": {
            "id": "t-1",
            "status": {"state": "completed", "timestamp": "2025-01-15T10:30:00Z"},
        },
    }


def test_success_response_from_wire() -> None:
    """Test parsing a success response."""
    response = JsonRpcResponse.from_dict({"jsonrpc": "2.0", "id": 1, "result": {"ok": True}})

    assert response.is_success
    assert response.result == {"ok": True}
    assert response.error is None


def test_error_response_from_exception() -> None:
    """Test the canonical task-not-found error response."""
    response = JsonRpcResponse.from_error(1, TaskNotFoundError())

    assert not response.is_success
    assert response.to_dict() == {
        "jsonrpc": "2.0",
        "id": 1,
        "error": {"code": -32001, "message": "Task not found"},
    }


def test_error_response_from_dict() -> None:
    """Test building an error response from a raw error object."""
    response = JsonRpcResponse.from_error("r-1", {"code": -32601, "message": "Method not found"})

    assert isinstance(response.error, JsonRpcError)
    assert response.error.code == -32601


def test_error_response_from_wire() -> None:
    """Test parsing an error response with data."""
    response = JsonRpcResponse.from_dict(
        {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Invalid JSON payload", "data": {"reason": "eof"}},
        }
    )

    assert not response.is_success
    assert response.error is not None
    assert response.error.data == {"reason": "eof"}


def test_result_and_error_are_exclusive() -> None:
    """Test that a response carrying both result and error is rejected."""
    with pytest.raises(ValidationError, match="must not carry both result and error"):
        JsonRpcResponse.from_dict(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "result": {"ok": True},
                "error": {"code": -32603, "message": "Internal error"},
            }
        )


def test_raise_for_error() -> None:
    """Test that error responses raise the matching named exception."""
    response = JsonRpcResponse.from_dict(
        {"jsonrpc": "2.0", "id": 1, "error": {"code": -32001, "message": "Task not found"}}
    )

    with pytest.raises(TaskNotFoundError):
        response.raise_for_error()


def test_raise_for_error_noop_on_success() -> None:
    """Test that success responses do not raise."""
    JsonRpcResponse.from_result(1, {"ok": True}).raise_for_error()


# ============================================================================
# Error Object Tests
# ============================================================================


def test_error_from_protocol_exception_keeps_data() -> None:
    """Test that protocol exceptions keep code, message and data."""
    error = JsonRpcError.from_exception(InvalidParamsError(data=[{"loc": ["id"]}]))

    assert error.to_dict() == {
        "code": -32602,
        "message": "Invalid parameters",
        "data": [{"loc": ["id"]}],
    }


def test_error_from_unexpected_exception() -> None:
    """Test that other exceptions become internal errors with only their message."""
    error = JsonRpcError.from_exception(RuntimeError("boom"))

    assert error.to_dict() == {"code": INTERNAL_ERROR, "message": "boom"}


def test_error_to_exception() -> None:
    """Test rebuilding the named exception from an error object."""
    exc = JsonRpcError(code=TASK_NOT_FOUND, message="Task not found").to_exception()

    assert isinstance(exc, TaskNotFoundError)


def test_error_with_unknown_code_to_exception() -> None:
    """Test that unknown codes rebuild a plain protocol error."""
    exc = JsonRpcError(code=-32099, message="Custom failure").to_exception()

    assert type(exc) is JSONRPCError
    assert exc.code == -32099
    assert exc.message == "Custom failure"
