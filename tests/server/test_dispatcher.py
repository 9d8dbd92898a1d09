"""
Tests for JSON-RPC dispatching.

This test suite validates:
- Routing of every task method to the server
- Translation of each failure class into its wire error code
- Notifications, payload limits and streaming responses
"""

import json
import logging
from typing import Any

import pytest

from taskwire.models import AgentCard, AgentCardBuilder, Clock, Task
from taskwire.protocols import ALL_METHODS, JsonRpcRequest, TaskQueryParams
from taskwire.server import InMemoryA2AServer, JsonRpcDispatcher


@pytest.fixture
def dispatcher(echo_card: AgentCard, clock: Clock) -> JsonRpcDispatcher:
    return JsonRpcDispatcher(InMemoryA2AServer(echo_card, clock=clock))


@pytest.fixture
def plain_dispatcher() -> JsonRpcDispatcher:
    """Dispatcher for an agent without streaming or push notifications."""
    card = AgentCardBuilder("Plain", "http://localhost:8081/a2a", "1.0.0").build()
    return JsonRpcDispatcher(InMemoryA2AServer(card))


def _request(method: str, params: Any, request_id: Any = 1) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params}


def _send_params(task_id: str = "t-1", text: str = "hi") -> dict[str, Any]:
    return {"id": task_id, "message": {"role": "user", "parts": [{"type": "text", "text": text}]}}


# ============================================================================
# Routing Tests
# ============================================================================


def test_routes_every_method(dispatcher: JsonRpcDispatcher) -> None:
    """Test that all task methods are routed."""
    assert all(dispatcher.has_method(name) for name in ALL_METHODS)
    assert not dispatcher.has_method("tasks/explode")


def test_send_task(dispatcher: JsonRpcDispatcher, send_request_payload: dict[str, Any]) -> None:
    """Test the canonical tasks/send exchange from JSON text."""
    response = dispatcher.handle_payload(json.dumps(send_request_payload))

    assert response is not None
    assert response["jsonrpc"] == "2.0"
    assert response["id"] == 1
    assert "error" not in response
    result = response["result"]
    assert result["id"] == "t-1"
    assert result["sessionId"] == "s-1"
    assert result["status"] == {"state": "completed", "timestamp": "2025-01-15T10:30:00Z"}
    assert result["artifacts"][0]["parts"] == [{"type": "text", "text": "Echo: hi"}]


def test_accepts_bytes_and_dicts(dispatcher: JsonRpcDispatcher) -> None:
    """Test that raw bytes and already decoded payloads are handled alike."""
    raw = json.dumps(_request("tasks/send", _send_params("a"))).encode()

    from_bytes = dispatcher.handle_payload(raw)
    from_dict = dispatcher.handle_payload(_request("tasks/send", _send_params("b")))

    assert from_bytes is not None and from_bytes["result"]["status"]["state"] == "completed"
    assert from_dict is not None and from_dict["result"]["status"]["state"] == "completed"


def test_get_task_after_send(dispatcher: JsonRpcDispatcher) -> None:
    """Test that tasks/get returns the stored snapshot."""
    dispatcher.handle_payload(_request("tasks/send", _send_params()))

    response = dispatcher.handle_payload(_request("tasks/get", {"id": "t-1"}, "r-2"))

    assert response is not None
    assert response["id"] == "r-2"
    assert response["result"]["status"]["state"] == "completed"


def test_push_notification_round_trip(dispatcher: JsonRpcDispatcher) -> None:
    """Test tasks/pushNotification/set followed by /get."""
    dispatcher.handle_payload(_request("tasks/send", _send_params()))
    config = {"id": "t-1", "pushNotificationConfig": {"url": "https://client.example.com/hook"}}

    set_response = dispatcher.handle_payload(_request("tasks/pushNotification/set", config))
    get_response = dispatcher.handle_payload(_request("tasks/pushNotification/get", {"id": "t-1"}))

    assert set_response is not None and set_response["result"] == config
    assert get_response is not None and get_response["result"] == config


def test_notification_gets_no_response(dispatcher: JsonRpcDispatcher) -> None:
    """Test that a request without id is executed but not answered."""
    payload = {"jsonrpc": "2.0", "method": "tasks/send", "params": _send_params()}

    assert dispatcher.handle_payload(payload) is None
    assert dispatcher.server.handle_get_task(TaskQueryParams(id="t-1")).id == "t-1"


# ============================================================================
# Error Translation Tests
# ============================================================================


def test_parse_error(dispatcher: JsonRpcDispatcher) -> None:
    """Test that malformed JSON yields -32700 without an id."""
    response = dispatcher.handle_payload('{"jsonrpc": "2.0", "method": ')

    assert response is not None
    assert "id" not in response
    assert response["error"]["code"] == -32700
    assert response["error"]["message"] == "Invalid JSON payload"
    assert "reason" in response["error"]["data"]


def test_non_object_payload(dispatcher: JsonRpcDispatcher) -> None:
    """Test that a JSON array is not a request."""
    response = dispatcher.handle_payload("[1, 2, 3]")

    assert response is not None
    assert response["error"]["code"] == -32600


def test_invalid_request_keeps_id(dispatcher: JsonRpcDispatcher) -> None:
    """Test that structural failures echo a usable request id."""
    response = dispatcher.handle_payload({"jsonrpc": "2.0", "id": 5})

    assert response is not None
    assert response["id"] == 5
    assert response["error"]["code"] == -32600
    assert response["error"]["message"] == "Request payload validation error"
    assert response["error"]["data"][0]["loc"] == ["method"]


def test_oversized_payload(echo_card: AgentCard) -> None:
    """Test that payloads above the size limit are rejected before parsing."""
    dispatcher = JsonRpcDispatcher(InMemoryA2AServer(echo_card), max_payload_bytes=32)

    response = dispatcher.handle_payload(json.dumps(_request("tasks/send", _send_params())))

    assert response is not None
    assert response["error"]["code"] == -32600
    assert "exceeds 32 bytes" in response["error"]["data"]["reason"]


def test_method_not_found(dispatcher: JsonRpcDispatcher) -> None:
    """Test that unknown methods yield -32601 naming the method."""
    response = dispatcher.handle_payload(_request("tasks/explode", {}))

    assert response is not None
    assert response["error"] == {
        "code": -32601,
        "message": "Method not found",
        "data": {"method": "tasks/explode"},
    }


@pytest.mark.parametrize(
    "params",
    [
        {"id": "t-1"},
        {"id": "t-1", "message": {"role": "robot", "parts": [{"type": "text", "text": "x"}]}},
        ["t-1"],
        None,
    ],
)
def test_invalid_params(dispatcher: JsonRpcDispatcher, params: Any) -> None:
    """Test that params failing validation yield -32602."""
    response = dispatcher.handle_payload(_request("tasks/send", params))

    assert response is not None
    assert response["error"]["code"] == -32602
    assert response["error"]["message"] == "Invalid parameters"


def test_task_not_found(dispatcher: JsonRpcDispatcher) -> None:
    """Test the canonical task-not-found response."""
    response = dispatcher.handle_payload(_request("tasks/get", {"id": "missing"}))

    assert response == {
        "jsonrpc": "2.0",
        "id": 1,
        "error": {"code": -32001, "message": "Task not found"},
    }


def test_task_not_cancelable(dispatcher: JsonRpcDispatcher) -> None:
    """Test that canceling a completed task yields -32002."""
    dispatcher.handle_payload(_request("tasks/send", _send_params()))

    response = dispatcher.handle_payload(_request("tasks/cancel", {"id": "t-1"}))

    assert response is not None
    assert response["error"]["code"] == -32002


def test_push_notification_not_supported(plain_dispatcher: JsonRpcDispatcher) -> None:
    """Test that push methods on an agent without the capability yield -32003."""
    response = plain_dispatcher.handle_payload(
        _request("tasks/pushNotification/get", {"id": "t-1"})
    )

    assert response is not None
    assert response["error"]["code"] == -32003


def test_streaming_not_supported(plain_dispatcher: JsonRpcDispatcher) -> None:
    """Test that streaming methods on an agent without the capability yield -32004."""
    response = plain_dispatcher.handle_payload(_request("tasks/sendSubscribe", _send_params()))

    assert response is not None
    assert response["error"]["code"] == -32004


def test_unexpected_error_is_internal(
    echo_card: AgentCard, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that unclassified failures become -32603 with only their message."""

    class BrokenServer(InMemoryA2AServer):
        def handle_get_task(self, params: TaskQueryParams) -> Task:
            raise RuntimeError("storage offline")

    dispatcher = JsonRpcDispatcher(BrokenServer(echo_card))

    with caplog.at_level(logging.ERROR, logger="taskwire.server.dispatcher"):
        response = dispatcher.handle_payload(_request("tasks/get", {"id": "t-1"}))

    assert response is not None
    assert response["error"] == {"code": -32603, "message": "storage offline"}
    assert "raised an unexpected error" in caplog.text


def test_rejected_payload_is_logged(
    dispatcher: JsonRpcDispatcher, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that protocol-level rejections are logged as warnings."""
    with caplog.at_level(logging.WARNING, logger="taskwire.server.dispatcher"):
        dispatcher.handle_payload("not json")

    assert "Rejected payload: Invalid JSON payload" in caplog.text


# ============================================================================
# Streaming Tests
# ============================================================================


def test_stream_send_subscribe(dispatcher: JsonRpcDispatcher) -> None:
    """Test that tasks/sendSubscribe streams one response per snapshot."""
    request = JsonRpcRequest.from_dict(_request("tasks/sendSubscribe", _send_params(), "s-1"))

    responses = list(dispatcher.stream_request(request))

    assert [r.id for r in responses] == ["s-1", "s-1", "s-1"]
    assert [r.result.state.value for r in responses] == ["submitted", "working", "completed"]


def test_streaming_method_via_handle_request(dispatcher: JsonRpcDispatcher) -> None:
    """Test that a streaming method answered once returns the final snapshot."""
    request = JsonRpcRequest.from_dict(_request("tasks/sendSubscribe", _send_params()))

    response = dispatcher.handle_request(request)

    assert response is not None
    assert response.to_dict()["result"]["status"]["state"] == "completed"


def test_stream_plain_method(dispatcher: JsonRpcDispatcher) -> None:
    """Test that a non-streaming method yields a single response."""
    dispatcher.handle_payload(_request("tasks/send", _send_params()))
    request = JsonRpcRequest.from_dict(_request("tasks/get", {"id": "t-1"}))

    responses = list(dispatcher.stream_request(request))

    assert len(responses) == 1
    assert responses[0].is_success


def test_stream_error_ends_stream(dispatcher: JsonRpcDispatcher) -> None:
    """Test that a failure is streamed as a final error response."""
    request = JsonRpcRequest.from_dict(_request("tasks/resubscribe", {"id": "missing"}))

    responses = list(dispatcher.stream_request(request))

    assert len(responses) == 1
    assert responses[0].error is not None
    assert responses[0].error.code == -32001
