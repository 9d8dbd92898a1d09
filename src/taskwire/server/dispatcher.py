"""
A2A JSON-RPC dispatching.

Turns raw JSON-RPC payloads into calls on an :class:`A2AServer` and turns the
results (or raised exceptions) back into responses. This is the single place
where exceptions are translated into wire errors:

- malformed JSON                      → -32700
- not a JSON-RPC request object       → -32600
- unknown method                      → -32601
- params that fail validation         → -32602
- protocol exceptions from the server → their own code
- anything else                       → -32603 with the exception message only
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from typing import Any

from pydantic import ValidationError

from ..config import get_settings
from ..errors import (
    InvalidParamsError,
    InvalidRequestError,
    JSONParseError,
    JSONRPCError,
    MethodNotFoundError,
)
from ..models.base import WireModel
from ..protocols.jsonrpc import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from ..protocols.methods import (
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
from .base import A2AServer

logger = logging.getLogger(__name__)

Payload = str | bytes | dict[str, Any]


def _error_details(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


class JsonRpcDispatcher:
    """
    JSON-RPC 2.0 dispatcher for one A2A server.

    Args:
        server: Server whose handlers answer the task methods
        max_payload_bytes: Largest raw payload accepted (defaults to settings)
    """

    def __init__(self, server: A2AServer, max_payload_bytes: int | None = None) -> None:
        self.server = server
        self.max_payload_bytes = max_payload_bytes or get_settings().MAX_PAYLOAD_BYTES
        self._methods: dict[str, tuple[type[WireModel], Callable[[Any], Any]]] = {
            TASKS_SEND: (TaskSendParams, server.handle_send_task),
            TASKS_GET: (TaskQueryParams, server.handle_get_task),
            TASKS_CANCEL: (TaskIdParams, server.handle_cancel_task),
            TASKS_PUSH_NOTIFICATION_SET: (
                TaskPushNotificationConfig,
                server.handle_set_push_notification,
            ),
            TASKS_PUSH_NOTIFICATION_GET: (TaskIdParams, server.handle_get_push_notification),
        }
        self._streaming: dict[str, tuple[type[WireModel], Callable[[Any], Iterator[Any]]]] = {
            TASKS_SEND_SUBSCRIBE: (TaskSendParams, server.handle_send_task_streaming),
            TASKS_RESUBSCRIBE: (TaskQueryParams, server.handle_resubscribe),
        }

    def has_method(self, name: str) -> bool:
        """Check if a method is routed by this dispatcher."""
        return name in self._methods or name in self._streaming

    def parse_request(self, payload: Payload) -> JsonRpcRequest:
        """
        Parse a raw payload into a request.

        Raises:
            JSONParseError: If the payload is not valid JSON
            InvalidRequestError: If it is too large or not a JSON-RPC request
        """
        if isinstance(payload, (str, bytes)):
            size = len(payload.encode("utf-8")) if isinstance(payload, str) else len(payload)
            if size > self.max_payload_bytes:
                raise InvalidRequestError(
                    data={"reason": f"payload exceeds {self.max_payload_bytes} bytes"}
                )
            try:
                payload = json.loads(payload)
            except ValueError as exc:
                raise JSONParseError(data={"reason": str(exc)}) from exc

        if not isinstance(payload, dict):
            raise InvalidRequestError(data={"reason": "request must be a JSON object"})
        try:
            return JsonRpcRequest.from_dict(payload)
        except ValidationError as exc:
            raise InvalidRequestError(data=_error_details(exc)) from exc

    def handle_payload(self, payload: Payload) -> dict[str, Any] | None:
        """
        Handle a raw JSON-RPC payload.

        Returns:
            Response wire dictionary, or None for notifications
        """
        try:
            request = self.parse_request(payload)
        except JSONRPCError as exc:
            logger.warning("Rejected payload: %s", exc.message)
            request_id = payload.get("id") if isinstance(payload, dict) else None
            if not isinstance(request_id, (str, int)) or isinstance(request_id, bool):
                request_id = None
            return JsonRpcResponse.from_error(request_id, exc).to_dict()

        response = self.handle_request(request)
        return response.to_dict() if response is not None else None

    def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """
        Handle a parsed request.

        Streaming methods called this way answer with their last snapshot.

        Returns:
            JSON-RPC response, or None for notifications
        """
        logger.info("Handling %s (id=%s)", request.method, request.id)
        try:
            if request.method in self._streaming:
                result = None
                for result in self._invoke_streaming(request):
                    pass
            else:
                result = self._invoke(request)
            response = JsonRpcResponse.from_result(request.id, result)
        except Exception as exc:
            response = self._error_response(request, exc)

        return None if request.is_notification else response

    def stream_request(self, request: JsonRpcRequest) -> Iterator[JsonRpcResponse]:
        """
        Handle a streaming request, yielding one response per task snapshot.

        Non-streaming methods yield exactly one response. A failure ends the
        stream with an error response.
        """
        logger.info("Streaming %s (id=%s)", request.method, request.id)
        try:
            if request.method in self._streaming:
                for result in self._invoke_streaming(request):
                    yield JsonRpcResponse.from_result(request.id, result)
            else:
                yield JsonRpcResponse.from_result(request.id, self._invoke(request))
        except Exception as exc:
            yield self._error_response(request, exc)

    def _params(self, request: JsonRpcRequest, model: type[WireModel]) -> WireModel:
        if not isinstance(request.params, dict):
            raise InvalidParamsError(data={"reason": "params must be an object"})
        try:
            return model.from_dict(request.params)
        except ValidationError as exc:
            raise InvalidParamsError(data=_error_details(exc)) from exc

    def _invoke(self, request: JsonRpcRequest) -> Any:
        route = self._methods.get(request.method)
        if route is None:
            raise MethodNotFoundError(data={"method": request.method})
        model, handler = route
        return handler(self._params(request, model))

    def _invoke_streaming(self, request: JsonRpcRequest) -> Iterator[Any]:
        model, handler = self._streaming[request.method]
        yield from handler(self._params(request, model))

    def _error_response(self, request: JsonRpcRequest, exc: Exception) -> JsonRpcResponse:
        if isinstance(exc, JSONRPCError):
            logger.warning("%s (id=%s) failed: %s", request.method, request.id, exc.message)
        else:
            logger.exception("%s (id=%s) raised an unexpected error", request.method, request.id)
        return JsonRpcResponse.from_error(request.id, JsonRpcError.from_exception(exc))
