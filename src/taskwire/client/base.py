"""
A2A client interface.

A client consumes an A2A agent: it discovers the agent card and sends task
methods as JSON-RPC requests. Transports subclass :class:`A2AClient` and
implement :meth:`A2AClient.discover` and :meth:`A2AClient.send_request`; the
task-level methods are built on top of those two.
"""

from __future__ import annotations

import itertools
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from ..models.agent_card import AgentCard
from ..models.message import Message
from ..models.push_notification import PushNotificationConfig
from ..models.task import Task
from ..protocols.jsonrpc import JsonRpcRequest, JsonRpcResponse
from ..protocols.methods import (
    TASKS_CANCEL,
    TASKS_GET,
    TASKS_PUSH_NOTIFICATION_GET,
    TASKS_PUSH_NOTIFICATION_SET,
    TASKS_RESUBSCRIBE,
    TASKS_SEND,
    TASKS_SEND_SUBSCRIBE,
    TaskPushNotificationConfig,
    TaskSendParams,
)


class A2AClient(ABC):
    """
    Base class for A2A clients.

    Args:
        agent_url: Endpoint URL of the agent
    """

    def __init__(self, agent_url: str) -> None:
        self.agent_url = agent_url
        self.agent_card: AgentCard | None = None
        self._counter = itertools.count(1)
        self._prefix = uuid.uuid4().hex[:8]

    @abstractmethod
    def discover(self) -> AgentCard:
        """Fetch the agent card of the agent."""

    @abstractmethod
    def send_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Send one request and return its response."""

    @abstractmethod
    def send_streaming_request(self, request: JsonRpcRequest) -> Iterator[JsonRpcResponse]:
        """Send one streaming request and yield each response event."""

    def _generate_request_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"

    def build_request(
        self,
        method: str,
        params: dict[str, Any] | list[Any] | None = None,
        request_id: str | int | None = None,
    ) -> JsonRpcRequest:
        """
        Create a JSON-RPC request.

        Args:
            method: Method name to invoke
            params: Method parameters (dict or list)
            request_id: Optional request ID (auto-generated if None)

        Returns:
            JSON-RPC request object
        """
        if request_id is None:
            request_id = self._generate_request_id()
        return JsonRpcRequest(method=method, params=params, id=request_id)

    def build_notification(
        self, method: str, params: dict[str, Any] | list[Any] | None = None
    ) -> JsonRpcRequest:
        """Create a JSON-RPC notification (no response expected)."""
        return JsonRpcRequest(method=method, params=params, id=None)

    def parse_response(self, data: dict[str, Any]) -> JsonRpcResponse:
        """
        Parse a JSON-RPC response from raw data.

        Raises:
            ValidationError: If response is invalid
        """
        return JsonRpcResponse.from_dict(data)

    def _call(self, method: str, params: dict[str, Any]) -> Any:
        response = self.send_request(self.build_request(method, params))
        response.raise_for_error()
        return response.result

    def send_task(
        self, task_id: str, message: Message, session_id: str | None = None
    ) -> Task:
        """
        Send a task to the agent.

        Raises:
            JSONRPCError: The protocol error returned by the agent
        """
        params = TaskSendParams(id=task_id, session_id=session_id, message=message)
        return Task.from_dict(self._call(TASKS_SEND, params.to_dict()))

    def send_task_streaming(
        self, task_id: str, message: Message, session_id: str | None = None
    ) -> Iterator[Task]:
        """Send a task and yield each task snapshot the agent streams back."""
        params = TaskSendParams(id=task_id, session_id=session_id, message=message)
        request = self.build_request(TASKS_SEND_SUBSCRIBE, params.to_dict())
        for response in self.send_streaming_request(request):
            response.raise_for_error()
            yield Task.from_dict(response.result)

    def resubscribe(self, task_id: str) -> Iterator[Task]:
        """Yield task snapshots of an already running task."""
        request = self.build_request(TASKS_RESUBSCRIBE, {"id": task_id})
        for response in self.send_streaming_request(request):
            response.raise_for_error()
            yield Task.from_dict(response.result)

    def get_task(self, task_id: str) -> Task:
        """Get the current state of a task."""
        return Task.from_dict(self._call(TASKS_GET, {"id": task_id}))

    def cancel_task(self, task_id: str) -> Task:
        """Cancel a task."""
        return Task.from_dict(self._call(TASKS_CANCEL, {"id": task_id}))

    def set_push_notification(
        self, task_id: str, config: PushNotificationConfig
    ) -> TaskPushNotificationConfig:
        """Set the push notification configuration of a task."""
        params = TaskPushNotificationConfig(id=task_id, push_notification_config=config)
        result = self._call(TASKS_PUSH_NOTIFICATION_SET, params.to_dict())
        return TaskPushNotificationConfig.from_dict(result)

    def get_push_notification(self, task_id: str) -> TaskPushNotificationConfig:
        """Get the push notification configuration of a task."""
        result = self._call(TASKS_PUSH_NOTIFICATION_GET, {"id": task_id})
        return TaskPushNotificationConfig.from_dict(result)
