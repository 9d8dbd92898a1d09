"""
A2A server interface.

An A2A server answers the seven task methods for one agent. Transports (HTTP,
SSE, message queues) own the wire; they hand validated parameter models to a
server and send back whatever it returns, usually through
:class:`taskwire.server.dispatcher.JsonRpcDispatcher`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..errors import UnsupportedOperationError
from ..models.agent_card import AgentCard
from ..models.task import Task
from ..protocols.methods import (
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)


class A2AServer(ABC):
    """Contract every A2A server implementation satisfies."""

    def __init__(self, agent_card: AgentCard) -> None:
        self.agent_card = agent_card

    @abstractmethod
    def handle_send_task(self, params: TaskSendParams) -> Task:
        """Handle tasks/send and return the resulting task."""

    def handle_send_task_streaming(self, params: TaskSendParams) -> Iterator[Task]:
        """
        Handle tasks/sendSubscribe, yielding every published task snapshot.

        Raises:
            UnsupportedOperationError: Unless overridden by a streaming server
        """
        raise UnsupportedOperationError()

    @abstractmethod
    def handle_get_task(self, params: TaskQueryParams) -> Task:
        """Handle tasks/get."""

    @abstractmethod
    def handle_cancel_task(self, params: TaskIdParams) -> Task:
        """Handle tasks/cancel and return the canceled task."""

    @abstractmethod
    def handle_set_push_notification(
        self, params: TaskPushNotificationConfig
    ) -> TaskPushNotificationConfig:
        """Handle tasks/pushNotification/set."""

    @abstractmethod
    def handle_get_push_notification(self, params: TaskIdParams) -> TaskPushNotificationConfig:
        """Handle tasks/pushNotification/get."""

    def handle_resubscribe(self, params: TaskQueryParams) -> Iterator[Task]:
        """Handle tasks/resubscribe, yielding task snapshots from now on."""
        raise UnsupportedOperationError()
