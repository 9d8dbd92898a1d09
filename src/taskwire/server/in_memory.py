"""
In-process A2A server.

Runs each task synchronously through a processor callable and publishes every
lifecycle step as a new snapshot in a task store:

  submitted → working → completed (processor returned artifacts)
                      → input-required (processor raised InputRequired)
                      → failed (processor raised anything else)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from ..errors import (
    PushNotificationNotSupportedError,
    TaskNotFoundError,
    UnsupportedOperationError,
)
from ..lifecycle import ensure_transition
from ..models.agent_card import AgentCard
from ..models.artifact import Artifact
from ..models.clock import Clock, system_clock
from ..models.message import Message
from ..models.parts import TextPart
from ..models.task import Task, TaskStatus
from ..models.task_state import TaskState
from ..protocols.methods import (
    TaskIdParams,
    TaskPushNotificationConfig,
    TaskQueryParams,
    TaskSendParams,
)
from .base import A2AServer
from .task_store import InMemoryTaskStore, TaskStore

logger = logging.getLogger(__name__)

TaskProcessor = Callable[[Task, Message], Sequence[Artifact]]


class InputRequired(Exception):
    """Raised by a processor to ask the caller for more input."""

    def __init__(self, prompt: str) -> None:
        super().__init__(prompt)
        self.prompt = prompt


def echo_processor(task: Task, message: Message) -> list[Artifact]:
    """Processor that answers with the text of the incoming message."""
    return [Artifact(name="Response", parts=[TextPart(text=f"Echo: {message.text_content()}")])]


class InMemoryA2AServer(A2AServer):
    """
    A2A server backed by a task store.

    Args:
        agent_card: Card describing this agent; its capabilities gate
            streaming and push notification methods
        processor: Callable producing the artifacts for a task
        store: Task store (a fresh in-memory store by default)
        clock: Time source for status timestamps
    """

    def __init__(
        self,
        agent_card: AgentCard,
        processor: TaskProcessor = echo_processor,
        store: TaskStore | None = None,
        clock: Clock = system_clock,
    ) -> None:
        super().__init__(agent_card)
        self.processor = processor
        self.store: TaskStore = store if store is not None else InMemoryTaskStore()
        self.clock = clock

    def _advance(
        self,
        task_id: str,
        state: TaskState,
        message: Message | None = None,
        artifacts: Sequence[Artifact] | None = None,
    ) -> Task:
        def step(current: Task) -> Task:
            ensure_transition(current, state)
            return current.transition(state, message=message, artifacts=artifacts, clock=self.clock)

        return self.store.update(task_id, step)

    def _run(self, params: TaskSendParams) -> Iterator[Task]:
        if params.push_notification is not None:
            self._require_push_notifications()

        existing = self.store.find(params.id)
        if existing is not None and existing.state is TaskState.INPUT_REQUIRED:
            task = self._advance(params.id, TaskState.WORKING)
        else:
            submitted = Task(
                id=params.id,
                session_id=params.session_id,
                status=TaskStatus.create(TaskState.SUBMITTED, clock=self.clock),
                metadata=params.metadata,
            )
            yield self.store.put(submitted)
            task = self._advance(params.id, TaskState.WORKING)

        if params.push_notification is not None:
            self.store.set_push_config(params.id, params.push_notification)
        yield task

        try:
            artifacts = list(self.processor(task, params.message))
        except InputRequired as exc:
            prompt = Message.text("agent", exc.prompt)
            yield self._advance(params.id, TaskState.INPUT_REQUIRED, message=prompt)
            return
        except Exception as exc:
            logger.exception("Task %s failed", params.id)
            reason = Message.text("agent", str(exc) or type(exc).__name__)
            yield self._advance(params.id, TaskState.FAILED, message=reason)
            return

        yield self._advance(params.id, TaskState.COMPLETED, artifacts=artifacts)

    def _require_push_notifications(self) -> None:
        if not self.agent_card.capabilities.push_notifications:
            raise PushNotificationNotSupportedError()

    def _require_streaming(self) -> None:
        if not self.agent_card.capabilities.streaming:
            raise UnsupportedOperationError()

    def handle_send_task(self, params: TaskSendParams) -> Task:
        return list(self._run(params))[-1]

    def handle_send_task_streaming(self, params: TaskSendParams) -> Iterator[Task]:
        self._require_streaming()
        return self._run(params)

    def handle_get_task(self, params: TaskQueryParams) -> Task:
        return self.store.get(params.id)

    def handle_cancel_task(self, params: TaskIdParams) -> Task:
        return self._advance(params.id, TaskState.CANCELED)

    def handle_set_push_notification(
        self, params: TaskPushNotificationConfig
    ) -> TaskPushNotificationConfig:
        self._require_push_notifications()
        self.store.set_push_config(params.id, params.push_notification_config)
        return params

    def handle_get_push_notification(self, params: TaskIdParams) -> TaskPushNotificationConfig:
        self._require_push_notifications()
        self.store.get(params.id)
        config = self.store.get_push_config(params.id)
        if config is None:
            raise TaskNotFoundError()
        return TaskPushNotificationConfig(id=params.id, push_notification_config=config)

    def handle_resubscribe(self, params: TaskQueryParams) -> Iterator[Task]:
        self._require_streaming()
        return iter([self.store.get(params.id)])
