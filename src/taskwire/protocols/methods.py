"""
A2A method names and parameter shapes.

Method names are opaque strings to the data model; routing them is the job of
a server dispatcher. The parameter models let both sides validate ``params``
with the same key tolerance as every other entity. Task ids are emitted as
``id``; ``taskId`` and ``task_id`` are accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field

from ..models.base import WireModel
from ..models.message import Message
from ..models.push_notification import PushNotificationConfig

TASKS_SEND = "tasks/send"
TASKS_SEND_SUBSCRIBE = "tasks/sendSubscribe"
TASKS_GET = "tasks/get"
TASKS_CANCEL = "tasks/cancel"
TASKS_RESUBSCRIBE = "tasks/resubscribe"
TASKS_PUSH_NOTIFICATION_SET = "tasks/pushNotification/set"
TASKS_PUSH_NOTIFICATION_GET = "tasks/pushNotification/get"

ALL_METHODS: tuple[str, ...] = (
    TASKS_SEND,
    TASKS_SEND_SUBSCRIBE,
    TASKS_GET,
    TASKS_CANCEL,
    TASKS_RESUBSCRIBE,
    TASKS_PUSH_NOTIFICATION_SET,
    TASKS_PUSH_NOTIFICATION_GET,
)

_TASK_ID = AliasChoices("id", "taskId", "task_id")


class TaskIdParams(WireModel):
    """Parameters naming a single task (tasks/cancel, tasks/pushNotification/get)."""

    id: str = Field(..., validation_alias=_TASK_ID, serialization_alias="id")
    metadata: dict[str, Any] | None = None


class TaskQueryParams(TaskIdParams):
    """Parameters of tasks/get and tasks/resubscribe."""

    history_length: int | None = Field(default=None, ge=0)


class TaskSendParams(WireModel):
    """Parameters of tasks/send and tasks/sendSubscribe."""

    id: str = Field(..., validation_alias=_TASK_ID, serialization_alias="id")
    session_id: str | None = None
    message: Message
    push_notification: PushNotificationConfig | None = None
    history_length: int | None = Field(default=None, ge=0)
    metadata: dict[str, Any] | None = None


class TaskPushNotificationConfig(WireModel):
    """Parameters and result of tasks/pushNotification/set and /get."""

    id: str = Field(..., validation_alias=_TASK_ID, serialization_alias="id")
    push_notification_config: PushNotificationConfig
