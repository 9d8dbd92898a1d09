"""
Task storage - publication point for task snapshots.

Tasks are immutable, so storage only ever swaps whole snapshots. The store
guarantees a single writer per task id: :meth:`InMemoryTaskStore.update` runs
the read-decide-publish step under that task's lock, so two transitions of the
same task never interleave while different tasks proceed independently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol

from ..errors import TaskNotFoundError
from ..models.push_notification import PushNotificationConfig
from ..models.task import Task

logger = logging.getLogger(__name__)

TaskUpdate = Callable[[Task], Task]


class TaskStore(Protocol):
    """
    Protocol for task stores.

    Defines the interface that any storage backend must implement.
    """

    def get(self, task_id: str) -> Task:
        """
        Get the current snapshot of a task.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        ...

    def find(self, task_id: str) -> Task | None:
        """Get the current snapshot of a task, or None."""
        ...

    def put(self, task: Task) -> Task:
        """Publish ``task`` as the current snapshot for its id."""
        ...

    def update(self, task_id: str, fn: TaskUpdate) -> Task:
        """
        Atomically replace a task with ``fn(current)``.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        ...

    def delete(self, task_id: str) -> bool:
        """Remove a task and its push notification config; False if absent."""
        ...

    def set_push_config(self, task_id: str, config: PushNotificationConfig) -> None:
        """Attach a push notification config to a task."""
        ...

    def get_push_config(self, task_id: str) -> PushNotificationConfig | None:
        """Get the push notification config of a task, if any."""
        ...


class InMemoryTaskStore:
    """
    In-memory implementation of the task store.

    Suitable for development, testing, and single-process deployments.
    """

    def __init__(self) -> None:
        """Initialize in-memory storage."""
        self._tasks: dict[str, Task] = {}
        self._push_configs: dict[str, PushNotificationConfig] = {}
        self._guard = threading.Lock()
        self._task_locks: dict[str, threading.Lock] = {}

    def _lock_for(self, task_id: str) -> threading.Lock:
        with self._guard:
            lock = self._task_locks.get(task_id)
            if lock is None:
                lock = self._task_locks[task_id] = threading.Lock()
            return lock

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def find(self, task_id: str) -> Task | None:
        """Get the current snapshot of a task, or None."""
        return self._tasks.get(task_id)

    def get(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    def put(self, task: Task) -> Task:
        with self._lock_for(task.id):
            self._publish(task)
        return task

    def update(self, task_id: str, fn: TaskUpdate) -> Task:
        if task_id not in self._tasks:
            raise TaskNotFoundError()
        with self._lock_for(task_id):
            current = self.get(task_id)
            updated = fn(current)
            if updated.id != task_id:
                raise ValueError(f"Update of task {task_id} returned task {updated.id}")
            self._publish(updated)
        return updated

    def _publish(self, task: Task) -> None:
        previous = self._tasks.get(task.id)
        self._tasks[task.id] = task
        logger.debug(
            "Task %s: %s -> %s",
            task.id,
            previous.state.value if previous else "<new>",
            task.state.value,
        )

    def delete(self, task_id: str) -> bool:
        """Remove a task along with its push config and lock."""
        with self._lock_for(task_id):
            removed = self._tasks.pop(task_id, None)
            self._push_configs.pop(task_id, None)
            with self._guard:
                self._task_locks.pop(task_id, None)
        if removed is not None:
            logger.debug("Task %s: deleted", task_id)
        return removed is not None

    def set_push_config(self, task_id: str, config: PushNotificationConfig) -> None:
        self.get(task_id)
        self._push_configs[task_id] = config

    def get_push_config(self, task_id: str) -> PushNotificationConfig | None:
        return self._push_configs.get(task_id)

    def list_all(self) -> list[Task]:
        """List current snapshots of all tasks."""
        return list(self._tasks.values())
