"""A2A task lifecycle states."""

from __future__ import annotations

from enum import Enum
from typing import Any


class TaskState(str, Enum):
    """
    Closed set of task states.

    - SUBMITTED: Task received, not yet started
    - WORKING: Task is being processed
    - INPUT_REQUIRED: Agent waits for more input from the caller
    - COMPLETED: Task finished successfully (terminal)
    - CANCELED: Task was canceled (terminal)
    - FAILED: Task ended with an error (terminal)
    - UNKNOWN: State cannot be determined
    """

    SUBMITTED = "submitted"
    WORKING = "working"
    INPUT_REQUIRED = "input-required"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> TaskState:
        """
        Coerce a wire value into a TaskState.

        Raises:
            ValueError: If the value is outside the closed set; the message
                lists the legal states
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def _missing_(cls, value: object) -> TaskState:
        legal = ", ".join(state.value for state in cls)
        raise ValueError(f"Invalid task state: {value!r}. Must be one of: {legal}")

    @property
    def terminal(self) -> bool:
        """True for completed, canceled and failed."""
        return self in TERMINAL_STATES

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[TaskState] = frozenset(
    {TaskState.COMPLETED, TaskState.CANCELED, TaskState.FAILED}
)
