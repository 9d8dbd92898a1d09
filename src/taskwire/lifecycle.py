"""
Task lifecycle rules.

The Task model itself does not police transitions; these helpers encode the
protocol contract that task producers must respect:

  submitted → working → {input-required ⇄ working} → {completed | failed | canceled}

Non-terminal tasks may be canceled or failed at any point. ``working`` may be
re-entered to publish progress messages. ``unknown`` is a recovery state that
may move anywhere. Terminal states accept no further transition.
"""

from __future__ import annotations

from .errors import InvalidTransitionError, TaskNotCancelableError
from .models.task import Task
from .models.task_state import TERMINAL_STATES, TaskState

VALID_TRANSITIONS: dict[TaskState, frozenset[TaskState]] = {
    TaskState.SUBMITTED: frozenset({TaskState.WORKING, TaskState.CANCELED, TaskState.FAILED}),
    TaskState.WORKING: frozenset(
        {
            TaskState.WORKING,
            TaskState.INPUT_REQUIRED,
            TaskState.COMPLETED,
            TaskState.FAILED,
            TaskState.CANCELED,
        }
    ),
    TaskState.INPUT_REQUIRED: frozenset({TaskState.WORKING, TaskState.CANCELED, TaskState.FAILED}),
    TaskState.UNKNOWN: frozenset(set(TaskState) - {TaskState.UNKNOWN}),
    TaskState.COMPLETED: frozenset(),
    TaskState.CANCELED: frozenset(),
    TaskState.FAILED: frozenset(),
}

__all__ = [
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "ensure_cancelable",
    "ensure_transition",
    "validate_transition",
]


def validate_transition(current: TaskState | str, target: TaskState | str) -> bool:
    """Return True when moving from ``current`` to ``target`` is allowed."""
    return TaskState.parse(target) in VALID_TRANSITIONS[TaskState.parse(current)]


def ensure_cancelable(task: Task) -> None:
    """
    Check that a task may still be canceled.

    Raises:
        TaskNotCancelableError: If the task is already in a terminal state
    """
    if task.state.terminal:
        raise TaskNotCancelableError()


def ensure_transition(task: Task, target: TaskState | str) -> TaskState:
    """
    Check that ``task`` may move to ``target``.

    Cancellation of a terminal task is reported with the protocol error
    ``TaskNotCancelableError``; every other illegal move is a local
    ``InvalidTransitionError``.

    Returns:
        The parsed target state
    """
    target_state = TaskState.parse(target)
    if target_state is TaskState.CANCELED:
        ensure_cancelable(task)
    if not validate_transition(task.state, target_state):
        raise InvalidTransitionError(
            f"Task {task.id}: cannot move from {task.state.value} to {target_state.value}"
        )
    return target_state
