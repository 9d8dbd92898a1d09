"""
A2A Task and TaskStatus.

A Task is the unit of work tracked by id. It never changes in place: every
lifecycle step produces a new Task with the same id and an updated status or
artifact list, so a task store can publish each snapshot with a single
reference swap.

State progression (see :mod:`taskwire.lifecycle`):
  submitted → working → {input-required ⇄ working} → {completed | failed | canceled}
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from .artifact import Artifact
from .base import WireModel
from .clock import Clock, system_clock, timestamp_now
from .message import Message
from .task_state import TaskState


class TaskStatus(WireModel):
    """
    Current state of a task plus an optional explanatory message.

    ``timestamp`` defaults to the current UTC time. Callers that need
    deterministic timestamps build statuses through :meth:`create` with an
    explicit clock.
    """

    state: TaskState = Field(..., description="Current task state")
    message: Message | None = Field(default=None, description="Message explaining the state")
    timestamp: str = Field(
        default_factory=lambda: timestamp_now(), description="ISO-8601 time the status was recorded"
    )

    @field_validator("state", mode="before")
    @classmethod
    def _parse_state(cls, value: Any) -> TaskState:
        return TaskState.parse(value)

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}") from None
        return value

    @classmethod
    def create(
        cls,
        state: TaskState | str,
        message: Message | None = None,
        clock: Clock = system_clock,
    ) -> TaskStatus:
        """Build a status stamped with ``clock``."""
        return cls(state=TaskState.parse(state), message=message, timestamp=timestamp_now(clock))


class Task(WireModel):
    """A2A task: id, current status, accumulated artifacts and metadata."""

    id: str = Field(..., description="Task identifier")
    status: TaskStatus = Field(..., description="Current status")
    session_id: str | None = Field(
        default=None, description="Correlation key of the session this task belongs to"
    )
    artifacts: tuple[Artifact, ...] | None = Field(default=None, description="Produced artifacts")
    metadata: dict[str, Any] | None = Field(default=None, description="Task metadata")

    @property
    def state(self) -> TaskState:
        """Current state, read from ``status``."""
        return self.status.state

    def transition(
        self,
        state: TaskState | str,
        *,
        message: Message | None = None,
        artifacts: Sequence[Artifact] | None = None,
        clock: Clock = system_clock,
    ) -> Task:
        """
        Return a new Task with an updated status.

        The receiver is left untouched. Lifecycle legality is not checked here;
        use :func:`taskwire.lifecycle.ensure_transition` before calling this
        when producing tasks.

        Args:
            state: Target state
            message: Optional status message
            artifacts: Replacement artifact list (kept as-is when None)
            clock: Time source for the status timestamp

        Returns:
            New Task snapshot with the same id
        """
        update: dict[str, Any] = {"status": TaskStatus.create(state, message, clock=clock)}
        if artifacts is not None:
            update["artifacts"] = tuple(artifacts)
        return self.model_copy(update=update)

    def with_artifact(self, artifact: Artifact) -> Task:
        """Return a new Task with ``artifact`` appended to the artifact list."""
        return self.model_copy(update={"artifacts": (*(self.artifacts or ()), artifact)})
