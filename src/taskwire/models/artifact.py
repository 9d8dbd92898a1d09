"""
A2A Artifact - output produced by an agent while working on a task.

Streamed outputs are sent as successive artifacts sharing a logical output:
``index`` identifies the chunk, ``append`` asks the receiver to extend the
previous chunk and ``last_chunk`` marks the end of the stream. The flags are
declarative; index coherence across a stream is the transport's concern.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import WireModel
from .parts import Part


class Artifact(WireModel):
    """Agent output composed of ordered parts."""

    parts: tuple[Part, ...] = Field(default_factory=tuple, description="Ordered content parts")
    name: str | None = Field(default=None, description="Artifact name")
    description: str | None = Field(default=None, description="Artifact description")
    index: int = Field(default=0, description="Chunk index within a streamed output")
    append: bool | None = Field(default=None, description="Extend the prior chunk's content")
    last_chunk: bool | None = Field(default=None, description="Final chunk of the stream")
    metadata: dict[str, Any] | None = Field(default=None, description="Artifact metadata")
