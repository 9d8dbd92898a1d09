"""
A2A Message - one communication turn between client and agent.

The client speaks with role ``"user"``, the agent with role ``"agent"``. A
message carries a non-empty, ordered list of Parts; order is rendering order.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .base import WireModel
from .parts import DataPart, Part, TextPart

Role = Literal["user", "agent"]

ROLES: tuple[str, ...] = ("user", "agent")


class Message(WireModel):
    """A2A message with role, parts and optional metadata."""

    role: Role = Field(..., description="Sender role: 'user' or 'agent'")
    parts: tuple[Part, ...] = Field(..., min_length=1, description="Ordered content parts")
    metadata: dict[str, Any] | None = Field(default=None, description="Message metadata")

    @classmethod
    def text(cls, role: Role, text: str, metadata: dict[str, Any] | None = None) -> Message:
        """Build a message holding a single TextPart."""
        return cls(role=role, parts=[TextPart(text=text)], metadata=metadata)

    def text_content(self) -> str:
        """Join the text of all TextParts with newlines."""
        return "\n".join(part.text for part in self.parts if isinstance(part, TextPart))

    def first_data(self) -> dict[str, Any] | list[Any] | None:
        """Return the payload of the first DataPart, if any."""
        for part in self.parts:
            if isinstance(part, DataPart):
                return part.data
        return None
