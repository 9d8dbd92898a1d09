"""Push notification configuration for asynchronous task updates."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import WireModel


class PushNotificationConfig(WireModel):
    """Where and how an agent should push task updates to the client."""

    url: str = Field(..., description="Webhook URL receiving task updates")
    token: str | None = Field(default=None, description="Token echoed back for validation")
    authentication: dict[str, Any] | None = Field(
        default=None, description="Authentication details for the webhook"
    )
